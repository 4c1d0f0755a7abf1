# photothing/app/exceptions.py
from contextlib import contextmanager
from typing import Iterator, Optional, TypeVar

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
import logging

logger = logging.getLogger(__name__)

T = TypeVar("T")

SERVER_ERROR_MESSAGE = "Internal server error"


class ApiError(Exception):
    """Error with an HTTP status that is safe to show to API clients."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, headers: Optional[dict] = None):
        super().__init__(message)
        self.message = message
        self.headers = headers

    @property
    def is_user_error(self) -> bool:
        return self.status_code < 500

    def __eq__(self, other) -> bool:
        return (
            type(self) is type(other)
            and self.message == other.message
        )

    def __hash__(self) -> int:
        return hash((type(self), self.message))


class BadRequestError(ApiError):
    status_code = status.HTTP_400_BAD_REQUEST


class UnauthorizedError(ApiError):
    status_code = status.HTTP_401_UNAUTHORIZED

    def __init__(self, message: str = "Username or password is invalid", headers: Optional[dict] = None):
        super().__init__(message, headers)


class ForbiddenError(ApiError):
    status_code = status.HTTP_403_FORBIDDEN


class NotFoundError(ApiError):
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, message: str = "Not found", headers: Optional[dict] = None):
        super().__init__(message, headers)


class ServerError(ApiError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str = SERVER_ERROR_MESSAGE, headers: Optional[dict] = None):
        super().__init__(message, headers)


def not_found(value: Optional[T], message: str = "Not found") -> T:
    """Return ``value`` or raise NotFoundError when it is missing."""
    if value is None:
        raise NotFoundError(message)
    return value


@contextmanager
def server_errors(db: Optional[Session] = None) -> Iterator[None]:
    """
    Turn unexpected database failures into an opaque ServerError.

    The full error is logged; the open transaction (if any) is rolled back.
    """
    try:
        yield
    except SQLAlchemyError as exc:
        logger.exception("Database error: %s", exc)
        if db is not None:
            db.rollback()
        raise ServerError() from exc


def register_exception_handlers(app: FastAPI):

    @app.exception_handler(ApiError)
    async def api_error_handler(request: Request, exc: ApiError):
        if not exc.is_user_error:
            logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
        return JSONResponse(
            status_code=exc.status_code,
            content={"detail": exc.message},
            headers=exc.headers,
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled error: {exc}")
        return JSONResponse(
            status_code=500,
            content={"detail": SERVER_ERROR_MESSAGE},
        )

    return app

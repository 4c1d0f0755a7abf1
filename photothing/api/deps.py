"""Dependencies for API endpoints."""
from functools import lru_cache
from typing import Optional

from fastapi import Depends, Query, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from photothing.app.config import settings
from photothing.app.exceptions import ForbiddenError, NotFoundError, UnauthorizedError, server_errors
from photothing.core.hashing import PublicIdCodec
from photothing.core.security import decode_token
from photothing.db.base import get_db
from photothing.db.pagination import Pagination
from photothing.models.user import User
from photothing.repositories.user_repo import UserRepository
from photothing.services.auth import USER_COOKIE, is_subscriber
from photothing.services.messaging.emailer import Emailer, init_emailer
from photothing.services.storage.s3 import S3Service

security = HTTPBearer(auto_error=False)

CLEAR_USER_COOKIE = f"{USER_COOKIE}=; Max-Age=0; Path=/; HttpOnly; SameSite=lax"


def _credentials_error(clear_cookie: bool = False) -> UnauthorizedError:
    headers = {"WWW-Authenticate": "Bearer"}
    if clear_cookie:
        headers["Set-Cookie"] = CLEAR_USER_COOKIE
    return UnauthorizedError("Could not validate credentials", headers=headers)


def get_current_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    db: Session = Depends(get_db),
) -> User:
    """
    Get current authenticated user from a JWT.

    The token comes from the Bearer header or, failing that, the login
    cookie. The user is re-read from the database on every request.
    """
    from_cookie = credentials is None
    token = request.cookies.get(USER_COOKIE) if from_cookie else credentials.credentials
    if not token:
        raise _credentials_error()

    payload = decode_token(token)
    if payload is None or payload.get("type") != "access":
        raise _credentials_error(clear_cookie=from_cookie)

    try:
        user_id = int(payload.get("sub"))
    except (TypeError, ValueError):
        raise _credentials_error(clear_cookie=from_cookie)

    with server_errors(db):
        user = UserRepository(db).get(user_id)
    if user is None:
        raise _credentials_error(clear_cookie=True)
    return user


def get_subscriber(current_user: User = Depends(get_current_user)) -> User:
    """Verify the user has an active subscription."""
    if not is_subscriber(current_user):
        raise ForbiddenError("An active subscription is required")
    return current_user


def get_admin(current_user: User = Depends(get_current_user)) -> User:
    """Verify the user is an admin. Non-admins see the route as missing."""
    if not current_user.is_admin:
        raise NotFoundError()
    return current_user


@lru_cache()
def get_storage() -> S3Service:
    return S3Service.from_settings(settings)


@lru_cache()
def get_codec() -> PublicIdCodec:
    return PublicIdCodec(settings.ID_SALT, min_length=settings.ID_MIN_LENGTH)


@lru_cache()
def get_emailer() -> Emailer:
    return init_emailer(settings)


def get_pagination(
    key: Optional[str] = Query(None, description="Return rows with ids after this key"),
    page_size: Optional[str] = Query(None, description="Rows per page, default 30"),
) -> Pagination:
    """Paging params; values that don't parse fall back to the defaults."""
    return Pagination.from_query({"key": key, "page_size": page_size})

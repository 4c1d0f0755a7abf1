# photothing/app/middleware.py
from fastapi import FastAPI, Request
from starlette.middleware.httpsredirect import HTTPSRedirectMiddleware
import time
import logging

from .config import Settings

logger = logging.getLogger(__name__)


def strict_transport_security(max_age: int, include_subdomains: bool = False) -> str:
    """Value for the Strict-Transport-Security response header."""
    value = f"max-age={max_age}"
    if include_subdomains:
        value += "; includeSubDomains"
    return value


def register_middleware(app: FastAPI, settings: Settings):

    hsts = strict_transport_security(
        settings.HSTS_MAX_AGE_SECONDS,
        settings.HSTS_INCLUDE_SUBDOMAINS,
    )

    @app.middleware("http")
    async def add_sts_header(request: Request, call_next):
        response = await call_next(request)
        response.headers["Strict-Transport-Security"] = hsts
        return response

    @app.middleware("http")
    async def log_request_time(request: Request, call_next):
        start = time.time()
        response = await call_next(request)
        duration = (time.time() - start) * 1000
        logger.info(f"{request.method} {request.url.path} | {response.status_code} | {duration:.2f} ms")
        return response

    if settings.is_production:
        app.add_middleware(HTTPSRedirectMiddleware)

    return app

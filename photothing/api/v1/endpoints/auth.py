"""Authentication endpoints."""
import logging

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from photothing.api.deps import get_current_user, get_emailer
from photothing.app.config import settings
from photothing.app.exceptions import UnauthorizedError
from photothing.db.base import get_db
from photothing.models.user import User
from photothing.schemas.auth import (
    MessageResponse,
    PasswordResetRequest,
    PasswordResetResult,
    RegisterResponse,
    TokenResponse,
    UserLogin,
)
from photothing.services import auth as auth_service
from photothing.services.messaging.emailer import Emailer

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/register", response_model=RegisterResponse)
def register(login: UserLogin, db: Session = Depends(get_db)):
    """
    Register a new account.

    Answers with the email whether or not it was already registered;
    does not log the user in.
    """
    return auth_service.create_user(db, login)


@router.post("/login", response_model=TokenResponse)
def login(login: UserLogin, response: Response, db: Session = Depends(get_db)):
    """
    Log in with email and password.

    The access token is returned in the body and set as an http-only cookie.
    """
    credentials = auth_service.try_login_user(db, login)
    if credentials is None:
        raise UnauthorizedError()
    response.set_cookie(
        auth_service.USER_COOKIE,
        credentials.access_token,
        max_age=settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60,
        httponly=True,
        secure=settings.is_production,
        samesite="lax",
    )
    return credentials


@router.post("/logout", response_model=MessageResponse)
def logout(response: Response, current_user: User = Depends(get_current_user)):
    response.delete_cookie(auth_service.USER_COOKIE)
    return MessageResponse(message="Logged out")


@router.post("/password-reset", response_model=MessageResponse)
def start_password_reset(
    request: PasswordResetRequest,
    db: Session = Depends(get_db),
    emailer: Emailer = Depends(get_emailer),
):
    """Email a reset token. Always succeeds so registered emails can't be probed."""
    auth_service.start_password_reset(db, request.email, emailer)
    return MessageResponse(message="If that account exists a reset email is on its way")


@router.post("/password-reset/{uuid}", response_model=PasswordResetResult, status_code=status.HTTP_200_OK)
def finish_password_reset(uuid: str, login: UserLogin, db: Session = Depends(get_db)):
    return PasswordResetResult(success=auth_service.handle_password_reset(db, login, uuid))

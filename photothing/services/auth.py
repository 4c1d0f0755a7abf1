"""Registration, login and password resets."""
from datetime import date, timedelta
from typing import Optional
import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from photothing.app.config import settings
from photothing.app.exceptions import BadRequestError, server_errors
from photothing.core.security import (
    burn_verify,
    create_access_token,
    hash_password,
    validate_credentials,
    verify_password,
)
from photothing.models.user import User
from photothing.repositories.user_repo import PasswordResetRepository, UserRepository
from photothing.schemas.auth import RegisterResponse, TokenResponse, UserLogin
from photothing.services.messaging.emailer import Emailer

logger = logging.getLogger(__name__)

USER_COOKIE = "u"


def _validated_hash(login: UserLogin) -> str:
    """Validate credentials and hash the password; 400 with an error token otherwise."""
    error = validate_credentials(login.email, login.password)
    if error is not None:
        raise BadRequestError(error)
    try:
        return hash_password(login.password)
    except ValueError as exc:
        raise BadRequestError(str(exc))


def create_user(db: Session, login: UserLogin) -> RegisterResponse:
    """
    Register a new account.

    The answer is the same whether or not the email is already in use.
    """
    hashed = _validated_hash(login)
    try:
        user = UserRepository(db).create_user(login.email, hashed)
    except SQLAlchemyError as exc:
        db.rollback()
        logger.error("Error inserting new user (%s): %s", login.email, exc)
        return RegisterResponse(email=login.email)
    logger.info("Registered user %s", user.id)
    return RegisterResponse(email=user.email)


def try_login_user(db: Session, login: UserLogin) -> Optional[TokenResponse]:
    """
    Check an email/password pair. None when either is wrong.

    Database errors are logged and treated as a failed login.
    """
    try:
        user = UserRepository(db).by_email(login.email)
    except SQLAlchemyError as exc:
        db.rollback()
        logger.error("Error fetching user (%s): %s", login.email, exc)
        return None

    if user is None:
        # same cost as a real check so timing doesn't reveal registered emails
        burn_verify()
        return None
    if not verify_password(login.password, user.password):
        return None

    token = create_access_token({"sub": str(user.id)})
    return TokenResponse(access_token=token, email=user.email)


def is_subscriber(user: User, today: Optional[date] = None) -> bool:
    today = today or date.today()
    return user.subscription_expires is not None and user.subscription_expires >= today


def start_password_reset(db: Session, email: str, emailer: Emailer) -> bool:
    """
    Create a reset token and email it. Unknown emails do nothing.

    Returns:
        True when a reset was created
    """
    with server_errors(db):
        user = UserRepository(db).by_email(email)
        if user is None:
            return False
        reset = PasswordResetRepository(db).create_for(user)

    emailer.send_message(user.email, f"Your password reset token is '{reset.uuid}'", subject="Password reset")
    return True


def handle_password_reset(db: Session, login: UserLogin, uuid: str) -> bool:
    """
    Set a new password using a reset token.

    The token must belong to ``login.email`` and be recent. Token removal
    and the password change commit together. False does not say which
    check failed.
    """
    hashed = _validated_hash(login)

    with server_errors(db):
        users = UserRepository(db)
        resets = PasswordResetRepository(db, timedelta(hours=settings.PASSWORD_RESET_TTL_HOURS))
        changed = False
        user = users.for_update(login.email)
        if user is not None:
            reset = resets.by_uuid(user, uuid)
            if reset is not None:
                resets.delete(reset, commit=False)
                users.change_password(user, hashed)
                changed = True
        db.commit()
    return changed

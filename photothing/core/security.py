"""Security utilities for authentication."""
from datetime import datetime, timedelta, timezone
from functools import lru_cache
from typing import Optional, Dict, Any
import logging
import uuid

from email_validator import EmailNotValidError, validate_email
from jose import JWTError, jwt
from passlib.context import CryptContext
from zxcvbn import zxcvbn

from photothing.app.config import settings

logger = logging.getLogger(__name__)

# Use bcrypt_sha256 to avoid bcrypt's 72-byte input limit.
# Keep "bcrypt" in the list so older bcrypt-only hashes still verify.
pwd_context = CryptContext(
    schemes=["bcrypt_sha256", "bcrypt"],
    deprecated="auto",
    bcrypt_sha256__rounds=settings.BCRYPT_ROUNDS,
    bcrypt__rounds=settings.BCRYPT_ROUNDS,
)

# These errors are API-facing, return tokens rather than english
PW_SHORT_ERROR = "PW_TOO_SHORT_8_MIN"
PW_SIMPLE_ERROR = "PW_TOO_SIMPLE"
EMAIL_ERROR = "INVALID_EMAIL"

PW_MIN_LENGTH = 8
PW_MIN_SCORE = 3


def new_uuid() -> str:
    """32 hex characters, no dashes."""
    return uuid.uuid4().hex


def validate_credentials(email: str, password: str) -> Optional[str]:
    """
    Check a registration/reset email and password.

    Returns:
        None when valid, otherwise one of the API error tokens
    """
    if len(password) < PW_MIN_LENGTH:
        return PW_SHORT_ERROR
    strength = zxcvbn(password, user_inputs=[email])
    if strength["score"] < PW_MIN_SCORE:
        return PW_SIMPLE_ERROR
    try:
        validate_email(email, check_deliverability=False)
    except EmailNotValidError:
        return EMAIL_ERROR
    return None


def hash_password(password: str) -> str:
    if not isinstance(password, str):
        raise ValueError("Password must be a string")
    if password == "":
        raise ValueError("Password cannot be empty")
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except (ValueError, TypeError) as exc:
        logger.warning("password verify failed: %s", exc)
        return False


@lru_cache(maxsize=1)
def _dummy_hash() -> str:
    return pwd_context.hash("run verify here so attackers can't use timing")


def burn_verify() -> None:
    """Spend the same time as a real verify when there is no user to check."""
    pwd_context.verify("can't use timing attacks against login", _dummy_hash())


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    """Create JWT access token."""
    to_encode = data.copy()
    if expires_delta:
        expire = datetime.now(timezone.utc) + expires_delta
    else:
        expire = datetime.now(timezone.utc) + timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)

    to_encode.update({"exp": expire, "type": "access"})
    encoded_jwt = jwt.encode(to_encode, settings.JWT_SECRET_KEY, algorithm=settings.JWT_ALGORITHM)
    return encoded_jwt


def decode_token(token: str) -> Optional[Dict[str, Any]]:
    """Decode and validate JWT token."""
    try:
        payload = jwt.decode(token, settings.JWT_SECRET_KEY, algorithms=[settings.JWT_ALGORITHM])
        return payload
    except JWTError:
        return None

"""Authentication schemas."""
from typing import Optional

from pydantic import BaseModel, Field


class UserLogin(BaseModel):
    """
    Email and password, used for registration, login and password reset.

    Validation happens in the auth service so the API can answer with
    its own error tokens.
    """
    email: str = Field(..., max_length=254)
    password: str = Field(..., max_length=1024)


class RegisterResponse(BaseModel):
    email: str


class TokenResponse(BaseModel):
    """Response after successful login."""
    access_token: str
    token_type: str = "bearer"
    email: str


class PasswordResetRequest(BaseModel):
    email: str = Field(..., max_length=254)


class PasswordResetResult(BaseModel):
    success: bool


class MessageResponse(BaseModel):
    message: str
    detail: Optional[str] = None

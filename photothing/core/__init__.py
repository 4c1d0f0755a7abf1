"""
Core package initializer.

This package provides core utilities such as password hashing, token
handling, credential validation and the public id codec.
"""

from .security import (
    new_uuid,
    validate_credentials,
    create_access_token,
    decode_token,
    hash_password,
    verify_password,
    burn_verify,
)
from .hashing import PublicIdCodec

__all__ = [
    # Security
    "new_uuid",
    "validate_credentials",
    "create_access_token",
    "decode_token",
    "hash_password",
    "verify_password",
    "burn_verify",
    # Public ids
    "PublicIdCodec",
]

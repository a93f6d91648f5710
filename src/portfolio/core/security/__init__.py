"""Security utilities - password hashing and access tokens.

Re-exports all security-related functions for convenience.
"""

from src.portfolio.core.security.crypto import (
    DUMMY_PASSWORD_HASH,
    TokenType,
    create_access_token,
    decode_token,
    hash_password,
    verify_password,
)

__all__ = [
    "DUMMY_PASSWORD_HASH",
    "TokenType",
    "create_access_token",
    "decode_token",
    "hash_password",
    "verify_password",
]

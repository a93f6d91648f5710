"""Cryptographic utilities - password hashing and JWT access tokens."""

import secrets
from datetime import UTC, datetime, timedelta
from typing import Any
from uuid import UUID

import argon2
from jose import jwt

from src.portfolio.core.config import get_settings


class TokenType:
    """Token type constants."""

    ACCESS = "access"


def _create_password_hasher() -> argon2.PasswordHasher:
    """Create password hasher with settings from config."""
    settings = get_settings()
    return argon2.PasswordHasher(
        time_cost=settings.argon2_time_cost,
        memory_cost=settings.argon2_memory_cost,
        parallelism=settings.argon2_parallelism,
    )


_password_hasher = _create_password_hasher()


def hash_password(password: str) -> str:
    """Hash password using Argon2id."""
    return _password_hasher.hash(password)


def verify_password(password: str, hashed: str) -> bool:
    """Verify password against hash. Returns False on any error."""
    try:
        _password_hasher.verify(hashed, password)
        return True
    except argon2.exceptions.VerifyMismatchError:
        return False
    except argon2.exceptions.InvalidHashError:
        return False


# Verified against when the login email is unknown, so both paths cost the same
DUMMY_PASSWORD_HASH = hash_password(secrets.token_urlsafe(32))


def create_access_token(
    admin_id: str | UUID,
    email: str,
    expires_delta: timedelta | None = None,
) -> str:
    """Create JWT access token for the admin."""
    settings = get_settings()

    if expires_delta:
        expire = datetime.now(UTC) + expires_delta
    else:
        expire = datetime.now(UTC) + timedelta(minutes=settings.access_token_expire_minutes)

    to_encode = {
        "sub": str(admin_id),
        "email": email,
        "exp": expire,
        "type": TokenType.ACCESS,
    }
    return jwt.encode(  # type: ignore[no-any-return]
        to_encode,
        settings.jwt_secret_key,
        algorithm=settings.jwt_algorithm,
    )


def decode_token(token: str) -> dict[str, Any]:
    """Decode and validate a JWT.

    Raises:
        jose.ExpiredSignatureError: If the token has expired.
        jose.JWTError: If the token is malformed or the signature is invalid.
    """
    settings = get_settings()
    return jwt.decode(  # type: ignore[no-any-return]
        token,
        settings.jwt_secret_key,
        algorithms=[settings.jwt_algorithm],
    )

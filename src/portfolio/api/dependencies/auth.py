"""Authentication dependencies."""

from typing import Annotated, Any
from uuid import UUID

from fastapi import Depends, Header
from jose import ExpiredSignatureError, JWTError

from src.portfolio.api.dependencies.repositories import AdminRepo
from src.portfolio.core.exceptions import ApiError
from src.portfolio.core.logging import bind_admin_context
from src.portfolio.core.security import TokenType, decode_token
from src.portfolio.models import Admin

_BEARER_PREFIX = "Bearer "


def _extract_bearer_token(authorization: str | None) -> str | None:
    if not authorization or not authorization.startswith(_BEARER_PREFIX):
        return None
    token = authorization[len(_BEARER_PREFIX) :].strip()
    return token or None


def _decode_access_token(token: str) -> UUID:
    """Validate an access token and return the admin id it was issued to."""
    try:
        payload: dict[str, Any] = decode_token(token)
    except ExpiredSignatureError as e:
        raise ApiError.token_expired() from e
    except JWTError as e:
        raise ApiError.invalid_token() from e

    if payload.get("type") != TokenType.ACCESS:
        raise ApiError.invalid_token()

    try:
        return UUID(str(payload.get("sub")))
    except ValueError as e:
        raise ApiError.invalid_token() from e


async def get_current_admin(
    admin_repo: AdminRepo,
    authorization: Annotated[str | None, Header()] = None,
) -> Admin:
    """Resolve the admin from the bearer token.

    Raises:
        ApiError: 401 with UNAUTHORIZED, INVALID_TOKEN or TOKEN_EXPIRED.
    """
    token = _extract_bearer_token(authorization)
    if token is None:
        raise ApiError.unauthorized("No authentication token provided")

    admin_id = _decode_access_token(token)
    admin = await admin_repo.get_by_id(admin_id)
    if admin is None:
        raise ApiError.unauthorized("Admin not found")

    bind_admin_context(admin.id)
    return admin


async def get_optional_admin(
    admin_repo: AdminRepo,
    authorization: Annotated[str | None, Header()] = None,
) -> Admin | None:
    """Like get_current_admin, but anonymous or invalid tokens yield None."""
    token = _extract_bearer_token(authorization)
    if token is None:
        return None

    try:
        admin_id = _decode_access_token(token)
    except ApiError:
        return None

    admin = await admin_repo.get_by_id(admin_id)
    if admin is not None:
        bind_admin_context(admin.id)
    return admin


CurrentAdmin = Annotated[Admin, Depends(get_current_admin)]
OptionalAdmin = Annotated[Admin | None, Depends(get_optional_admin)]

"""Test helper functions for common data creation patterns."""

from typing import TypeVar

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import SQLModel

from src.portfolio.core.security import create_access_token
from src.portfolio.models import Admin

T = TypeVar("T", bound=SQLModel)


async def persist(session: AsyncSession, *entities: T) -> list[T]:
    """Add entities and commit, returning them refreshed.

    Args:
        session: Database session
        *entities: Model instances, usually built by a factory

    Returns:
        The same instances, in order
    """
    session.add_all(entities)
    await session.commit()
    for entity in entities:
        await session.refresh(entity)
    return list(entities)


def bearer_headers(admin: Admin) -> dict[str, str]:
    """Authorization header carrying a fresh access token for ``admin``."""
    return {"Authorization": f"Bearer {create_access_token(admin.id, admin.email)}"}

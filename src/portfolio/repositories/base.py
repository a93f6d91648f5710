"""Base repository with common CRUD operations."""

from typing import Any, Generic, TypeVar
from uuid import UUID

from sqlalchemy import func
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import SQLModel, select

ModelType = TypeVar("ModelType", bound=SQLModel)


class BaseRepository(Generic[ModelType]):
    """Base repository providing common database operations.

    Repositories handle data access only. Transaction control (commit)
    should be done in the service layer.
    """

    model: type[ModelType]

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, id: UUID) -> ModelType | None:
        """Get a record by its primary key."""
        result = await self.session.execute(
            select(self.model).where(self.model.id == id)  # type: ignore[attr-defined]
        )
        return result.scalar_one_or_none()

    async def get_many_by_ids(self, ids: list[UUID]) -> list[ModelType]:
        result = await self.session.execute(
            select(self.model).where(self.model.id.in_(ids))  # type: ignore[attr-defined]
        )
        return list(result.scalars().all())

    async def count(self, *criteria: Any) -> int:
        """Count records matching optional WHERE criteria."""
        query = select(func.count()).select_from(self.model)
        if criteria:
            query = query.where(*criteria)
        result = await self.session.execute(query)
        return int(result.scalar_one())

    def add(self, entity: ModelType) -> None:
        """Add entity to session (no flush/commit)."""
        self.session.add(entity)

    async def delete(self, entity: ModelType) -> None:
        """Mark entity for deletion (no commit)."""
        await self.session.delete(entity)


class SlugRepository(BaseRepository[ModelType]):
    """Repository for models addressed by a unique slug."""

    async def get_by_slug(self, slug: str) -> ModelType | None:
        result = await self.session.execute(
            select(self.model).where(self.model.slug == slug)  # type: ignore[attr-defined]
        )
        return result.scalar_one_or_none()

    async def slug_taken(self, slug: str, exclude_id: UUID | None = None) -> bool:
        """Check if a slug is used by a record other than ``exclude_id``."""
        existing = await self.get_by_slug(slug)
        if existing is None:
            return False
        return existing.id != exclude_id  # type: ignore[attr-defined]

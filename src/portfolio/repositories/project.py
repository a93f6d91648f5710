"""Repository for Project entity."""

from sqlmodel import col, select

from src.portfolio.models import Project
from src.portfolio.repositories.base import SlugRepository


class ProjectRepository(SlugRepository[Project]):
    model = Project

    async def list_public(
        self,
        category: str | None = None,
        featured_only: bool = False,
        limit: int | None = None,
    ) -> list[Project]:
        """List projects for the public site: featured first, then manual order, newest year."""
        query = select(Project)
        if category is not None:
            query = query.where(Project.category == category)
        if featured_only:
            query = query.where(Project.featured == True)  # noqa: E712
        query = query.order_by(
            col(Project.featured).desc(),
            col(Project.order).asc(),
            col(Project.year).desc(),
        )
        if limit is not None:
            query = query.limit(limit)

        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def list_all(self) -> list[Project]:
        """List all projects in display order, newest first within an order slot."""
        result = await self.session.execute(
            select(Project).order_by(col(Project.order).asc(), col(Project.created_at).desc())
        )
        return list(result.scalars().all())

"""Project management service."""

from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.portfolio.core.exceptions import ApiError
from src.portfolio.core.logging import get_logger
from src.portfolio.core.uploads import discard_uploaded_file
from src.portfolio.models import Project
from src.portfolio.models.base import utc_now
from src.portfolio.repositories import ProjectRepository
from src.portfolio.schemas.project import ProjectCreate, ProjectUpdate, ReorderItem

logger = get_logger(__name__)


class ProjectService:
    """Project service - public listing and admin CRUD."""

    def __init__(self, project_repo: ProjectRepository, session: AsyncSession):
        self.project_repo = project_repo
        self.session = session

    async def list_public(
        self,
        category: str | None = None,
        featured_only: bool = False,
        limit: int | None = None,
    ) -> list[Project]:
        return await self.project_repo.list_public(
            category=category, featured_only=featured_only, limit=limit
        )

    async def get_by_slug(self, slug: str) -> Project:
        project = await self.project_repo.get_by_slug(slug)
        if project is None:
            raise ApiError.not_found("Project")
        return project

    async def list_all(self) -> list[Project]:
        return await self.project_repo.list_all()

    async def get(self, project_id: UUID) -> Project:
        project = await self.project_repo.get_by_id(project_id)
        if project is None:
            raise ApiError.not_found("Project")
        return project

    async def create(self, data: ProjectCreate) -> Project:
        """Create a project.

        Raises:
            ApiError: 409 if the slug is already taken.
        """
        if await self.project_repo.slug_taken(data.slug):
            raise ApiError.conflict("A project with this slug already exists")

        project = Project(**data.model_dump(mode="json"))
        self.project_repo.add(project)
        await self._commit(project)
        logger.info("Project created", project_id=str(project.id), slug=project.slug)
        return project

    async def update(self, project_id: UUID, data: ProjectUpdate) -> Project:
        """Apply a partial update.

        Raises:
            ApiError: 404 if the project does not exist, 409 if the new slug
                is used by another project.
        """
        project = await self.get(project_id)
        changes = data.changes()

        if "slug" in changes and await self.project_repo.slug_taken(
            changes["slug"], exclude_id=project.id
        ):
            raise ApiError.conflict("A project with this slug already exists")

        for field, value in changes.items():
            setattr(project, field, value)
        project.updated_at = utc_now()

        await self._commit(project)
        logger.info("Project updated", project_id=str(project.id), fields=sorted(changes))
        return project

    async def delete(self, project_id: UUID) -> None:
        """Delete a project and its uploaded image, if any."""
        project = await self.get(project_id)
        image_url = project.image_url

        await self.project_repo.delete(project)
        await self.session.commit()

        discard_uploaded_file(image_url)
        logger.info("Project deleted", project_id=str(project_id))

    async def reorder(self, items: list[ReorderItem]) -> None:
        """Set display order for several projects in one transaction.

        Raises:
            ApiError: 404 if any id is unknown; nothing is changed in that case.
        """
        ids = [item.id for item in items]
        projects = {p.id: p for p in await self.project_repo.get_many_by_ids(ids)}

        missing = [str(i) for i in ids if i not in projects]
        if missing:
            raise ApiError(404, "Project not found", "NOT_FOUND", {"ids": missing})

        now = utc_now()
        for item in items:
            project = projects[item.id]
            project.order = item.order
            project.updated_at = now

        await self.session.commit()
        logger.info("Projects reordered", count=len(items))

    async def _commit(self, project: Project) -> None:
        try:
            await self.session.commit()
            await self.session.refresh(project)
        except IntegrityError as e:
            await self.session.rollback()
            raise ApiError.conflict("A project with this slug already exists") from e

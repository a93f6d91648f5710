"""Public project endpoints."""

from typing import Annotated

from fastapi import APIRouter, Query

from src.portfolio.api.dependencies import ProjectServiceDep
from src.portfolio.core.text import parse_boolean
from src.portfolio.models import ProjectCategory
from src.portfolio.schemas import ApiResponse, ListResponse, ProjectRead, ProjectSummary

router = APIRouter(prefix="/projects", tags=["projects"])


@router.get(
    "",
    response_model=ListResponse[ProjectSummary],
    summary="List projects",
    description=(
        "Featured projects first, then by display order and newest year. "
        "`featured=true` restricts the list to featured projects."
    ),
)
async def list_projects(
    service: ProjectServiceDep,
    category: ProjectCategory | None = None,
    featured: str | None = None,
    limit: Annotated[int | None, Query(ge=1, le=100)] = None,
) -> ListResponse[ProjectSummary]:
    projects = await service.list_public(
        category=category.value if category else None,
        featured_only=parse_boolean(featured) is True,
        limit=limit,
    )
    return ListResponse[ProjectSummary](
        data=[ProjectSummary.model_validate(p) for p in projects],
        count=len(projects),
    )


@router.get(
    "/{slug}",
    response_model=ApiResponse[ProjectRead],
    summary="Get project by slug",
    responses={404: {"description": "Project not found"}},
)
async def get_project(slug: str, service: ProjectServiceDep) -> ApiResponse[ProjectRead]:
    project = await service.get_by_slug(slug)
    return ApiResponse[ProjectRead](data=ProjectRead.model_validate(project))

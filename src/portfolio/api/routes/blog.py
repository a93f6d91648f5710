"""Public blog endpoints."""

from typing import Annotated

from fastapi import APIRouter, Query

from src.portfolio.api.dependencies import BlogServiceDep, OptionalAdmin
from src.portfolio.schemas import (
    ApiResponse,
    BlogPostDetailResponse,
    BlogPostRead,
    BlogPostSummary,
    PaginatedResponse,
    PaginationMeta,
)

router = APIRouter(prefix="/blog", tags=["blog"])


@router.get(
    "",
    response_model=PaginatedResponse[BlogPostSummary],
    summary="List published posts",
    description=(
        "Newest first. `tag` keeps posts carrying that tag; `search` matches "
        "title or excerpt, case-insensitive."
    ),
)
async def list_posts(
    service: BlogServiceDep,
    page: Annotated[int, Query(ge=1)] = 1,
    limit: Annotated[int, Query(ge=1, le=50)] = 10,
    tag: str | None = None,
    search: Annotated[str | None, Query(max_length=100)] = None,
) -> PaginatedResponse[BlogPostSummary]:
    posts, total = await service.list_published(page, limit, tag=tag, search=search)
    return PaginatedResponse[BlogPostSummary](
        data=[BlogPostSummary.model_validate(p) for p in posts],
        pagination=PaginationMeta.build(page=page, limit=limit, total=total),
    )


@router.get(
    "/tags",
    response_model=ApiResponse[list[str]],
    summary="List tags of published posts",
)
async def list_tags(service: BlogServiceDep) -> ApiResponse[list[str]]:
    return ApiResponse[list[str]](data=await service.list_tags())


@router.get(
    "/{slug}",
    response_model=BlogPostDetailResponse,
    summary="Read a post",
    description=(
        "Counts a view and returns up to three related posts. "
        "An authenticated admin can preview drafts."
    ),
    responses={404: {"description": "Blog post not found or not published"}},
)
async def get_post(
    slug: str, service: BlogServiceDep, admin: OptionalAdmin
) -> BlogPostDetailResponse:
    post, related = await service.read_post(slug, include_drafts=admin is not None)
    return BlogPostDetailResponse(
        data=BlogPostRead.model_validate(post),
        related=[BlogPostSummary.model_validate(p) for p in related],
    )

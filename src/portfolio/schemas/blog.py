"""Blog post schemas for API request/response."""

from datetime import datetime
from typing import ClassVar
from uuid import UUID

from pydantic import Field

from src.portfolio.schemas.base import ApiResponse, CamelModel, PartialUpdate
from src.portfolio.schemas.validators import ImageUrlStr, NonBlankStr, Slug, TagList


class BlogPostCreate(CamelModel):
    """Schema for creating a blog post.

    ``slug`` defaults to the slugified title, ``excerpt`` to the start of the
    content and ``read_time`` to an estimate from the content length.
    """

    title: NonBlankStr = Field(min_length=1, max_length=300)
    slug: Slug | None = Field(default=None, min_length=1, max_length=300)
    excerpt: NonBlankStr | None = Field(default=None, max_length=500)
    content: str = Field(min_length=1)
    cover_image: ImageUrlStr | None = None
    author: NonBlankStr | None = Field(default=None, max_length=100)
    tags: TagList = []
    published: bool = False
    read_time: int | None = Field(default=None, ge=1)
    meta_title: str | None = Field(default=None, max_length=70)
    meta_description: str | None = Field(default=None, max_length=160)
    og_image: ImageUrlStr | None = None


class BlogPostUpdate(PartialUpdate):
    """Schema for updating a blog post. Omitted fields are left unchanged."""

    non_nullable: ClassVar[frozenset[str]] = frozenset(
        {"title", "slug", "excerpt", "content", "author", "tags", "published", "read_time"}
    )

    title: NonBlankStr | None = Field(default=None, min_length=1, max_length=300)
    slug: Slug | None = Field(default=None, min_length=1, max_length=300)
    excerpt: NonBlankStr | None = Field(default=None, min_length=1, max_length=500)
    content: str | None = Field(default=None, min_length=1)
    cover_image: ImageUrlStr | None = None
    author: NonBlankStr | None = Field(default=None, max_length=100)
    tags: TagList | None = None
    published: bool | None = None
    read_time: int | None = Field(default=None, ge=1)
    meta_title: str | None = Field(default=None, max_length=70)
    meta_description: str | None = Field(default=None, max_length=160)
    og_image: ImageUrlStr | None = None


class BlogPostSummary(CamelModel):
    """Published post as shown in listings and related-post links."""

    id: UUID
    title: str
    slug: str
    excerpt: str
    cover_image: str | None
    author: str
    tags: list[str]
    published_at: datetime | None
    views: int
    read_time: int


class BlogPostAdminItem(BlogPostSummary):
    """Post as shown in the admin list, drafts included."""

    published: bool
    created_at: datetime
    updated_at: datetime


class BlogPostRead(BlogPostAdminItem):
    """Full blog post."""

    content: str
    meta_title: str | None
    meta_description: str | None
    og_image: str | None


class BlogPostDetailResponse(ApiResponse[BlogPostRead]):
    """Single post plus posts sharing its tags."""

    related: list[BlogPostSummary]

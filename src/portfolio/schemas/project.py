"""Project schemas for API request/response."""

from datetime import datetime
from typing import ClassVar
from uuid import UUID

from pydantic import Field, field_validator

from src.portfolio.models import ProjectCategory
from src.portfolio.schemas.base import CamelModel, PartialUpdate
from src.portfolio.schemas.validators import HttpUrlStr, ImageUrlStr, NonBlankStr, Slug, TagList


class ProjectCreate(CamelModel):
    """Schema for creating a project."""

    title: NonBlankStr = Field(min_length=1, max_length=200)
    slug: Slug = Field(min_length=1, max_length=200)
    description: NonBlankStr = Field(min_length=1, max_length=500)
    long_description: str = ""
    tags: TagList
    category: ProjectCategory
    year: int = Field(ge=2000, le=2100)
    featured: bool = False
    image_url: ImageUrlStr | None = None
    demo_url: HttpUrlStr | None = None
    github_url: HttpUrlStr | None = None
    metrics: dict[str, str] | None = None
    order: int = 0

    @field_validator("tags")
    @classmethod
    def validate_tags(cls, v: list[str]) -> list[str]:
        if not v:
            raise ValueError("At least one tag is required")
        return v


class ProjectUpdate(PartialUpdate):
    """Schema for updating a project. Omitted fields are left unchanged."""

    non_nullable: ClassVar[frozenset[str]] = frozenset(
        {
            "title",
            "slug",
            "description",
            "long_description",
            "tags",
            "category",
            "year",
            "featured",
            "order",
        }
    )

    title: NonBlankStr | None = Field(default=None, min_length=1, max_length=200)
    slug: Slug | None = Field(default=None, min_length=1, max_length=200)
    description: NonBlankStr | None = Field(default=None, min_length=1, max_length=500)
    long_description: str | None = None
    tags: TagList | None = None
    category: ProjectCategory | None = None
    year: int | None = Field(default=None, ge=2000, le=2100)
    featured: bool | None = None
    image_url: ImageUrlStr | None = None
    demo_url: HttpUrlStr | None = None
    github_url: HttpUrlStr | None = None
    metrics: dict[str, str] | None = None
    order: int | None = None

    @field_validator("tags")
    @classmethod
    def validate_tags(cls, v: list[str] | None) -> list[str] | None:
        if v is not None and not v:
            raise ValueError("At least one tag is required")
        return v


class ProjectSummary(CamelModel):
    """Project as shown in public listings."""

    id: UUID
    title: str
    slug: str
    description: str
    tags: list[str]
    category: ProjectCategory
    year: int
    featured: bool
    image_url: str | None
    demo_url: str | None
    github_url: str | None
    metrics: dict[str, str] | None


class ProjectRead(ProjectSummary):
    """Full project."""

    long_description: str
    order: int
    created_at: datetime
    updated_at: datetime


class ReorderItem(CamelModel):
    id: UUID
    order: int


class ReorderRequest(CamelModel):
    """New display positions for a set of projects."""

    orders: list[ReorderItem] = Field(min_length=1)

"""Project model - portfolio case studies."""

from datetime import datetime
from uuid import UUID, uuid4

from sqlalchemy import JSON, Column, Text
from sqlmodel import Field, SQLModel

from src.portfolio.models.base import utc_now
from src.portfolio.models.enums import ProjectCategory


class Project(SQLModel, table=True):
    """Portfolio project, addressed publicly by slug."""

    __tablename__ = "projects"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    title: str = Field(max_length=200)
    slug: str = Field(max_length=200, unique=True, index=True)
    description: str = Field(max_length=500)
    long_description: str = Field(default="", sa_column=Column(Text, nullable=False))
    tags: list[str] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
    category: str = Field(default=ProjectCategory.FULLSTACK.value, max_length=20, index=True)
    year: int
    featured: bool = Field(default=False, index=True)
    image_url: str | None = Field(default=None, max_length=500)
    demo_url: str | None = Field(default=None, max_length=500)
    github_url: str | None = Field(default=None, max_length=500)
    metrics: dict[str, str] | None = Field(default=None, sa_column=Column(JSON, nullable=True))
    order: int = Field(default=0)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

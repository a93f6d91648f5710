"""Blog post model."""

from datetime import datetime
from uuid import UUID, uuid4

from sqlalchemy import JSON, Column, Text
from sqlmodel import Field, SQLModel

from src.portfolio.models.base import utc_now


class BlogPost(SQLModel, table=True):
    """Blog post. Only published posts are visible on the public API."""

    __tablename__ = "blog_posts"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    title: str = Field(max_length=300)
    slug: str = Field(max_length=300, unique=True, index=True)
    excerpt: str = Field(max_length=500)
    content: str = Field(sa_column=Column(Text, nullable=False))
    cover_image: str | None = Field(default=None, max_length=500)
    author: str = Field(max_length=100)
    tags: list[str] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
    published: bool = Field(default=False, index=True)
    published_at: datetime | None = Field(default=None, index=True)
    views: int = Field(default=0)
    read_time: int = Field(default=1)
    meta_title: str | None = Field(default=None, max_length=70)
    meta_description: str | None = Field(default=None, max_length=160)
    og_image: str | None = Field(default=None, max_length=500)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

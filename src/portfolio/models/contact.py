"""Contact message model."""

from datetime import datetime
from uuid import UUID, uuid4

from sqlalchemy import Column, Text
from sqlmodel import Field, SQLModel

from src.portfolio.models.base import utc_now


class Contact(SQLModel, table=True):
    """Message submitted through the public contact form."""

    __tablename__ = "contacts"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=100)
    email: str = Field(max_length=255)
    subject: str | None = Field(default=None, max_length=200)
    message: str = Field(sa_column=Column(Text, nullable=False))
    read: bool = Field(default=False, index=True)
    created_at: datetime = Field(default_factory=utc_now, index=True)

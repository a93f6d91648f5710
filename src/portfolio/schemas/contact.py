"""Contact message schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import EmailStr, Field

from src.portfolio.schemas.base import CamelModel
from src.portfolio.schemas.validators import NonBlankStr

DEFAULT_SUBJECT = "Contact Form Submission"


class ContactCreate(CamelModel):
    """Message submitted through the public contact form."""

    name: NonBlankStr = Field(min_length=1, max_length=100)
    email: EmailStr = Field(max_length=255)
    subject: str | None = Field(default=None, max_length=200)
    message: str = Field(min_length=10, max_length=5000)


class ContactReceipt(CamelModel):
    id: UUID
    created_at: datetime


class ContactUpdate(CamelModel):
    read: bool = True


class ContactRead(CamelModel):
    id: UUID
    name: str
    email: str
    subject: str | None
    message: str
    read: bool
    created_at: datetime

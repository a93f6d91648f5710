"""Shared schema base and response envelopes."""

import math
from typing import Any, ClassVar, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class CamelModel(BaseModel):
    """Base schema: snake_case in Python, camelCase on the wire.

    Requests accept either form; responses are serialized by alias.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class PartialUpdate(CamelModel):
    """Base for PATCH-style update bodies.

    Fields listed in ``non_nullable`` may be omitted but not sent as null.
    """

    non_nullable: ClassVar[frozenset[str]] = frozenset()

    @model_validator(mode="after")
    def reject_explicit_nulls(self) -> "PartialUpdate":
        for name in self.non_nullable:
            if name in self.model_fields_set and getattr(self, name) is None:
                raise ValueError(f"{to_camel(name)} cannot be null")
        return self

    def changes(self) -> dict[str, Any]:
        """Fields the client actually sent."""
        return self.model_dump(mode="json", exclude_unset=True)


class ApiResponse(CamelModel, Generic[T]):
    """Success envelope around a single payload."""

    success: bool = True
    message: str | None = None
    data: T


class ListResponse(CamelModel, Generic[T]):
    """Success envelope around a list, with its length."""

    success: bool = True
    message: str | None = None
    data: list[T]
    count: int


class PaginationMeta(CamelModel):
    page: int
    limit: int
    total: int
    total_pages: int
    has_more: bool

    @classmethod
    def build(cls, page: int, limit: int, total: int) -> "PaginationMeta":
        total_pages = math.ceil(total / limit) if total else 0
        return cls(
            page=page,
            limit=limit,
            total=total,
            total_pages=total_pages,
            has_more=page < total_pages,
        )


class PaginatedResponse(CamelModel, Generic[T]):
    """Success envelope for offset-paginated lists."""

    success: bool = True
    data: list[T]
    pagination: PaginationMeta


class MessageResponse(CamelModel):
    """Success envelope carrying only a message."""

    success: bool = True
    message: str


"""Reusable annotated field types for request schemas."""

import re
from typing import Annotated
from urllib.parse import urlparse

from pydantic import AfterValidator, StringConstraints

from src.portfolio.core.text import SLUG_REGEX
from src.portfolio.core.uploads import UPLOAD_URL_PREFIX

_SLUG_PATTERN = re.compile(SLUG_REGEX)


def check_slug(v: str) -> str:
    if not _SLUG_PATTERN.match(v):
        raise ValueError("Slug must be lowercase with hyphens")
    return v


def check_not_blank(v: str) -> str:
    v = v.strip()
    if not v:
        raise ValueError("Cannot be empty or whitespace only")
    return v


def check_http_url(v: str) -> str | None:
    """Accept absolute http(s) URLs; empty strings become None."""
    v = v.strip()
    if not v:
        return None
    parsed = urlparse(v)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ValueError("Must be a valid http(s) URL")
    return v


def check_image_url(v: str) -> str | None:
    """Accept absolute http(s) URLs or paths returned by the upload endpoints."""
    path = v.strip()
    if path.startswith(f"{UPLOAD_URL_PREFIX}/"):
        if ".." in path.split("/"):
            raise ValueError("Invalid upload path")
        return path
    return check_http_url(path)


def check_tags(v: list[str]) -> list[str]:
    """Strip tags, drop blanks and duplicates while keeping order."""
    seen: dict[str, None] = {}
    for tag in v:
        tag = tag.strip()
        if tag:
            seen.setdefault(tag, None)
    return list(seen)


Slug = Annotated[str, AfterValidator(check_slug)]
NonBlankStr = Annotated[str, AfterValidator(check_not_blank)]
HttpUrlStr = Annotated[str, StringConstraints(max_length=500), AfterValidator(check_http_url)]
ImageUrlStr = Annotated[str, StringConstraints(max_length=500), AfterValidator(check_image_url)]
TagList = Annotated[list[str], AfterValidator(check_tags)]

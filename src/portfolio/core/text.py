"""Text helpers for slugs, excerpts and reading time."""

import math
import re
from typing import Final

_HTML_TAG_PATTERN: Final[re.Pattern[str]] = re.compile(r"<[^>]*>")
_NON_SLUG_CHARS: Final[re.Pattern[str]] = re.compile(r"[^\w\s-]", re.ASCII)
_SLUG_SEPARATORS: Final[re.Pattern[str]] = re.compile(r"[\s_-]+", re.ASCII)
_WHITESPACE: Final[re.Pattern[str]] = re.compile(r"\s+")

SLUG_REGEX: Final[str] = r"^[a-z0-9-]+$"
DEFAULT_WORDS_PER_MINUTE: Final[int] = 200


def slugify(text: str) -> str:
    """Generate a URL-friendly slug.

    >>> slugify("  Hello, World! ")
    'hello-world'
    >>> slugify("snake_case and  spaces")
    'snake-case-and-spaces'
    """
    slug = text.lower().strip()
    slug = _NON_SLUG_CHARS.sub("", slug)
    slug = _SLUG_SEPARATORS.sub("-", slug)
    return slug.strip("-")


def strip_html(content: str) -> str:
    return _HTML_TAG_PATTERN.sub("", content)


def calculate_read_time(content: str, words_per_minute: int = DEFAULT_WORDS_PER_MINUTE) -> int:
    """Estimated reading time in whole minutes, never less than one."""
    words = strip_html(content).split()
    return max(1, math.ceil(len(words) / words_per_minute))


def truncate(text: str, max_length: int) -> str:
    """Cut text to max_length characters, appending an ellipsis when shortened."""
    if len(text) <= max_length:
        return text
    return text[:max_length].strip() + "..."


def generate_excerpt(html_content: str, max_length: int = 200) -> str:
    """Plain-text excerpt of HTML content with whitespace collapsed."""
    normalized = _WHITESPACE.sub(" ", strip_html(html_content)).strip()
    return truncate(normalized, max_length)


def parse_boolean(value: str | None) -> bool | None:
    """Parse "true"/"false" query values; anything else is None."""
    if value == "true":
        return True
    if value == "false":
        return False
    return None

"""Shared enums for models."""

from enum import Enum


class ProjectCategory(str, Enum):
    """Portfolio section a project is filed under."""

    ML = "ml"
    FULLSTACK = "fullstack"
    DATA = "data"

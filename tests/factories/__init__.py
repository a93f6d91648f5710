"""Test factories for generating test data.

Re-exports all factories for convenient imports:
    from tests.factories import ProjectFactory, BlogPostFactory, ...
"""

from tests.factories.admin import DEFAULT_TEST_PASSWORD, AdminFactory
from tests.factories.base import BaseFactory, generate_uuid, unique_slug
from tests.factories.content import BlogPostFactory, ContactFactory, ProjectFactory

__all__ = [
    # Base
    "BaseFactory",
    "generate_uuid",
    "unique_slug",
    # Admin
    "AdminFactory",
    "DEFAULT_TEST_PASSWORD",
    # Content
    "BlogPostFactory",
    "ContactFactory",
    "ProjectFactory",
]

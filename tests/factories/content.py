"""Project, blog post and contact message factories."""

from polyfactory import Use

from src.portfolio.models import BlogPost, Contact, Project, ProjectCategory
from src.portfolio.models.base import utc_now
from tests.factories.base import BaseFactory, generate_uuid, unique_slug


class ProjectFactory(BaseFactory):
    """Factory for generating Project test data."""

    __model__ = Project

    id = Use(generate_uuid)
    title = "Test Project"
    slug = Use(unique_slug, "project")
    description = "A project used in tests."
    long_description = "<p>Longer description.</p>"
    tags = Use(lambda: ["Python", "FastAPI"])
    category = ProjectCategory.FULLSTACK.value
    year = 2024
    featured = False
    image_url = None
    demo_url = None
    github_url = None
    metrics = None
    order = 0
    created_at = Use(utc_now)
    updated_at = Use(utc_now)

    @classmethod
    def featured_project(cls, **kwargs):
        """Create a featured project."""
        return cls.build(featured=True, **kwargs)


class BlogPostFactory(BaseFactory):
    """Factory for generating BlogPost test data. Posts are drafts by default."""

    __model__ = BlogPost

    id = Use(generate_uuid)
    title = "Test Post"
    slug = Use(unique_slug, "post")
    excerpt = "A post used in tests."
    content = "<p>Some words to read.</p>"
    cover_image = None
    author = "Test Author"
    tags = Use(lambda: ["Python"])
    published = False
    published_at = None
    views = 0
    read_time = 1
    meta_title = None
    meta_description = None
    og_image = None
    created_at = Use(utc_now)
    updated_at = Use(utc_now)

    @classmethod
    def published_post(cls, **kwargs):
        """Create a published post."""
        published_at = kwargs.pop("published_at", None) or utc_now()
        return cls.build(published=True, published_at=published_at, **kwargs)


class ContactFactory(BaseFactory):
    """Factory for generating Contact test data."""

    __model__ = Contact

    id = Use(generate_uuid)
    name = "Jane Visitor"
    email = Use(lambda: f"visitor_{generate_uuid().hex[-8:]}@example.com")
    subject = "Hello"
    message = "I would like to talk about a project."
    read = False
    created_at = Use(utc_now)

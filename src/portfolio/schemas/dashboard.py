"""Admin dashboard and public site statistics."""

from src.portfolio.schemas.base import CamelModel
from src.portfolio.schemas.contact import ContactRead


class BlogPostCounts(CamelModel):
    total: int
    published: int
    drafts: int


class ContactCounts(CamelModel):
    total: int
    unread: int


class DashboardStats(CamelModel):
    projects: int
    blog_posts: BlogPostCounts
    contacts: ContactCounts
    recent_contacts: list[ContactRead]


class SiteStats(CamelModel):
    """Counts shown on the public site."""

    projects: int
    blog_posts: int


class UploadResult(CamelModel):
    url: str
    filename: str

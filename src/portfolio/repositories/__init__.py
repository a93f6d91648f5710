"""Repository layer - data access abstraction."""

from src.portfolio.repositories.admin import AdminRepository
from src.portfolio.repositories.base import BaseRepository, SlugRepository
from src.portfolio.repositories.blog import BlogPostRepository
from src.portfolio.repositories.contact import ContactRepository
from src.portfolio.repositories.project import ProjectRepository

__all__ = [
    # Base
    "BaseRepository",
    "SlugRepository",
    # Content
    "AdminRepository",
    "BlogPostRepository",
    "ContactRepository",
    "ProjectRepository",
]

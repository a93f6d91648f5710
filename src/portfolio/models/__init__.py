"""Model exports.

Import from here: `from src.portfolio.models import Project, BlogPost`
"""

from src.portfolio.models.admin import Admin
from src.portfolio.models.blog import BlogPost
from src.portfolio.models.contact import Contact
from src.portfolio.models.enums import ProjectCategory
from src.portfolio.models.project import Project

__all__ = [
    # Enums
    "ProjectCategory",
    # Models
    "Admin",
    "BlogPost",
    "Contact",
    "Project",
]

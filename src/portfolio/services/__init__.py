from src.portfolio.services.auth_service import AuthService
from src.portfolio.services.blog_service import BlogService
from src.portfolio.services.contact_service import ContactService
from src.portfolio.services.dashboard_service import DashboardService
from src.portfolio.services.project_service import ProjectService

__all__ = [
    "AuthService",
    "BlogService",
    "ContactService",
    "DashboardService",
    "ProjectService",
]

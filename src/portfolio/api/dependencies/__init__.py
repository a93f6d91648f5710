"""FastAPI dependency injection definitions.

Re-exports all dependencies for convenience.
"""

# Auth
from src.portfolio.api.dependencies.auth import (
    CurrentAdmin,
    OptionalAdmin,
    get_current_admin,
    get_optional_admin,
)

# Database
from src.portfolio.api.dependencies.db import DBSession, get_db_session

# Repositories
from src.portfolio.api.dependencies.repositories import (
    AdminRepo,
    BlogRepo,
    ContactRepo,
    ProjectRepo,
    get_admin_repository,
    get_blog_repository,
    get_contact_repository,
    get_project_repository,
)

# Services
from src.portfolio.api.dependencies.services import (
    AuthServiceDep,
    BlogServiceDep,
    ContactServiceDep,
    DashboardServiceDep,
    ProjectServiceDep,
    get_auth_service,
    get_blog_service,
    get_contact_service,
    get_dashboard_service,
    get_project_service,
)

__all__ = [
    # Database
    "DBSession",
    "get_db_session",
    # Auth
    "CurrentAdmin",
    "OptionalAdmin",
    "get_current_admin",
    "get_optional_admin",
    # Repositories
    "AdminRepo",
    "BlogRepo",
    "ContactRepo",
    "ProjectRepo",
    "get_admin_repository",
    "get_blog_repository",
    "get_contact_repository",
    "get_project_repository",
    # Services
    "AuthServiceDep",
    "BlogServiceDep",
    "ContactServiceDep",
    "DashboardServiceDep",
    "ProjectServiceDep",
    "get_auth_service",
    "get_blog_service",
    "get_contact_service",
    "get_dashboard_service",
    "get_project_service",
]

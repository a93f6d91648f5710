"""Service factory dependencies."""

from typing import Annotated

from fastapi import Depends

from src.portfolio.api.dependencies.db import DBSession
from src.portfolio.api.dependencies.repositories import (
    AdminRepo,
    BlogRepo,
    ContactRepo,
    ProjectRepo,
)
from src.portfolio.services import (
    AuthService,
    BlogService,
    ContactService,
    DashboardService,
    ProjectService,
)


def get_auth_service(admin_repo: AdminRepo, session: DBSession) -> AuthService:
    return AuthService(admin_repo, session)


def get_project_service(project_repo: ProjectRepo, session: DBSession) -> ProjectService:
    return ProjectService(project_repo, session)


def get_blog_service(blog_repo: BlogRepo, session: DBSession) -> BlogService:
    return BlogService(blog_repo, session)


def get_contact_service(contact_repo: ContactRepo, session: DBSession) -> ContactService:
    return ContactService(contact_repo, session)


def get_dashboard_service(
    project_repo: ProjectRepo,
    blog_repo: BlogRepo,
    contact_repo: ContactRepo,
) -> DashboardService:
    """Get dashboard service over all content repositories."""
    return DashboardService(project_repo, blog_repo, contact_repo)


AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]
ProjectServiceDep = Annotated[ProjectService, Depends(get_project_service)]
BlogServiceDep = Annotated[BlogService, Depends(get_blog_service)]
ContactServiceDep = Annotated[ContactService, Depends(get_contact_service)]
DashboardServiceDep = Annotated[DashboardService, Depends(get_dashboard_service)]

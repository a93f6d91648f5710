"""Repository factory dependencies."""

from typing import Annotated

from fastapi import Depends

from src.portfolio.api.dependencies.db import DBSession
from src.portfolio.repositories import (
    AdminRepository,
    BlogPostRepository,
    ContactRepository,
    ProjectRepository,
)


def get_admin_repository(session: DBSession) -> AdminRepository:
    return AdminRepository(session)


def get_project_repository(session: DBSession) -> ProjectRepository:
    return ProjectRepository(session)


def get_blog_repository(session: DBSession) -> BlogPostRepository:
    return BlogPostRepository(session)


def get_contact_repository(session: DBSession) -> ContactRepository:
    return ContactRepository(session)


AdminRepo = Annotated[AdminRepository, Depends(get_admin_repository)]
ProjectRepo = Annotated[ProjectRepository, Depends(get_project_repository)]
BlogRepo = Annotated[BlogPostRepository, Depends(get_blog_repository)]
ContactRepo = Annotated[ContactRepository, Depends(get_contact_repository)]

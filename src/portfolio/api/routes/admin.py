"""Admin content management endpoints. Every route requires a valid admin token."""

from uuid import UUID

from fastapi import APIRouter, Body, Depends, File, UploadFile, status

from src.portfolio.api.dependencies import (
    BlogServiceDep,
    ContactServiceDep,
    DashboardServiceDep,
    ProjectServiceDep,
    get_current_admin,
)
from src.portfolio.core.exceptions import ApiError
from src.portfolio.core.text import parse_boolean
from src.portfolio.core.uploads import UploadKind, save_image
from src.portfolio.schemas import (
    ApiResponse,
    BlogPostAdminItem,
    BlogPostCreate,
    BlogPostRead,
    BlogPostUpdate,
    ContactRead,
    ContactUpdate,
    DashboardStats,
    ListResponse,
    MessageResponse,
    ProjectCreate,
    ProjectRead,
    ProjectUpdate,
    ReorderRequest,
    UploadResult,
)

router = APIRouter(
    prefix="/admin",
    tags=["admin"],
    dependencies=[Depends(get_current_admin)],
    responses={401: {"description": "Missing, invalid or expired token"}},
)

_NOT_FOUND = {404: {"description": "Not found"}}
_SLUG_CONFLICT = {409: {"description": "Slug already in use"}}


async def _store_upload(image: UploadFile | None, kind: UploadKind) -> ApiResponse[UploadResult]:
    if image is None:
        raise ApiError.bad_request("No image file provided")
    stored = await save_image(image, kind)
    return ApiResponse[UploadResult](
        message="Image uploaded successfully",
        data=UploadResult(url=stored.url, filename=stored.filename),
    )


# ============================================
# Dashboard
# ============================================


@router.get("/dashboard", response_model=ApiResponse[DashboardStats])
async def get_dashboard(service: DashboardServiceDep) -> ApiResponse[DashboardStats]:
    """Content counts and the five most recent messages."""
    return ApiResponse[DashboardStats](data=await service.get_dashboard())


# ============================================
# Projects
# ============================================


@router.get("/projects", response_model=ListResponse[ProjectRead])
async def list_projects(service: ProjectServiceDep) -> ListResponse[ProjectRead]:
    projects = await service.list_all()
    return ListResponse[ProjectRead](
        data=[ProjectRead.model_validate(p) for p in projects],
        count=len(projects),
    )


@router.put(
    "/projects/reorder",
    response_model=MessageResponse,
    summary="Reorder projects",
    description="Sets the display order of several projects atomically.",
    responses=_NOT_FOUND,
)
async def reorder_projects(data: ReorderRequest, service: ProjectServiceDep) -> MessageResponse:
    await service.reorder(data.orders)
    return MessageResponse(message="Projects reordered successfully")


@router.post(
    "/projects/upload",
    response_model=ApiResponse[UploadResult],
    responses={
        400: {"description": "Missing file or unsupported image type"},
        413: {"description": "File too large"},
    },
)
async def upload_project_image(
    image: UploadFile | None = File(default=None),
) -> ApiResponse[UploadResult]:
    return await _store_upload(image, UploadKind.PROJECTS)


@router.get("/projects/{project_id}", response_model=ApiResponse[ProjectRead], responses=_NOT_FOUND)
async def get_project(project_id: UUID, service: ProjectServiceDep) -> ApiResponse[ProjectRead]:
    project = await service.get(project_id)
    return ApiResponse[ProjectRead](data=ProjectRead.model_validate(project))


@router.post(
    "/projects",
    response_model=ApiResponse[ProjectRead],
    status_code=status.HTTP_201_CREATED,
    responses=_SLUG_CONFLICT,
)
async def create_project(
    data: ProjectCreate, service: ProjectServiceDep
) -> ApiResponse[ProjectRead]:
    project = await service.create(data)
    return ApiResponse[ProjectRead](
        message="Project created successfully",
        data=ProjectRead.model_validate(project),
    )


@router.put(
    "/projects/{project_id}",
    response_model=ApiResponse[ProjectRead],
    responses={**_NOT_FOUND, **_SLUG_CONFLICT},
)
async def update_project(
    project_id: UUID, data: ProjectUpdate, service: ProjectServiceDep
) -> ApiResponse[ProjectRead]:
    project = await service.update(project_id, data)
    return ApiResponse[ProjectRead](
        message="Project updated successfully",
        data=ProjectRead.model_validate(project),
    )


@router.delete("/projects/{project_id}", response_model=MessageResponse, responses=_NOT_FOUND)
async def delete_project(project_id: UUID, service: ProjectServiceDep) -> MessageResponse:
    """Delete a project and its uploaded image."""
    await service.delete(project_id)
    return MessageResponse(message="Project deleted successfully")


# ============================================
# Blog
# ============================================


@router.get("/blog", response_model=ListResponse[BlogPostAdminItem])
async def list_posts(service: BlogServiceDep) -> ListResponse[BlogPostAdminItem]:
    """All posts including drafts, newest first."""
    posts = await service.list_all()
    return ListResponse[BlogPostAdminItem](
        data=[BlogPostAdminItem.model_validate(p) for p in posts],
        count=len(posts),
    )


@router.post(
    "/blog/upload",
    response_model=ApiResponse[UploadResult],
    responses={
        400: {"description": "Missing file or unsupported image type"},
        413: {"description": "File too large"},
    },
)
async def upload_blog_image(
    image: UploadFile | None = File(default=None),
) -> ApiResponse[UploadResult]:
    return await _store_upload(image, UploadKind.BLOG)


@router.get("/blog/{post_id}", response_model=ApiResponse[BlogPostRead], responses=_NOT_FOUND)
async def get_post(post_id: UUID, service: BlogServiceDep) -> ApiResponse[BlogPostRead]:
    post = await service.get(post_id)
    return ApiResponse[BlogPostRead](data=BlogPostRead.model_validate(post))


@router.post(
    "/blog",
    response_model=ApiResponse[BlogPostRead],
    status_code=status.HTTP_201_CREATED,
    responses=_SLUG_CONFLICT,
)
async def create_post(data: BlogPostCreate, service: BlogServiceDep) -> ApiResponse[BlogPostRead]:
    post = await service.create(data)
    return ApiResponse[BlogPostRead](
        message="Blog post created successfully",
        data=BlogPostRead.model_validate(post),
    )


@router.put(
    "/blog/{post_id}",
    response_model=ApiResponse[BlogPostRead],
    responses={**_NOT_FOUND, **_SLUG_CONFLICT},
)
async def update_post(
    post_id: UUID, data: BlogPostUpdate, service: BlogServiceDep
) -> ApiResponse[BlogPostRead]:
    post = await service.update(post_id, data)
    return ApiResponse[BlogPostRead](
        message="Blog post updated successfully",
        data=BlogPostRead.model_validate(post),
    )


@router.delete("/blog/{post_id}", response_model=MessageResponse, responses=_NOT_FOUND)
async def delete_post(post_id: UUID, service: BlogServiceDep) -> MessageResponse:
    """Delete a post and its uploaded cover image."""
    await service.delete(post_id)
    return MessageResponse(message="Blog post deleted successfully")


# ============================================
# Contact messages
# ============================================


@router.get("/contact", response_model=ListResponse[ContactRead])
async def list_messages(
    service: ContactServiceDep, unread: str | None = None
) -> ListResponse[ContactRead]:
    """Messages newest first; `unread=true` hides messages already read."""
    messages = await service.list_messages(unread_only=parse_boolean(unread) is True)
    return ListResponse[ContactRead](
        data=[ContactRead.model_validate(m) for m in messages],
        count=len(messages),
    )


@router.get("/contact/{contact_id}", response_model=ApiResponse[ContactRead], responses=_NOT_FOUND)
async def get_message(contact_id: UUID, service: ContactServiceDep) -> ApiResponse[ContactRead]:
    """Open a message, marking it read."""
    contact = await service.open(contact_id)
    return ApiResponse[ContactRead](data=ContactRead.model_validate(contact))


@router.put("/contact/{contact_id}", response_model=ApiResponse[ContactRead], responses=_NOT_FOUND)
async def update_message(
    contact_id: UUID,
    service: ContactServiceDep,
    data: ContactUpdate | None = Body(default=None),
) -> ApiResponse[ContactRead]:
    """Mark a message read (the default) or unread."""
    read = data.read if data is not None else True
    contact = await service.set_read(contact_id, read)
    return ApiResponse[ContactRead](
        message=f"Message marked as {'read' if read else 'unread'}",
        data=ContactRead.model_validate(contact),
    )


@router.delete("/contact/{contact_id}", response_model=MessageResponse, responses=_NOT_FOUND)
async def delete_message(contact_id: UUID, service: ContactServiceDep) -> MessageResponse:
    await service.delete(contact_id)
    return MessageResponse(message="Message deleted successfully")

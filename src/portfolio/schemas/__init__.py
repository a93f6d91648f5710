from src.portfolio.schemas.auth import (
    AdminRead,
    ChangePasswordRequest,
    LoginRequest,
    LoginResponse,
)
from src.portfolio.schemas.base import (
    ApiResponse,
    CamelModel,
    ListResponse,
    MessageResponse,
    PaginatedResponse,
    PaginationMeta,
    PartialUpdate,
)
from src.portfolio.schemas.blog import (
    BlogPostAdminItem,
    BlogPostCreate,
    BlogPostDetailResponse,
    BlogPostRead,
    BlogPostSummary,
    BlogPostUpdate,
)
from src.portfolio.schemas.contact import (
    DEFAULT_SUBJECT,
    ContactCreate,
    ContactRead,
    ContactReceipt,
    ContactUpdate,
)
from src.portfolio.schemas.dashboard import (
    BlogPostCounts,
    ContactCounts,
    DashboardStats,
    SiteStats,
    UploadResult,
)
from src.portfolio.schemas.project import (
    ProjectCreate,
    ProjectRead,
    ProjectSummary,
    ProjectUpdate,
    ReorderItem,
    ReorderRequest,
)

__all__ = [
    # Envelopes
    "ApiResponse",
    "CamelModel",
    "ListResponse",
    "MessageResponse",
    "PaginatedResponse",
    "PaginationMeta",
    "PartialUpdate",
    # Auth
    "AdminRead",
    "ChangePasswordRequest",
    "LoginRequest",
    "LoginResponse",
    # Blog
    "BlogPostAdminItem",
    "BlogPostCreate",
    "BlogPostDetailResponse",
    "BlogPostRead",
    "BlogPostSummary",
    "BlogPostUpdate",
    # Contact
    "DEFAULT_SUBJECT",
    "ContactCreate",
    "ContactRead",
    "ContactReceipt",
    "ContactUpdate",
    # Dashboard / site
    "BlogPostCounts",
    "ContactCounts",
    "DashboardStats",
    "SiteStats",
    "UploadResult",
    # Project
    "ProjectCreate",
    "ProjectRead",
    "ProjectSummary",
    "ProjectUpdate",
    "ReorderItem",
    "ReorderRequest",
]

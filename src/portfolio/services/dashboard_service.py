"""Aggregate counts for the admin dashboard and public stats."""

from src.portfolio.models import BlogPost, Contact
from src.portfolio.repositories import (
    BlogPostRepository,
    ContactRepository,
    ProjectRepository,
)
from src.portfolio.schemas.contact import ContactRead
from src.portfolio.schemas.dashboard import (
    BlogPostCounts,
    ContactCounts,
    DashboardStats,
    SiteStats,
)

RECENT_CONTACTS_LIMIT = 5


class DashboardService:
    def __init__(
        self,
        project_repo: ProjectRepository,
        blog_repo: BlogPostRepository,
        contact_repo: ContactRepository,
    ):
        self.project_repo = project_repo
        self.blog_repo = blog_repo
        self.contact_repo = contact_repo

    async def get_dashboard(self) -> DashboardStats:
        total_posts = await self.blog_repo.count()
        published_posts = await self.blog_repo.count(BlogPost.published == True)  # noqa: E712
        recent = await self.contact_repo.list_recent(RECENT_CONTACTS_LIMIT)

        return DashboardStats(
            projects=await self.project_repo.count(),
            blog_posts=BlogPostCounts(
                total=total_posts,
                published=published_posts,
                drafts=total_posts - published_posts,
            ),
            contacts=ContactCounts(
                total=await self.contact_repo.count(),
                unread=await self.contact_repo.count(Contact.read == False),  # noqa: E712
            ),
            recent_contacts=[ContactRead.model_validate(c) for c in recent],
        )

    async def get_site_stats(self) -> SiteStats:
        return SiteStats(
            projects=await self.project_repo.count(),
            blog_posts=await self.blog_repo.count(BlogPost.published == True),  # noqa: E712
        )

"""Repository for BlogPost entity."""

from uuid import UUID

from sqlalchemy import or_, update
from sqlmodel import col, select

from src.portfolio.models import BlogPost
from src.portfolio.repositories.base import SlugRepository


def _contains_pattern(text: str) -> str:
    """LIKE pattern matching `text` literally anywhere in a column."""
    escaped = text.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


class BlogPostRepository(SlugRepository[BlogPost]):
    """Repository for blog posts.

    Tags are stored as a JSON array, which has no portable containment
    operator, so tag matching happens on the loaded rows.
    """

    model = BlogPost

    async def list_published(
        self,
        tag: str | None = None,
        search: str | None = None,
    ) -> list[BlogPost]:
        """Published posts, newest first, optionally filtered by tag and search text."""
        query = select(BlogPost).where(BlogPost.published == True)  # noqa: E712
        if search:
            pattern = _contains_pattern(search)
            query = query.where(
                or_(
                    col(BlogPost.title).ilike(pattern, escape="\\"),
                    col(BlogPost.excerpt).ilike(pattern, escape="\\"),
                )
            )
        query = query.order_by(col(BlogPost.published_at).desc())

        result = await self.session.execute(query)
        posts = list(result.scalars().all())
        if tag:
            posts = [post for post in posts if tag in post.tags]
        return posts

    async def list_related(self, post: BlogPost, limit: int = 3) -> list[BlogPost]:
        """Other published posts sharing at least one tag with ``post``."""
        if not post.tags:
            return []

        result = await self.session.execute(
            select(BlogPost)
            .where(BlogPost.published == True, BlogPost.id != post.id)  # noqa: E712
            .order_by(col(BlogPost.published_at).desc())
        )
        tags = set(post.tags)
        related = [other for other in result.scalars().all() if tags.intersection(other.tags)]
        return related[:limit]

    async def list_published_tags(self) -> list[str]:
        """Sorted unique tags across published posts."""
        result = await self.session.execute(
            select(BlogPost.tags).where(BlogPost.published == True)  # noqa: E712
        )
        return sorted({tag for tags in result.scalars().all() for tag in tags})

    async def list_all(self) -> list[BlogPost]:
        """All posts including drafts, newest first."""
        result = await self.session.execute(
            select(BlogPost).order_by(col(BlogPost.created_at).desc())
        )
        return list(result.scalars().all())

    async def increment_views(self, post_id: UUID) -> None:
        """Atomically bump the view counter (no commit)."""
        await self.session.execute(
            update(BlogPost).where(col(BlogPost.id) == post_id).values(views=BlogPost.views + 1)
        )

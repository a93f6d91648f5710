"""Blog service - public reading and admin authoring."""

from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.portfolio.core.config import get_settings
from src.portfolio.core.exceptions import ApiError
from src.portfolio.core.logging import get_logger
from src.portfolio.core.text import calculate_read_time, generate_excerpt, slugify
from src.portfolio.core.uploads import discard_uploaded_file
from src.portfolio.models import BlogPost
from src.portfolio.models.base import utc_now
from src.portfolio.repositories import BlogPostRepository
from src.portfolio.schemas.blog import BlogPostCreate, BlogPostUpdate

logger = get_logger(__name__)

RELATED_POSTS_LIMIT = 3


class BlogService:
    """Blog service.

    Public methods only ever see published posts. Publishing is tracked by
    ``published_at``: set on the draft to published transition, cleared on
    unpublish.
    """

    def __init__(self, blog_repo: BlogPostRepository, session: AsyncSession):
        self.blog_repo = blog_repo
        self.session = session

    async def list_published(
        self,
        page: int,
        limit: int,
        tag: str | None = None,
        search: str | None = None,
    ) -> tuple[list[BlogPost], int]:
        """One page of published posts and the total number of matches."""
        posts = await self.blog_repo.list_published(tag=tag, search=search)
        offset = (page - 1) * limit
        return posts[offset : offset + limit], len(posts)

    async def list_tags(self) -> list[str]:
        return await self.blog_repo.list_published_tags()

    async def read_post(
        self, slug: str, include_drafts: bool = False
    ) -> tuple[BlogPost, list[BlogPost]]:
        """Fetch a post for display, counting the view if it is published.

        Drafts are only returned with ``include_drafts`` (admin preview).

        Returns:
            The post and up to three related posts.
        """
        post = await self.blog_repo.get_by_slug(slug)
        if post is None or (not post.published and not include_drafts):
            raise ApiError.not_found("Blog post")

        if post.published:
            await self.blog_repo.increment_views(post.id)
            await self.session.commit()
            await self.session.refresh(post)

        related = await self.blog_repo.list_related(post, limit=RELATED_POSTS_LIMIT)
        return post, related

    async def list_all(self) -> list[BlogPost]:
        return await self.blog_repo.list_all()

    async def get(self, post_id: UUID) -> BlogPost:
        post = await self.blog_repo.get_by_id(post_id)
        if post is None:
            raise ApiError.not_found("Blog post")
        return post

    async def create(self, data: BlogPostCreate) -> BlogPost:
        """Create a post, deriving slug, excerpt and read time when omitted.

        Raises:
            ApiError: 400 if no slug can be derived from the title, 409 if the
                slug is already taken.
        """
        values = data.model_dump(mode="json")
        values["slug"] = data.slug or slugify(data.title)
        if not values["slug"]:
            raise ApiError.bad_request("Cannot derive a slug from the title; provide one")
        if await self.blog_repo.slug_taken(values["slug"]):
            raise ApiError.conflict("A blog post with this slug already exists")

        values["excerpt"] = data.excerpt or generate_excerpt(data.content)
        values["author"] = data.author or get_settings().default_author
        values["read_time"] = data.read_time or calculate_read_time(data.content)
        values["published_at"] = utc_now() if data.published else None

        post = BlogPost(**values)
        self.blog_repo.add(post)
        await self._commit(post)
        logger.info("Blog post created", post_id=str(post.id), published=post.published)
        return post

    async def update(self, post_id: UUID, data: BlogPostUpdate) -> BlogPost:
        """Apply a partial update.

        Raises:
            ApiError: 404 if the post does not exist, 409 if the new slug is
                used by another post.
        """
        post = await self.get(post_id)
        changes = data.changes()

        if "slug" in changes and await self.blog_repo.slug_taken(
            changes["slug"], exclude_id=post.id
        ):
            raise ApiError.conflict("A blog post with this slug already exists")

        if "content" in changes and "read_time" not in changes:
            changes["read_time"] = calculate_read_time(changes["content"])

        if "published" in changes:
            if changes["published"] and not post.published:
                changes["published_at"] = utc_now()
            elif not changes["published"]:
                changes["published_at"] = None

        for field, value in changes.items():
            setattr(post, field, value)
        post.updated_at = utc_now()

        await self._commit(post)
        logger.info("Blog post updated", post_id=str(post.id), fields=sorted(changes))
        return post

    async def delete(self, post_id: UUID) -> None:
        """Delete a post and its uploaded cover image, if any."""
        post = await self.get(post_id)
        cover_image = post.cover_image

        await self.blog_repo.delete(post)
        await self.session.commit()

        discard_uploaded_file(cover_image)
        logger.info("Blog post deleted", post_id=str(post_id))

    async def _commit(self, post: BlogPost) -> None:
        try:
            await self.session.commit()
            await self.session.refresh(post)
        except IntegrityError as e:
            await self.session.rollback()
            raise ApiError.conflict("A blog post with this slug already exists") from e

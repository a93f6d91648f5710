"""Tests for the public blog endpoints."""

from datetime import datetime

import pytest
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from src.portfolio.models import Admin
from tests.factories import BlogPostFactory
from tests.helpers import bearer_headers, persist

pytestmark = [pytest.mark.integration, pytest.mark.asyncio]


class TestListPosts:
    """Tests for GET /api/blog."""

    async def test_only_published_newest_first(
        self, client: AsyncClient, db_session: AsyncSession
    ) -> None:
        await persist(
            db_session,
            BlogPostFactory.published_post(slug="older", published_at=datetime(2024, 1, 1)),
            BlogPostFactory.published_post(slug="newer", published_at=datetime(2025, 1, 1)),
            BlogPostFactory.build(slug="draft"),
        )

        response = await client.get("/api/blog")

        assert response.status_code == 200
        body = response.json()
        assert [p["slug"] for p in body["data"]] == ["newer", "older"]
        assert body["pagination"] == {
            "page": 1,
            "limit": 10,
            "total": 2,
            "totalPages": 1,
            "hasMore": False,
        }
        assert "content" not in body["data"][0]

    async def test_pagination(self, client: AsyncClient, db_session: AsyncSession) -> None:
        await persist(
            db_session,
            *[
                BlogPostFactory.published_post(published_at=datetime(2024, 1, day))
                for day in range(1, 6)
            ],
        )

        first = await client.get("/api/blog", params={"page": 1, "limit": 2})
        last = await client.get("/api/blog", params={"page": 3, "limit": 2})
        beyond = await client.get("/api/blog", params={"page": 4, "limit": 2})

        assert len(first.json()["data"]) == 2
        assert first.json()["pagination"]["hasMore"] is True
        assert first.json()["pagination"]["totalPages"] == 3
        assert len(last.json()["data"]) == 1
        assert last.json()["pagination"]["hasMore"] is False
        assert beyond.json()["data"] == []

    @pytest.mark.parametrize("params", [{"page": 0}, {"limit": 0}, {"limit": 51}])
    async def test_rejects_bad_paging(self, client: AsyncClient, params: dict) -> None:
        response = await client.get("/api/blog", params=params)

        assert response.status_code == 400

    async def test_filter_by_tag(self, client: AsyncClient, db_session: AsyncSession) -> None:
        await persist(
            db_session,
            BlogPostFactory.published_post(slug="python", tags=["Python", "MLOps"]),
            BlogPostFactory.published_post(slug="design", tags=["API Design"]),
        )

        response = await client.get("/api/blog", params={"tag": "MLOps"})

        assert [p["slug"] for p in response.json()["data"]] == ["python"]
        assert response.json()["pagination"]["total"] == 1

    async def test_search_title_and_excerpt(
        self, client: AsyncClient, db_session: AsyncSession
    ) -> None:
        await persist(
            db_session,
            BlogPostFactory.published_post(slug="a", title="Vector Search Notes"),
            BlogPostFactory.published_post(slug="b", excerpt="All about vector indexes"),
            BlogPostFactory.published_post(slug="c", title="Unrelated"),
        )

        response = await client.get("/api/blog", params={"search": "vector"})

        assert sorted(p["slug"] for p in response.json()["data"]) == ["a", "b"]

    @pytest.mark.parametrize(
        ("search", "expected"),
        [("%", ["percent"]), ("_", ["snake"]), ("100%", ["percent"]), ("\\", [])],
    )
    async def test_search_wildcards_match_literally(
        self, client: AsyncClient, db_session: AsyncSession, search: str, expected: list[str]
    ) -> None:
        await persist(
            db_session,
            BlogPostFactory.published_post(slug="percent", title="Coverage at 100%"),
            BlogPostFactory.published_post(slug="snake", title="Why snake_case wins"),
            BlogPostFactory.published_post(slug="plain", title="Plain title"),
        )

        response = await client.get("/api/blog", params={"search": search})

        assert [p["slug"] for p in response.json()["data"]] == expected


class TestListTags:
    """Tests for GET /api/blog/tags."""

    async def test_unique_sorted_published_tags(
        self, client: AsyncClient, db_session: AsyncSession
    ) -> None:
        await persist(
            db_session,
            BlogPostFactory.published_post(tags=["Python", "MLOps"]),
            BlogPostFactory.published_post(tags=["API Design", "Python"]),
            BlogPostFactory.build(tags=["Secret"]),
        )

        response = await client.get("/api/blog/tags")

        assert response.json()["data"] == ["API Design", "MLOps", "Python"]


class TestReadPost:
    """Tests for GET /api/blog/{slug}."""

    async def test_counts_a_view(self, client: AsyncClient, db_session: AsyncSession) -> None:
        await persist(db_session, BlogPostFactory.published_post(slug="hello", views=4))

        first = await client.get("/api/blog/hello")
        second = await client.get("/api/blog/hello")

        assert first.status_code == 200
        assert first.json()["data"]["views"] == 5
        assert second.json()["data"]["views"] == 6
        assert first.json()["data"]["content"] == "<p>Some words to read.</p>"

    async def test_related_posts(self, client: AsyncClient, db_session: AsyncSession) -> None:
        await persist(
            db_session,
            BlogPostFactory.published_post(slug="main", tags=["Python", "NLP"]),
            *[
                BlogPostFactory.published_post(
                    slug=f"nlp-{day}", tags=["NLP"], published_at=datetime(2024, 1, day)
                )
                for day in range(1, 5)
            ],
            BlogPostFactory.published_post(slug="other", tags=["Design"]),
            BlogPostFactory.build(slug="draft-nlp", tags=["NLP"]),
        )

        response = await client.get("/api/blog/main")

        related = [p["slug"] for p in response.json()["related"]]
        assert related == ["nlp-4", "nlp-3", "nlp-2"]

    async def test_no_tags_means_no_related(
        self, client: AsyncClient, db_session: AsyncSession
    ) -> None:
        await persist(
            db_session,
            BlogPostFactory.published_post(slug="bare", tags=[]),
            BlogPostFactory.published_post(tags=["Python"]),
        )

        response = await client.get("/api/blog/bare")

        assert response.json()["related"] == []

    async def test_draft_is_hidden(self, client: AsyncClient, db_session: AsyncSession) -> None:
        await persist(db_session, BlogPostFactory.build(slug="secret"))

        response = await client.get("/api/blog/secret")

        assert response.status_code == 404
        assert response.json()["error"]["message"] == "Blog post not found"

    async def test_admin_can_preview_draft(
        self, client: AsyncClient, db_session: AsyncSession, admin: Admin
    ) -> None:
        (draft,) = await persist(db_session, BlogPostFactory.build(slug="secret"))

        response = await client.get("/api/blog/secret", headers=bearer_headers(admin))

        assert response.status_code == 200
        assert response.json()["data"]["views"] == 0
        await db_session.refresh(draft)
        assert draft.views == 0

    async def test_invalid_token_falls_back_to_public(
        self, client: AsyncClient, db_session: AsyncSession
    ) -> None:
        await persist(db_session, BlogPostFactory.build(slug="secret"))

        response = await client.get(
            "/api/blog/secret", headers={"Authorization": "Bearer not-a-token"}
        )

        assert response.status_code == 404

    async def test_missing(self, client: AsyncClient) -> None:
        response = await client.get("/api/blog/nothing-here")

        assert response.status_code == 404

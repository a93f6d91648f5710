"""Tests for the public project endpoints."""

import pytest
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from tests.factories import ProjectFactory
from tests.helpers import persist

pytestmark = [pytest.mark.integration, pytest.mark.asyncio]


class TestListProjects:
    """Tests for GET /api/projects."""

    async def test_empty(self, client: AsyncClient) -> None:
        response = await client.get("/api/projects")

        assert response.status_code == 200
        assert response.json() == {"success": True, "message": None, "data": [], "count": 0}

    async def test_ordering(self, client: AsyncClient, db_session: AsyncSession) -> None:
        """Featured first, then display order, then newest year."""
        await persist(
            db_session,
            ProjectFactory.build(slug="old", order=1, year=2020),
            ProjectFactory.build(slug="new", order=1, year=2024),
            ProjectFactory.build(slug="first", order=0, year=2019),
            ProjectFactory.featured_project(slug="star", order=9, year=2018),
        )

        response = await client.get("/api/projects")

        slugs = [p["slug"] for p in response.json()["data"]]
        assert slugs == ["star", "first", "new", "old"]
        assert response.json()["count"] == 4

    async def test_summary_uses_camel_case(
        self, client: AsyncClient, db_session: AsyncSession
    ) -> None:
        await persist(
            db_session,
            ProjectFactory.build(
                image_url="/uploads/projects/a.png",
                github_url="https://github.com/example/repo",
                metrics={"accuracy": "94%"},
            ),
        )

        project = (await client.get("/api/projects")).json()["data"][0]

        assert project["imageUrl"] == "/uploads/projects/a.png"
        assert project["githubUrl"] == "https://github.com/example/repo"
        assert project["demoUrl"] is None
        assert project["metrics"] == {"accuracy": "94%"}
        assert "longDescription" not in project

    async def test_filter_by_category(
        self, client: AsyncClient, db_session: AsyncSession
    ) -> None:
        await persist(
            db_session,
            ProjectFactory.build(slug="ml-one", category="ml"),
            ProjectFactory.build(slug="web-one", category="fullstack"),
        )

        response = await client.get("/api/projects", params={"category": "ml"})

        assert [p["slug"] for p in response.json()["data"]] == ["ml-one"]

    async def test_unknown_category_is_rejected(self, client: AsyncClient) -> None:
        response = await client.get("/api/projects", params={"category": "mobile"})

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "VALIDATION_ERROR"

    async def test_featured_only(self, client: AsyncClient, db_session: AsyncSession) -> None:
        await persist(
            db_session,
            ProjectFactory.featured_project(slug="star"),
            ProjectFactory.build(slug="plain"),
        )

        featured = await client.get("/api/projects", params={"featured": "true"})
        everything = await client.get("/api/projects", params={"featured": "false"})

        assert [p["slug"] for p in featured.json()["data"]] == ["star"]
        assert everything.json()["count"] == 2

    async def test_limit(self, client: AsyncClient, db_session: AsyncSession) -> None:
        await persist(db_session, *ProjectFactory.batch(3))

        response = await client.get("/api/projects", params={"limit": 2})

        assert response.json()["count"] == 2

    @pytest.mark.parametrize("limit", [0, 101])
    async def test_limit_out_of_range(self, client: AsyncClient, limit: int) -> None:
        response = await client.get("/api/projects", params={"limit": limit})

        assert response.status_code == 400


class TestGetProject:
    """Tests for GET /api/projects/{slug}."""

    async def test_found(self, client: AsyncClient, db_session: AsyncSession) -> None:
        (project,) = await persist(
            db_session, ProjectFactory.build(slug="collabcanvas", long_description="<p>Hi</p>")
        )

        response = await client.get("/api/projects/collabcanvas")

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["id"] == str(project.id)
        assert data["longDescription"] == "<p>Hi</p>"
        assert "createdAt" in data

    async def test_not_found(self, client: AsyncClient) -> None:
        response = await client.get("/api/projects/missing")

        assert response.status_code == 404
        body = response.json()
        assert body["success"] is False
        assert body["error"] == {"code": "NOT_FOUND", "message": "Project not found"}

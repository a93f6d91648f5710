"""Tests for the database seed command."""

from unittest.mock import AsyncMock

import pytest
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from src.portfolio.core.security import verify_password
from src.portfolio.models import Admin, BlogPost, Project
from src.portfolio.seed import SAMPLE_POSTS, SAMPLE_PROJECTS, main, seed_database

pytestmark = [pytest.mark.integration, pytest.mark.asyncio]

PASSWORD = "purple-monkey-dishwasher-99"


async def _count(session: AsyncSession, model: type) -> int:
    return len((await session.execute(select(model))).scalars().all())


async def test_seed_creates_admin_and_content(db_session: AsyncSession) -> None:
    result = await seed_database(db_session, "Owner@Example.com", PASSWORD, "Owner")

    assert result.admin_created is True
    assert result.projects_created == len(SAMPLE_PROJECTS)
    assert result.posts_created == len(SAMPLE_POSTS)

    admin = (await db_session.execute(select(Admin))).scalar_one()
    assert admin.email == "owner@example.com"
    assert verify_password(PASSWORD, admin.hashed_password)

    posts = (await db_session.execute(select(BlogPost))).scalars().all()
    drafts = [p for p in posts if not p.published]
    assert len(drafts) == 1
    assert drafts[0].published_at is None
    assert all(p.excerpt and p.read_time >= 1 for p in posts)


async def test_seed_is_idempotent(db_session: AsyncSession) -> None:
    await seed_database(db_session, "owner@example.com", PASSWORD, "Owner")

    again = await seed_database(db_session, "owner@example.com", "other-password", "Owner")

    assert again.admin_created is False
    assert again.projects_created == 0
    assert again.posts_created == 0
    assert await _count(db_session, Project) == len(SAMPLE_PROJECTS)
    admin = (await db_session.execute(select(Admin))).scalar_one()
    assert verify_password(PASSWORD, admin.hashed_password)


async def test_skip_content(db_session: AsyncSession) -> None:
    result = await seed_database(
        db_session, "owner@example.com", PASSWORD, "Owner", with_content=False
    )

    assert result.admin_created is True
    assert await _count(db_session, Project) == 0
    assert await _count(db_session, BlogPost) == 0


async def test_main_requires_password(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("src.portfolio.seed.setup_logging", lambda debug: None)

    assert await main([]) == 1


async def test_main_seeds_configured_database(
    db_session: AsyncSession, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setattr("src.portfolio.seed.setup_logging", lambda debug: None)
    dispose = AsyncMock()
    monkeypatch.setattr("src.portfolio.seed.dispose_engine", dispose)

    exit_code = await main(
        ["--admin-email", "me@example.com", "--admin-password", PASSWORD, "--skip-content"]
    )

    assert exit_code == 0
    dispose.assert_awaited_once()
    admin = (await db_session.execute(select(Admin))).scalar_one()
    assert admin.email == "me@example.com"

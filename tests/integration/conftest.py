"""Integration test fixtures for database and HTTP client operations.

Each test gets a fresh in-memory SQLite database shared by the test session
and the application (StaticPool keeps a single connection alive).
Uses polyfactory for type-safe test data generation.
"""

from collections.abc import AsyncGenerator
from pathlib import Path

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel

import src.portfolio.models  # noqa: F401 - registers tables on SQLModel.metadata
from src.portfolio.core.db import engine as db_engine
from src.portfolio.main import create_app
from src.portfolio.models import Admin
from tests.factories import AdminFactory
from tests.helpers import bearer_headers, persist


@pytest.fixture
async def engine(monkeypatch: pytest.MonkeyPatch) -> AsyncGenerator[AsyncEngine]:
    """Create an isolated database and make it the application's engine."""
    test_engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with test_engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    monkeypatch.setattr(db_engine, "_engine", test_engine)
    yield test_engine
    await test_engine.dispose()


@pytest.fixture
async def db_session(engine: AsyncEngine) -> AsyncGenerator[AsyncSession]:
    """Provide an async session for arranging and inspecting data.

    Tests must call `await session.commit()` (or use `persist`) so the
    application sees their rows.
    """
    async with AsyncSession(engine, expire_on_commit=False) as session:
        yield session


@pytest.fixture
def app(engine: AsyncEngine, upload_dir: Path) -> FastAPI:
    """Application bound to the test database and a temporary upload directory."""
    return create_app()


@pytest.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient]:
    """Anonymous client."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client


@pytest.fixture
async def admin(db_session: AsyncSession) -> Admin:
    """The site admin (password: DEFAULT_TEST_PASSWORD)."""
    (admin,) = await persist(db_session, AdminFactory.build(email="admin@example.com"))
    return admin


@pytest.fixture
async def admin_client(app: FastAPI, admin: Admin) -> AsyncGenerator[AsyncClient]:
    """Client authenticated as the site admin."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
        headers=bearer_headers(admin),
    ) as client:
        yield client

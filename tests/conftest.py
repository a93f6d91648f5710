"""Root test fixtures shared across all test types.

This conftest contains fixtures that can be used by both unit and integration tests.
Database-specific fixtures are in tests/integration/conftest.py.
"""

import os

# Set APP_ENV to testing before any app imports to disable rate limiting
os.environ.setdefault("APP_ENV", "testing")
# In-memory SQLite stands in for PostgreSQL
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key-with-at-least-32-characters")
# Cheap hashing keeps the suite fast
os.environ.setdefault("ARGON2_TIME_COST", "1")
os.environ.setdefault("ARGON2_MEMORY_COST", "1024")

# ruff: noqa: E402 - Imports must be after env var setup
from collections.abc import Generator
from pathlib import Path

import pytest

from src.portfolio.core import rate_limit
from src.portfolio.core.config import get_settings
from src.portfolio.core.lifecycle import lifecycle

# Clear settings cache to ensure test environment variables are picked up
get_settings.cache_clear()


@pytest.fixture
def reset_rate_limit_buckets() -> Generator[None]:
    """Reset rate limit in-memory state."""
    rate_limit._rate_limit_buckets.clear()
    yield
    rate_limit._rate_limit_buckets.clear()


@pytest.fixture
def upload_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point uploads at a per-test temporary directory."""
    root = tmp_path / "uploads"
    root.mkdir()
    monkeypatch.setattr(get_settings(), "upload_dir", str(root))
    return root


@pytest.fixture(autouse=True)
def _reset_lifecycle() -> Generator[None]:
    lifecycle.reset()
    yield
    lifecycle.reset()

"""Reusable migration runner for the CLI, deployments and tests."""

import asyncio

from alembic import command
from alembic.config import Config


def run_migrations_sync(revision: str = "head") -> None:
    """Run Alembic migrations synchronously up to ``revision``."""
    alembic_cfg = Config("alembic.ini")
    command.upgrade(alembic_cfg, revision)


async def run_migrations_async(revision: str = "head") -> None:
    """Run Alembic migrations from async context.

    Alembic's env.py drives its own engine, so it runs in a worker thread to
    stay off the event loop.
    """
    await asyncio.to_thread(run_migrations_sync, revision)

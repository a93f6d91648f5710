"""Seed the database with the admin account and sample content.

Usage:
    python -m src.portfolio.seed
    python -m src.portfolio.seed --admin-email me@example.com --admin-password '...'
    python -m src.portfolio.seed --migrate --skip-content

Existing rows are matched by admin email and content slug and left untouched,
so the command is safe to run repeatedly.
"""

import argparse
import asyncio
import sys
from dataclasses import dataclass
from datetime import datetime
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from src.portfolio.core.config import get_settings
from src.portfolio.core.db import dispose_engine, get_session, run_migrations_async
from src.portfolio.core.logging import get_logger, setup_logging
from src.portfolio.core.security import hash_password
from src.portfolio.core.text import calculate_read_time, generate_excerpt
from src.portfolio.models import Admin, BlogPost, Project, ProjectCategory
from src.portfolio.repositories import AdminRepository, BlogPostRepository, ProjectRepository

logger = get_logger(__name__)

SAMPLE_PROJECTS: list[dict[str, Any]] = [
    {
        "title": "Neural Stock Predictor",
        "slug": "neural-stock-predictor",
        "description": (
            "LSTM network with attention that forecasts daily market direction, "
            "combining price history with news sentiment."
        ),
        "long_description": (
            "<h2>Overview</h2><p>Multi-layer LSTM with an attention head over 50+ "
            "technical indicators, plus a transformer sentiment score computed from "
            "financial news.</p><h3>Stack</h3><p>Python, TensorFlow, FastAPI, PostgreSQL.</p>"
        ),
        "tags": ["Machine Learning", "Python", "TensorFlow", "LSTM", "NLP"],
        "category": ProjectCategory.ML,
        "year": 2025,
        "featured": True,
        "metrics": {"accuracy": "94.2%", "dataPoints": "100k+/day"},
        "order": 1,
    },
    {
        "title": "CollabCanvas",
        "slug": "collabcanvas",
        "description": (
            "Real-time collaborative whiteboard for remote teams with shape "
            "recognition and full version history."
        ),
        "long_description": (
            "<h2>Overview</h2><p>WebSocket sync for dozens of concurrent editors per "
            "board, with undo/redo history and PNG/SVG export.</p>"
        ),
        "tags": ["React", "Node.js", "WebSocket", "Redis"],
        "category": ProjectCategory.FULLSTACK,
        "year": 2025,
        "featured": True,
        "metrics": {"latency": "<100ms", "concurrentUsers": "50+"},
        "order": 2,
    },
    {
        "title": "SemanticSearch Pro",
        "slug": "semanticsearch-pro",
        "description": (
            "Semantic document search built on sentence embeddings and a vector "
            "index, blended with keyword ranking."
        ),
        "long_description": (
            "<h2>Overview</h2><p>Hybrid retrieval over a million documents with "
            "query intent classification.</p>"
        ),
        "tags": ["NLP", "Transformers", "Python", "FastAPI", "Vector DB"],
        "category": ProjectCategory.ML,
        "year": 2024,
        "featured": False,
        "metrics": {"relevanceImprovement": "89%", "documentsIndexed": "1M+"},
        "order": 3,
    },
    {
        "title": "NeuralViz",
        "slug": "neuralviz",
        "description": (
            "Interactive visualization of neural network internals: topology, "
            "activations and gradient flow."
        ),
        "long_description": (
            "<h2>Overview</h2><p>Layer-by-layer inspection with weight heatmaps and "
            "animated activation flow.</p>"
        ),
        "tags": ["D3.js", "Python", "React", "WebGL"],
        "category": ProjectCategory.DATA,
        "year": 2024,
        "featured": False,
        "metrics": {"architecturesSupported": "15+"},
        "order": 4,
    },
    {
        "title": "Artisan Marketplace",
        "slug": "artisan-marketplace",
        "description": (
            "Multi-vendor marketplace with direct vendor payouts, live inventory "
            "and personalized recommendations."
        ),
        "long_description": (
            "<h2>Overview</h2><p>Isolated vendor dashboards, Stripe Connect payouts "
            "and collaborative-filtering recommendations.</p>"
        ),
        "tags": ["Next.js", "Stripe", "PostgreSQL", "Redis"],
        "category": ProjectCategory.FULLSTACK,
        "year": 2024,
        "featured": True,
        "metrics": {"vendors": "200+", "products": "5000+"},
        "order": 5,
    },
]

SAMPLE_POSTS: list[dict[str, Any]] = [
    {
        "title": "Building Production-Ready ML Pipelines",
        "slug": "building-production-ml-pipelines",
        "content": (
            "<h2>From notebook to production</h2><p>Validate data before training, "
            "centralize features, track experiments and deploy behind canaries.</p>"
            "<h2>Monitoring</h2><p>Watch input drift, prediction quality and system "
            "health. Retrain when the numbers say so, not on a calendar.</p>"
        ),
        "tags": ["Machine Learning", "MLOps", "Python"],
        "published": True,
        "published_at": datetime(2025, 1, 15),
    },
    {
        "title": "The Art of API Design",
        "slug": "art-of-api-design",
        "content": (
            "<h2>Consistency</h2><p>Pick one naming convention and one error shape "
            "and use them everywhere.</p><h2>Errors</h2><p>Return stable error codes "
            "with messages a client developer can act on.</p>"
        ),
        "tags": ["API Design", "Backend", "Architecture"],
        "published": True,
        "published_at": datetime(2024, 12, 1),
    },
    {
        "title": "Notes on Vector Search",
        "slug": "notes-on-vector-search",
        "content": (
            "<p>Draft: trade-offs between exact and approximate nearest neighbour "
            "indexes, and when hybrid keyword ranking still wins.</p>"
        ),
        "tags": ["NLP", "Python", "Vector DB"],
        "published": False,
        "published_at": None,
    },
]


@dataclass
class SeedResult:
    admin_created: bool = False
    projects_created: int = 0
    posts_created: int = 0


async def seed_database(
    session: AsyncSession,
    admin_email: str,
    admin_password: str,
    admin_name: str,
    with_content: bool = True,
) -> SeedResult:
    """Insert the admin and sample content that do not exist yet."""
    result = SeedResult()
    admin_repo = AdminRepository(session)
    project_repo = ProjectRepository(session)
    blog_repo = BlogPostRepository(session)

    email = admin_email.lower()
    if await admin_repo.get_by_email(email) is None:
        admin_repo.add(
            Admin(email=email, hashed_password=hash_password(admin_password), name=admin_name)
        )
        result.admin_created = True

    if with_content:
        for data in SAMPLE_PROJECTS:
            if await project_repo.get_by_slug(data["slug"]) is None:
                project_repo.add(Project(**{**data, "category": data["category"].value}))
                result.projects_created += 1

        author = get_settings().default_author
        for data in SAMPLE_POSTS:
            if await blog_repo.get_by_slug(data["slug"]) is None:
                blog_repo.add(
                    BlogPost(
                        **data,
                        excerpt=generate_excerpt(data["content"]),
                        author=author,
                        read_time=calculate_read_time(data["content"]),
                    )
                )
                result.posts_created += 1

    await session.commit()
    return result


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Seed the portfolio database")
    parser.add_argument("--admin-email", default=settings.admin_email)
    parser.add_argument(
        "--admin-password",
        default=settings.admin_password,
        help="Defaults to ADMIN_PASSWORD from the environment",
    )
    parser.add_argument("--admin-name", default=settings.admin_name)
    parser.add_argument(
        "--skip-content",
        action="store_true",
        help="Only create the admin account",
    )
    parser.add_argument(
        "--migrate",
        action="store_true",
        help="Apply Alembic migrations before seeding",
    )
    return parser.parse_args(argv)


async def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    setup_logging(get_settings().debug)

    if not args.admin_password:
        logger.error("Admin password required: pass --admin-password or set ADMIN_PASSWORD")
        return 1

    if args.migrate:
        await run_migrations_async()

    try:
        async with get_session() as session:
            result = await seed_database(
                session,
                admin_email=args.admin_email,
                admin_password=args.admin_password,
                admin_name=args.admin_name,
                with_content=not args.skip_content,
            )
    finally:
        await dispose_engine()

    logger.info(
        "Seed complete",
        admin_created=result.admin_created,
        projects_created=result.projects_created,
        posts_created=result.posts_created,
    )
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from src.portfolio.api.middlewares import setup_middlewares
from src.portfolio.api.routes.router import api_router
from src.portfolio.core.config import get_settings
from src.portfolio.core.db import dispose_engine
from src.portfolio.core.exceptions import setup_exception_handlers
from src.portfolio.core.health import setup_health_endpoint, setup_metrics
from src.portfolio.core.lifecycle import lifecycle
from src.portfolio.core.logging import get_logger, setup_logging
from src.portfolio.core.rate_limit import limiter
from src.portfolio.core.uploads import UPLOAD_URL_PREFIX, ensure_upload_dirs

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Application lifespan - startup and shutdown."""
    settings = get_settings()
    setup_logging(settings.debug)
    ensure_upload_dirs()
    logger.info("Starting application", app_name=settings.app_name, env=settings.app_env)

    yield

    grace_period = settings.shutdown_grace_period
    logger.info("Shutdown initiated", in_flight=lifecycle.in_flight_count)

    await lifecycle.start_draining()
    drained = await lifecycle.wait_for_drain(timeout=grace_period)
    if not drained:
        logger.warning(
            "Shutdown timeout, some requests may not have completed",
            grace_period=grace_period,
            in_flight=lifecycle.in_flight_count,
        )

    await dispose_engine()
    logger.info("Shutdown complete")


OPENAPI_TAGS = [
    {"name": "projects", "description": "Public portfolio projects"},
    {"name": "blog", "description": "Published blog posts"},
    {"name": "contact", "description": "Contact form"},
    {"name": "auth", "description": "Admin authentication"},
    {"name": "admin", "description": "Content management (admin only)"},
    {"name": "site", "description": "Health and public statistics"},
]


def create_app() -> FastAPI:
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Portfolio backend: projects, blog, contact form and admin API",
        version="0.1.0",
        openapi_tags=OPENAPI_TAGS,
        lifespan=lifespan,
        docs_url="/docs" if settings.enable_openapi else None,
        redoc_url="/redoc" if settings.enable_openapi else None,
        openapi_url="/openapi.json" if settings.enable_openapi else None,
    )

    setup_exception_handlers(app)
    app.state.limiter = limiter

    setup_middlewares(app, settings)

    app.include_router(api_router)
    setup_health_endpoint(app)
    setup_metrics(app)

    app.mount(
        UPLOAD_URL_PREFIX,
        StaticFiles(directory=settings.upload_dir, check_dir=False),
        name="uploads",
    )

    return app


app = create_app()

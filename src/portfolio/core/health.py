"""Health check and Prometheus metrics endpoints."""

import secrets

from fastapi import Depends, FastAPI, status
from fastapi.responses import JSONResponse
from fastapi.security import APIKeyHeader
from prometheus_fastapi_instrumentator import Instrumentator
from sqlalchemy import text

from src.portfolio.core.config import get_settings
from src.portfolio.core.db import get_session
from src.portfolio.core.exceptions import ApiError
from src.portfolio.core.lifecycle import lifecycle
from src.portfolio.core.logging import get_logger
from src.portfolio.models.base import utc_now

logger = get_logger(__name__)


async def check_database() -> str:
    """Return "healthy" or a short description of the failure."""
    try:
        async with get_session() as session:
            await session.execute(text("SELECT 1"))
        return "healthy"
    except Exception as e:
        logger.warning("Database health check failed", error=str(e))
        return f"unhealthy: {e.__class__.__name__}"


def setup_health_endpoint(app: FastAPI) -> None:
    """Configure the health check endpoint."""

    @app.get("/api/health", tags=["site"])
    async def health() -> JSONResponse:
        """Liveness plus a database round trip. 503 while draining or unhealthy."""
        timestamp = utc_now().isoformat() + "Z"
        uptime = round(lifecycle.uptime_seconds, 3)

        if lifecycle.is_draining:
            return JSONResponse(
                content={
                    "status": "draining",
                    "timestamp": timestamp,
                    "uptime": uptime,
                    "inFlightRequests": lifecycle.in_flight_count,
                },
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            )

        database = await check_database()
        healthy = database == "healthy"
        return JSONResponse(
            content={
                "status": "ok" if healthy else "unhealthy",
                "timestamp": timestamp,
                "uptime": uptime,
                "database": database,
            },
            status_code=status.HTTP_200_OK if healthy else status.HTTP_503_SERVICE_UNAVAILABLE,
        )


def setup_metrics(app: FastAPI) -> None:
    """Configure Prometheus metrics with optional API key protection."""
    settings = get_settings()
    instrumentator = Instrumentator(excluded_handlers=["/metrics", "/uploads.*"]).instrument(app)

    if settings.metrics_api_key:
        api_key_header = APIKeyHeader(name="X-Metrics-Key", auto_error=False)

        async def verify_metrics_key(
            api_key: str | None = Depends(api_key_header),
        ) -> None:
            if (
                api_key is None
                or settings.metrics_api_key is None
                or not secrets.compare_digest(api_key, settings.metrics_api_key)
            ):
                raise ApiError.unauthorized("Invalid or missing metrics API key")

        instrumentator.expose(
            app,
            endpoint="/metrics",
            include_in_schema=False,
            dependencies=[Depends(verify_metrics_key)],
        )
    else:
        instrumentator.expose(app, endpoint="/metrics", include_in_schema=False)

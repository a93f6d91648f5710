"""Request tracking middleware for graceful shutdown."""

from fastapi import Request, Response
from starlette.middleware.base import RequestResponseEndpoint

from src.portfolio.core.lifecycle import lifecycle

_UNTRACKED_PATHS = frozenset({"/api/health", "/metrics"})


async def request_tracking_middleware(
    request: Request, call_next: RequestResponseEndpoint
) -> Response:
    """Count in-flight requests so shutdown can wait for them."""
    if request.url.path in _UNTRACKED_PATHS:
        return await call_next(request)

    async with lifecycle.track_request():
        return await call_next(request)

"""Rate limiting configuration.

Provides two layers of rate limiting:
1. Global middleware: in-memory token bucket applied to ALL requests per client IP
2. Endpoint decorators: slowapi limits on abuse-prone endpoints (contact form, login)

Endpoint limits use RATE_LIMIT_STORAGE_URI when set (e.g. Redis) so they hold
across workers; otherwise they are per-process.
"""

import asyncio
import time
from collections import defaultdict

from slowapi import Limiter
from slowapi.util import get_remote_address
from starlette.requests import Request
from starlette.responses import Response

from src.portfolio.core.config import get_settings
from src.portfolio.core.exceptions import error_response
from src.portfolio.core.logging import get_logger

logger = get_logger(__name__)

# Per-IP token buckets for global rate limiting
_rate_limit_buckets: dict[str, dict[str, float]] = defaultdict(dict)
_rate_limit_lock = asyncio.Lock()
_MAX_TRACKED_CLIENTS = 10_000

_EXEMPT_PATHS = frozenset({"/api/health", "/metrics", "/docs", "/openapi.json", "/redoc"})


def get_rate_limit_key(request: Request) -> str:
    """Generate rate limit key from client IP only.

    Never include user-controlled headers in the key: rotating them would
    create unlimited new buckets.
    """
    return get_remote_address(request) or "unknown"


def create_limiter() -> Limiter:
    """Create rate limiter with appropriate storage backend.

    Disabled in testing environment.
    """
    settings = get_settings()

    if settings.app_env == "testing":
        logger.info("Rate limiter disabled (testing environment)")
        return Limiter(key_func=get_rate_limit_key, enabled=False)

    if settings.rate_limit_storage_uri:
        logger.info("Rate limiter using shared storage backend")
        return Limiter(key_func=get_rate_limit_key, storage_uri=settings.rate_limit_storage_uri)

    logger.info("Rate limiter using in-memory backend (not distributed)")
    return Limiter(key_func=get_rate_limit_key)


# Reads settings at import time; reconfiguring requires a restart
limiter = create_limiter()


def contact_rate_limit() -> str:
    return get_settings().contact_rate_limit


def login_rate_limit() -> str:
    return get_settings().login_rate_limit


def _evict_buckets(now: float, refill_seconds: float) -> None:
    """Drop buckets that have refilled completely, or the stalest one if none have.

    A refilled bucket is indistinguishable from a fresh one, so dropping it
    changes no client's allowance. Caller must hold the lock.
    """
    idle = [
        ip
        for ip, bucket in _rate_limit_buckets.items()
        if now - bucket["last_update"] >= refill_seconds
    ]
    if not idle:
        idle = [min(_rate_limit_buckets, key=lambda ip: _rate_limit_buckets[ip]["last_update"])]

    for ip in idle:
        del _rate_limit_buckets[ip]
    logger.debug("Evicted idle rate limit buckets", count=len(idle))


async def _check_global_rate_limit(client_ip: str) -> bool:
    """Token bucket check. Returns True if the request is allowed."""
    settings = get_settings()
    if settings.app_env == "testing":
        return True

    rate = settings.global_rate_limit_per_second
    burst = settings.global_rate_limit_burst
    now = time.time()

    async with _rate_limit_lock:
        if client_ip not in _rate_limit_buckets:
            if len(_rate_limit_buckets) >= _MAX_TRACKED_CLIENTS:
                _evict_buckets(now, burst / rate if rate else float("inf"))
            _rate_limit_buckets[client_ip] = {
                "tokens": float(burst),
                "last_update": now,
            }

        bucket = _rate_limit_buckets[client_ip]
        elapsed = now - bucket["last_update"]

        # Replenish tokens based on time elapsed
        bucket["tokens"] = min(burst, bucket["tokens"] + elapsed * rate)
        bucket["last_update"] = now

        if bucket["tokens"] >= 1:
            bucket["tokens"] -= 1
            return True
        return False


async def global_rate_limit_middleware(
    request: Request,
    call_next: object,  # type: ignore[type-arg]
) -> Response:
    """Global per-IP rate limiting for every request.

    Exempt paths: health check, metrics and API docs.
    """
    if request.url.path in _EXEMPT_PATHS:
        return await call_next(request)  # type: ignore[misc, operator, no-any-return]

    client_ip = get_remote_address(request) or "unknown"

    if not await _check_global_rate_limit(client_ip):
        logger.warning(
            "Global rate limit exceeded",
            client_ip=client_ip,
            path=request.url.path,
        )
        return error_response(
            429,
            "RATE_LIMITED",
            "Too many requests. Please slow down.",
            headers={"Retry-After": "1"},
        )

    return await call_next(request)  # type: ignore[misc, operator, no-any-return]

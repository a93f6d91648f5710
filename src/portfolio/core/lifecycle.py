"""Server lifecycle state: uptime and in-flight requests for graceful shutdown."""

import asyncio
import time
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from src.portfolio.core.logging import get_logger

logger = get_logger(__name__)


class ServerLifecycle:
    """Tracks process uptime and in-flight requests.

    During shutdown the server stops reporting healthy and waits for
    in-flight requests to drain before closing the database pool.
    """

    def __init__(self) -> None:
        self._started_at = time.monotonic()
        self._in_flight = 0
        self._draining = False
        self._lock = asyncio.Lock()
        self._drained = asyncio.Event()

    @property
    def uptime_seconds(self) -> float:
        return time.monotonic() - self._started_at

    @property
    def is_draining(self) -> bool:
        return self._draining

    @property
    def in_flight_count(self) -> int:
        return self._in_flight

    @asynccontextmanager
    async def track_request(self) -> AsyncGenerator[None, None]:
        """Count a request as in-flight for the duration of the block."""
        async with self._lock:
            self._in_flight += 1
        try:
            yield
        finally:
            async with self._lock:
                self._in_flight -= 1
                if self._in_flight == 0 and self._draining:
                    self._drained.set()

    async def start_draining(self) -> None:
        """Stop accepting work as healthy; release waiters once nothing is in flight."""
        self._draining = True
        async with self._lock:
            if self._in_flight == 0:
                self._drained.set()
            else:
                logger.info("Waiting for in-flight requests", in_flight=self._in_flight)

    async def wait_for_drain(self, timeout: float) -> bool:
        """Wait for in-flight requests to finish.

        Returns:
            True if all requests completed within timeout, False otherwise
        """
        try:
            await asyncio.wait_for(self._drained.wait(), timeout=timeout)
            return True
        except TimeoutError:
            logger.warning(
                "Drain timed out",
                timeout=timeout,
                in_flight=self._in_flight,
            )
            return False

    def reset(self) -> None:
        """Reset state. For testing only."""
        self._started_at = time.monotonic()
        self._in_flight = 0
        self._draining = False
        self._drained = asyncio.Event()


lifecycle = ServerLifecycle()

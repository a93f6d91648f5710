"""Tests for in-flight request tracking and draining."""

import asyncio
import contextlib

import pytest

from src.portfolio.core.lifecycle import ServerLifecycle

pytestmark = pytest.mark.unit


class TestServerLifecycle:
    async def test_tracks_a_request(self) -> None:
        tracker = ServerLifecycle()
        assert tracker.in_flight_count == 0
        assert not tracker.is_draining

        async with tracker.track_request():
            assert tracker.in_flight_count == 1

        assert tracker.in_flight_count == 0

    async def test_tracks_concurrent_requests(self) -> None:
        tracker = ServerLifecycle()

        async def request(delay: float) -> None:
            async with tracker.track_request():
                await asyncio.sleep(delay)

        tasks = [asyncio.create_task(request(0.1)) for _ in range(3)]
        await asyncio.sleep(0.05)
        assert tracker.in_flight_count == 3

        await asyncio.gather(*tasks)
        assert tracker.in_flight_count == 0

    async def test_counter_released_on_error(self) -> None:
        tracker = ServerLifecycle()

        with pytest.raises(RuntimeError):
            async with tracker.track_request():
                raise RuntimeError("boom")

        assert tracker.in_flight_count == 0

    async def test_drains_immediately_when_idle(self) -> None:
        tracker = ServerLifecycle()

        await tracker.start_draining()

        assert tracker.is_draining
        assert await tracker.wait_for_drain(timeout=1.0) is True

    async def test_waits_for_in_flight_requests(self) -> None:
        tracker = ServerLifecycle()

        async def slow_request() -> None:
            async with tracker.track_request():
                await asyncio.sleep(0.2)

        task = asyncio.create_task(slow_request())
        await asyncio.sleep(0.05)

        await tracker.start_draining()
        assert await tracker.wait_for_drain(timeout=1.0) is True
        assert tracker.in_flight_count == 0
        await task

    async def test_drain_timeout(self) -> None:
        tracker = ServerLifecycle()

        async def stuck_request() -> None:
            async with tracker.track_request():
                await asyncio.sleep(5.0)

        task = asyncio.create_task(stuck_request())
        await asyncio.sleep(0.05)

        await tracker.start_draining()
        assert await tracker.wait_for_drain(timeout=0.1) is False
        assert tracker.in_flight_count == 1

        task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await task

    async def test_uptime_increases(self) -> None:
        tracker = ServerLifecycle()
        first = tracker.uptime_seconds
        await asyncio.sleep(0.01)
        assert tracker.uptime_seconds > first

    async def test_reset(self) -> None:
        tracker = ServerLifecycle()
        await tracker.start_draining()

        tracker.reset()

        assert not tracker.is_draining
        assert tracker.in_flight_count == 0

"""Tests for the per-endpoint limits on login and the contact form."""

from collections.abc import Generator
from unittest.mock import patch

import pytest
from httpx import AsyncClient

from src.portfolio.core.config import get_settings
from src.portfolio.core.rate_limit import limiter
from src.portfolio.models import Admin

pytestmark = [pytest.mark.integration, pytest.mark.asyncio]

CONTACT_MESSAGE = {
    "name": "Jane Visitor",
    "email": "jane@example.com",
    "message": "I would like to talk about a project.",
}


@pytest.fixture
def endpoint_limits(monkeypatch: pytest.MonkeyPatch) -> Generator[None]:
    """Turn the endpoint limiter on with the default limits."""
    settings = get_settings()
    monkeypatch.setattr(settings, "contact_rate_limit", "5/hour")
    monkeypatch.setattr(settings, "login_rate_limit", "10/minute")

    limiter.reset()
    limiter.enabled = True
    try:
        yield
    finally:
        limiter.enabled = False
        limiter.reset()


@pytest.mark.usefixtures("endpoint_limits")
class TestEndpointRateLimits:
    async def test_sixth_contact_message_is_limited(self, client: AsyncClient) -> None:
        with patch("src.portfolio.api.routes.contact.send_contact_email"):
            statuses = [
                (await client.post("/api/contact", json=CONTACT_MESSAGE)).status_code
                for _ in range(5)
            ]
            limited = await client.post("/api/contact", json=CONTACT_MESSAGE)

        assert statuses == [201] * 5
        assert limited.status_code == 429
        body = limited.json()
        assert body["success"] is False
        assert body["error"]["code"] == "RATE_LIMITED"

    async def test_eleventh_login_attempt_is_limited(
        self, client: AsyncClient, admin: Admin
    ) -> None:
        credentials = {"email": "admin@example.com", "password": "wrong-password"}

        statuses = [
            (await client.post("/api/auth/login", json=credentials)).status_code
            for _ in range(10)
        ]
        limited = await client.post("/api/auth/login", json=credentials)

        assert statuses == [401] * 10
        assert limited.status_code == 429
        body = limited.json()
        assert body["success"] is False
        assert body["error"]["code"] == "RATE_LIMITED"

    async def test_limits_are_per_endpoint(self, client: AsyncClient, admin: Admin) -> None:
        credentials = {"email": "admin@example.com", "password": "wrong-password"}
        for _ in range(10):
            await client.post("/api/auth/login", json=credentials)

        with patch("src.portfolio.api.routes.contact.send_contact_email"):
            response = await client.post("/api/contact", json=CONTACT_MESSAGE)

        assert response.status_code == 201

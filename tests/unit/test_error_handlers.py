"""Tests for the error envelope produced by the exception handlers."""

from collections.abc import AsyncGenerator

import pytest
from fastapi import FastAPI, HTTPException
from httpx import ASGITransport, AsyncClient

from src.portfolio.core.exceptions import ApiError, setup_exception_handlers

pytestmark = pytest.mark.unit


@pytest.fixture
def app() -> FastAPI:
    app = FastAPI()
    setup_exception_handlers(app)

    @app.get("/api-error")
    async def api_error() -> None:
        raise ApiError.conflict("Already taken")

    @app.get("/forbidden")
    async def forbidden() -> None:
        raise HTTPException(status_code=403, detail="Not for you")

    @app.get("/teapot")
    async def teapot() -> None:
        raise HTTPException(status_code=418)

    @app.get("/boom")
    async def boom() -> None:
        raise RuntimeError("kaboom")

    return app


@pytest.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient]:
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


async def test_api_error(client: AsyncClient) -> None:
    response = await client.get("/api-error")

    assert response.status_code == 409
    assert response.json() == {
        "success": False,
        "error": {"code": "CONFLICT", "message": "Already taken"},
        "request_id": None,
    }


async def test_framework_forbidden(client: AsyncClient) -> None:
    response = await client.get("/forbidden")

    assert response.status_code == 403
    assert response.json()["error"] == {"code": "FORBIDDEN", "message": "Not for you"}


async def test_unmapped_status_falls_back_to_internal_code(client: AsyncClient) -> None:
    response = await client.get("/teapot")

    assert response.status_code == 418
    assert response.json()["error"]["code"] == "INTERNAL_ERROR"


async def test_unhandled_exception(client: AsyncClient) -> None:
    response = await client.get("/boom")

    assert response.status_code == 500
    body = response.json()
    assert body["success"] is False
    assert body["error"] == {"code": "INTERNAL_ERROR", "message": "kaboom"}

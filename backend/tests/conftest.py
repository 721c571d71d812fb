"""
Calculator API — Test Configuration (conftest.py)
===================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixtures:
    ├── test_client: HTTPX AsyncClient bound to the default app
    ├── make_client: builds an AsyncClient for any ASGI app (custom settings, stub routes)
    └── stub_app: a bare app with the exception handlers but no routes
"""

import os

# Pin the environment BEFORE any calculator_api import reads it
os.environ["LOG_LEVEL"] = "WARNING"  # Reduce noise during tests
os.environ["ALLOW_CORS"] = "false"
os.environ["ENABLE_SWAGGER"] = "false"
os.environ["ARTIFICIAL_DELAY_MS"] = "0"

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient


@pytest_asyncio.fixture
async def test_client():
    """
    Provides an async HTTP test client for endpoint testing.

    Uses ASGITransport to route requests directly to the app (no server).

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/health")
            assert response.status_code == 200
    """
    from calculator_api.main import app
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def make_client():
    """
    Factory for clients talking to an arbitrary app.

    Usage:
        async with make_client(create_app(Settings(allow_cors=True))) as client:
            ...
    """
    def _make(app: FastAPI) -> AsyncClient:
        return AsyncClient(transport=ASGITransport(app=app), base_url="http://test")
    return _make


@pytest.fixture
def stub_app() -> FastAPI:
    """An app with the production exception handlers and no routes; tests add their own."""
    from calculator_api.main import register_exception_handlers
    app = FastAPI()
    register_exception_handlers(app)
    return app

"""Root conftest — shared test configuration and app fixtures.

Invariants:
    - Every test gets a fresh app with its own RecordStore
    - Settings are built explicitly; a developer's .env never leaks into tests

Design Decisions:
    - httpx AsyncClient over ASGITransport: exercises middleware, routing and
      error handlers exactly as uvicorn would, without a socket
"""

import os
from contextlib import asynccontextmanager

import pytest
from httpx import ASGITransport, AsyncClient

# Ensure the module-level app in echostore.main builds with defaults
os.environ.setdefault("RELEASE_MODE", "false")

from echostore.config import Settings
from echostore.main import create_app


@pytest.fixture
def settings():
    return Settings(_env_file=None)


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def store(app):
    return app.state.store


@pytest.fixture
async def client(app):
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c


@pytest.fixture
def client_factory():
    """Build a client for an app with custom settings."""

    @asynccontextmanager
    async def _make(custom_settings, **kwargs):
        custom_app = create_app(custom_settings)
        async with AsyncClient(
            transport=ASGITransport(app=custom_app, **kwargs),
            base_url="http://test",
        ) as c:
            yield c

    return _make

"""
API test fixtures.

The lifespan is not run: database and AI resources are replaced through
dependency overrides.
"""

from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from kram.boundary.db import get_async_db
from kram.main import create_app


@pytest.fixture
def fake_db() -> AsyncMock:
    return AsyncMock()


@pytest.fixture
def client(fake_db):
    app = create_app()

    async def _override_db():
        yield fake_db

    app.dependency_overrides[get_async_db] = _override_db
    return TestClient(app)


@pytest.fixture
def production(monkeypatch):
    """Hide debug output as in a production deployment."""
    monkeypatch.setattr("kram.api.routers.kram.kram_responses.debug_enabled", lambda: False)

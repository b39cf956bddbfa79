"""Tests for health check endpoints."""

from pathlib import Path
from unittest.mock import AsyncMock

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.exc import OperationalError

from decksmith.config import settings
from decksmith.db.database import get_session
from decksmith.main import app
from decksmith.services.card_catalog import get_catalog


@pytest.fixture(autouse=True)
def fresh_catalog_cache():
    """Readiness loads the configured catalog; don't leak it between tests."""
    get_catalog.cache_clear()
    yield
    get_catalog.cache_clear()


class TestHealthEndpoint:
    async def test_health_returns_healthy(self, client: AsyncClient) -> None:
        """Liveness probe returns healthy."""
        response = await client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"

    async def test_health_no_dependency_checks(self, client: AsyncClient) -> None:
        """Health endpoint does not include database or catalog status."""
        data = (await client.get("/health")).json()

        assert data.get("database") is None
        assert data.get("catalog_cards") is None


class TestReadyEndpoint:
    async def test_ready_returns_ready(self, client: AsyncClient) -> None:
        """Readiness probe returns ready when DB is connected and catalog loads."""
        response = await client.get("/ready")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "ready"
        assert data["database"] == "connected"
        assert data["catalog_cards"] == 11

    async def test_ready_returns_503_on_db_failure(self) -> None:
        """Readiness probe returns 503 when DB is unavailable."""

        async def override_get_session_broken():
            mock_session = AsyncMock()
            mock_session.execute.side_effect = OperationalError(
                "SELECT 1", {}, Exception("Database connection failed")
            )
            yield mock_session

        app.dependency_overrides[get_session] = override_get_session_broken

        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            response = await client.get("/ready")

        app.dependency_overrides.clear()

        assert response.status_code == 503
        data = response.json()
        assert data["status"] == "not ready"
        assert data["database"] == "disconnected"

    async def test_ready_returns_503_without_catalog(
        self, client: AsyncClient, monkeypatch: pytest.MonkeyPatch, tmp_path: Path
    ) -> None:
        """Readiness probe returns 503 when the catalog file is missing."""
        monkeypatch.setattr(settings, "catalog_path", str(tmp_path / "missing.json"))

        response = await client.get("/ready")

        assert response.status_code == 503
        data = response.json()
        assert data["status"] == "not ready"
        assert data["database"] == "connected"
        assert data["catalog_cards"] is None

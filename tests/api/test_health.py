"""Tests for health check endpoints."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from api.dependencies import get_db


@pytest.fixture
def mock_db() -> MagicMock:
    db = MagicMock()
    db.command = AsyncMock(return_value={"ok": 1.0})
    return db


@pytest.fixture
def health_client(app, mock_db) -> TestClient:
    app.dependency_overrides[get_db] = lambda: mock_db
    return TestClient(app)


class TestHealthEndpoints:
    """Tests for health check endpoints."""

    def test_root(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert response.text == "Api is running..."

    def test_health_check(self, client):
        """Health endpoint should return 200 with status."""
        response = client.get("/api/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["version"] == "0.1.0"

    def test_health_response_structure(self, client):
        response = client.get("/api/health")
        assert set(response.json().keys()) == {"status", "version"}

    def test_readiness_check(self, health_client, mock_db):
        """Readiness endpoint pings the database."""
        response = health_client.get("/api/ready")
        assert response.status_code == 200
        assert response.json() == {"status": "ready", "database": "connected"}
        mock_db.command.assert_awaited_once_with("ping")

    def test_readiness_database_down(self, health_client, mock_db):
        mock_db.command.side_effect = Exception("connection refused")

        response = health_client.get("/api/ready")

        assert response.status_code == 200
        assert response.json() == {"status": "degraded", "database": "unavailable"}

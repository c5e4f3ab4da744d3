"""
Tests for GET /contractors and GET /health.

The store client is injected through the get_store_client dependency, so
tests override it instead of talking to Supabase.
"""

from unittest.mock import MagicMock, patch

import pytest
from fastapi.testclient import TestClient

from contractor_risk.db.client import get_store_client
from contractor_risk.main import app


@pytest.fixture
def client():
    """Create test client for FastAPI app."""
    return TestClient(app)


@pytest.fixture
def mock_store(supabase_client):
    """Override the store dependency with a mock Supabase client."""
    app.dependency_overrides[get_store_client] = lambda: supabase_client
    yield supabase_client
    app.dependency_overrides.clear()


@pytest.fixture
def listed_contractors():
    return [
        {
            "id": 1,
            "name": "Alice",
            "email": "alice@example.com",
            "application": "CRM",
            "access_level": "admin",
            "has_prod_access": True,
            "contract_end": "2026-12-31",
            "risk_score": 85,
            "risk_factors": [{"factor": "Excessive permissions", "reason": "Admin", "weight": 90}],
            "calculation_details": {"base": 10},
        }
    ]


class TestListContractors:
    """GET /contractors."""

    def test_list_success(self, client, mock_store, listed_contractors):
        """Contractors are returned with count and generation time."""
        with patch(
            "contractor_risk.routes.contractors.get_contractors_with_risk_scores",
            return_value=listed_contractors,
        ) as mock_get:
            response = client.get("/contractors")

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["count"] == 1
        assert body["contractors"][0]["name"] == "Alice"
        assert body["contractors"][0]["email"] == "alice@example.com"
        assert body["contractors"][0]["risk_factors"][0]["weight"] == 90
        assert "generatedAt" in body
        assert response.headers["access-control-allow-origin"] == "*"
        mock_get.assert_called_once_with(mock_store)

    def test_rows_listed_as_stored(self, client, mock_store):
        """Risk data outside the usual shape does not fail the listing."""
        row = {
            "id": 2,
            "name": "Carol",
            "risk_score": "72.5",
            "risk_factors": [
                {"factor": "Stale account", "weight": 120},
                "unclassified",
            ],
        }

        with patch(
            "contractor_risk.routes.contractors.get_contractors_with_risk_scores",
            return_value=[row],
        ):
            response = client.get("/contractors")

        assert response.status_code == 200
        listed = response.json()["contractors"][0]
        assert listed["risk_score"] == "72.5"
        assert listed["risk_factors"] == row["risk_factors"]

    def test_store_failure(self, client, mock_store):
        """Query errors are logged and reported generically."""
        with patch(
            "contractor_risk.routes.contractors.get_contractors_with_risk_scores",
            side_effect=RuntimeError("password authentication failed"),
        ):
            response = client.get("/contractors")

        assert response.status_code == 500
        assert response.json() == {"error": "Internal server error"}
        assert "password" not in response.text

    def test_store_not_configured(self, client):
        """Without a store client the endpoint answers 500."""
        app.dependency_overrides.clear()
        app.state.store_client = None

        response = client.get("/contractors")

        assert response.status_code == 500
        assert response.json() == {"error": "Internal server error"}


class TestLifespan:
    """The store client is created once at startup."""

    def test_client_created_on_startup(self):
        store = MagicMock()
        with patch("contractor_risk.main.create_store_client", return_value=store) as factory:
            with TestClient(app):
                assert app.state.store_client is store

        factory.assert_called_once()
        assert app.state.store_client is None


class TestHealth:
    """GET /health."""

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "ok"}

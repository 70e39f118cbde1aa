"""Integration tests for FastAPI application, CORS, and error envelopes."""

import pytest
from fastapi.testclient import TestClient
from app.main import app


@pytest.fixture
def client():
    """Create test client for FastAPI application."""
    return TestClient(app)


class TestApplicationConfiguration:
    """Test cases for basic application configuration."""

    def test_app_title_and_version(self, client):
        """Test that app has correct title and version."""
        openapi_response = client.get("/openapi.json")
        assert openapi_response.status_code == 200
        openapi_data = openapi_response.json()

        assert openapi_data["info"]["title"] == "Flight Search Gateway"
        assert openapi_data["info"]["version"] == "1.0.0"
        assert "/flights/search" in openapi_data["paths"]

    def test_root_endpoint(self, client):
        """Test root endpoint returns correct information."""
        response = client.get("/")
        assert response.status_code == 200

        data = response.json()
        assert data["message"] == "Flight Search Gateway"
        assert data["version"] == "1.0.0"
        assert data["docs"] == "/docs"

    def test_health_check_endpoint(self, client):
        """Test health check endpoint returns correct status."""
        response = client.get("/health")
        assert response.status_code == 200

        data = response.json()
        assert data["status"] == "healthy"
        assert data["service"] == "flight-search-gateway"


class TestCORSFunctionality:
    """Test cases for CORS middleware functionality."""

    def test_cors_preflight_request(self, client):
        """Test CORS preflight OPTIONS request."""
        headers = {
            "Origin": "http://localhost:3000",
            "Access-Control-Request-Method": "POST",
            "Access-Control-Request-Headers": "Content-Type"
        }

        response = client.options("/flights/search", headers=headers)

        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] == "http://localhost:3000"

    def test_cors_disallowed_origin(self, client):
        """Test that unknown origins are not echoed back."""
        response = client.get("/health", headers={"Origin": "http://evil.test"})

        assert response.status_code == 200
        assert "access-control-allow-origin" not in response.headers


class TestErrorEnvelope:
    """Test that framework errors use the error envelope."""

    def test_not_found(self, client):
        """Test unknown routes return the envelope with 404."""
        response = client.get("/flights/unknown")

        assert response.status_code == 404
        data = response.json()
        assert data["error"]["status"] == 404
        assert "message" in data["error"]

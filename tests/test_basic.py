"""
Basic application tests.

Validates that the FastAPI app starts correctly and the
health endpoint responds as expected.
"""

from fastapi.testclient import TestClient

from errorpages.main import app

client = TestClient(app)


class TestHealthEndpoint:
    """Tests for the health check endpoint."""

    def test_health_returns_200(self) -> None:
        """Health endpoint must return HTTP 200."""
        response = client.get("/healthz")
        assert response.status_code == 200

    def test_health_response_body_is_empty(self) -> None:
        """Health endpoint must not return a body."""
        response = client.get("/healthz")
        assert response.content == b""

    def test_health_ignores_error_page_headers(self) -> None:
        """Proxy headers do not turn the health check into an error page."""
        response = client.get("/healthz", headers={"X-Code": "503"})
        assert response.status_code == 200

"""Tests for API middleware."""

from unittest.mock import MagicMock, patch

import pytest
from fastapi.testclient import TestClient

from petmall.api.middleware import RequestIdMiddleware
from petmall.main import app


@pytest.fixture
def client() -> TestClient:
    """Create test client."""
    return TestClient(app)


class TestRequestIdMiddleware:
    """Tests for request ID correlation middleware."""

    def test_generates_request_id_if_not_provided(self, client: TestClient) -> None:
        """Should generate request ID if not in request headers."""
        response = client.get("/health")
        assert response.status_code == 200
        assert "X-Request-ID" in response.headers
        # UUID format
        request_id = response.headers["X-Request-ID"]
        assert len(request_id) == 36

    def test_uses_provided_request_id(self, client: TestClient) -> None:
        """Should use request ID from request headers."""
        custom_id = "custom-request-id-12345"
        response = client.get(
            "/health",
            headers={"X-Request-ID": custom_id},
        )
        assert response.status_code == 200
        assert response.headers["X-Request-ID"] == custom_id

    def test_request_id_on_error_responses(self, client: TestClient) -> None:
        """Error responses carry the request ID too."""
        response = client.get(
            "/products/navigation/extra",
            headers={"X-Request-ID": "req-404"},
        )
        assert response.headers["X-Request-ID"] == "req-404"


class TestRequestLogging:
    """Tests for request completion log levels."""

    @pytest.mark.parametrize(
        "path,status_code,expected",
        [
            ("/products", 200, "info"),
            ("/health", 200, "debug"),
            ("/ready", 503, "warning"),
            ("/products/1", 500, "warning"),
        ],
    )
    def test_log_level(self, path: str, status_code: int, expected: str) -> None:
        """Probes log at debug, server errors at warning, the rest at info."""
        request = MagicMock()
        request.url.path = path
        request.query_params = {}

        with patch("petmall.api.middleware.logger") as logger:
            RequestIdMiddleware._log_request(request, status_code, 0.01)

        getattr(logger, expected).assert_called_once()
        assert getattr(logger, expected).call_args.kwargs["status_code"] == status_code

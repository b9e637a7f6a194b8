"""Tests for the cross-origin policy applied to the API."""

from unittest.mock import Mock

import pytest

from rentx.api.deps import get_identity_service

CORS_HEADERS = {
    "access-control-allow-origin": "*",
    "access-control-allow-methods": "GET, POST, OPTIONS",
    "access-control-allow-headers": "Content-Type",
}


def assert_cors(response):
    for header, value in CORS_HEADERS.items():
        assert response.headers[header] == value


class TestCrossOrigin:
    """Test CrossOriginMiddleware."""

    @pytest.mark.parametrize(
        "path", ["/api/signup", "/api/signin", "/api/create", "/api/listings", "/api/dashboard/1"]
    )
    def test_preflight_short_circuits(self, client, path):
        response = client.options(path)

        assert response.status_code == 204
        assert response.content == b""
        assert_cors(response)

    def test_preflight_never_reaches_handler(self, app, client):
        identity = Mock()
        identity.authenticate.return_value = 1
        calls = []

        def counting_identity_service():
            calls.append(1)
            return identity

        app.dependency_overrides[get_identity_service] = counting_identity_service

        response = client.options("/api/signin")

        assert response.status_code == 204
        assert len(calls) == 0
        identity.authenticate.assert_not_called()

        response = client.post("/api/signin", data={"email": "a@example.com", "password": "pw"})
        assert response.text == "Login successful. UserID: 1"
        assert len(calls) == 1
        identity.authenticate.assert_called_once_with("a@example.com", "pw")

    def test_success_and_error_responses_carry_headers(self, client):
        assert_cors(client.get("/api/listings"))
        assert_cors(client.post("/api/signin", data={"email": "x", "password": "y"}))
        assert_cors(client.get("/api/signup"))
        assert_cors(client.get("/api/dashboard/abc"))

    def test_non_api_paths_are_untouched(self, client):
        response = client.get("/somewhere")

        assert "access-control-allow-origin" not in response.headers

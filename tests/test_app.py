# =============================================================================
# tests/test_app.py - Application Wiring Tests
# =============================================================================
# Tests for everything around the user API:
# - Root, health and readiness endpoints
# - /api/v1/info and /api/v1/status
# - Unmatched routes, internal errors, OpenAPI docs, response headers
# =============================================================================

import logging

from fastapi.testclient import TestClient

from app.main import create_app
from core.services.user_store import UserStore


# =============================================================================
# Public Endpoints
# =============================================================================

class TestPublicEndpoints:
    """Tests for /, /health and /ready."""

    def test_root_returns_welcome(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert response.json()["message"] == "Welcome to Users API"
        assert response.json()["documentation"] == "/api-docs"

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["environment"] == "test"
        assert body["uptime"] >= 0
        assert "timestamp" in body

    def test_ready_by_default(self, client):
        response = client.get("/ready")

        assert response.status_code == 200
        assert response.json()["status"] == "ready"

    def test_not_ready_when_a_check_fails(self, app, client):
        app.state.readiness_checks.append(lambda: False)

        response = client.get("/ready")

        assert response.status_code == 503
        assert response.json()["status"] == "not ready"

    def test_not_ready_when_a_check_raises(self, app, client):
        def broken_check():
            raise ConnectionError("dependency unreachable")

        app.state.readiness_checks.append(broken_check)

        assert client.get("/ready").status_code == 503

    def test_health_does_not_depend_on_readiness(self, app, client):
        app.state.readiness_checks.append(lambda: False)

        assert client.get("/health").status_code == 200


# =============================================================================
# System Endpoints
# =============================================================================

class TestSystemEndpoints:
    """Tests for /api/v1/info and /api/v1/status."""

    def test_info(self, client, auth_headers):
        response = client.get("/api/v1/info", headers=auth_headers)

        assert response.status_code == 200
        body = response.json()
        assert body["name"] == "Users API"
        assert body["version"] == "1.0.0"
        assert len(body["endpoints"]) == 10
        assert body["authentication"] == {"type": "API Key", "header": "X-API-Key", "required": True}

    def test_status(self, client, auth_headers):
        response = client.get("/api/v1/status", headers=auth_headers)

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["status"] == "operational"
        assert "pythonVersion" in body["system"]
        assert body["system"]["uptime"] >= 0
        assert body["system"]["memory"]["unit"] == "MB"


# =============================================================================
# Routing and Errors
# =============================================================================

class TestRoutingAndErrors:
    """Unmatched routes and unexpected failures."""

    def test_unknown_route_is_404(self, client):
        response = client.get("/nonexistent")

        assert response.status_code == 404
        assert response.json() == {
            "status": "error",
            "message": "Route not found",
            "path": "/nonexistent",
        }

    def test_unknown_api_route_is_404(self, client, auth_headers):
        response = client.get("/api/v1/nothing-here", headers=auth_headers)

        assert response.status_code == 404
        assert response.json()["message"] == "Route not found"

    def test_unsupported_method_is_route_not_found(self, client, auth_headers):
        response = client.patch("/api/v1/users/1", headers=auth_headers, json={"name": "X"})

        assert response.status_code == 404
        assert response.json()["message"] == "Route not found"

    def test_unexpected_error_is_generic_500(self, settings, caplog):
        app = create_app(settings=settings, store=UserStore())

        @app.get("/boom")
        async def boom():
            raise RuntimeError("database password is hunter2")

        with TestClient(app, raise_server_exceptions=False) as client:
            response = client.get("/boom")

        assert response.status_code == 500
        assert response.json() == {
            "success": False,
            "message": "An unexpected error occurred",
            "code": "INTERNAL_ERROR",
        }
        assert "hunter2" not in response.text
        assert any("hunter2" in r.getMessage() for r in caplog.records)


# =============================================================================
# Store Wiring
# =============================================================================

class TestStoreWiring:
    """Each app owns the store it was given."""

    def test_apps_do_not_share_state(self, settings, auth_headers):
        first = create_app(settings=settings, store=UserStore())
        second = create_app(settings=settings, store=UserStore())

        with TestClient(first) as a, TestClient(second) as b:
            a.post("/api/v1/users", headers=auth_headers, json={"name": "Only A", "email": "a@example.com"})

            assert a.get("/api/v1/users", headers=auth_headers).json()["count"] == 1
            assert b.get("/api/v1/users", headers=auth_headers).json()["count"] == 0

    def test_seeding_can_be_disabled(self, settings, auth_headers):
        app = create_app(settings=settings.model_copy(update={"SEED_DEMO_USERS": False}))

        with TestClient(app) as client:
            assert client.get("/api/v1/users", headers=auth_headers).json()["count"] == 0


# =============================================================================
# Docs and Headers
# =============================================================================

class TestDocsAndHeaders:
    """OpenAPI document, security headers and CORS."""

    def test_openapi_document(self, client):
        response = client.get("/api-docs.json")

        assert response.status_code == 200
        schema = response.json()
        assert "/api/v1/users/{user_id}" in schema["paths"]
        schemes = schema["components"]["securitySchemes"]
        assert any(s.get("name") == "X-API-Key" for s in schemes.values())

    def test_swagger_ui_is_public(self, client):
        assert client.get("/api-docs").status_code == 200

    def test_security_headers(self, client):
        response = client.get("/health")

        assert response.headers["X-Content-Type-Options"] == "nosniff"
        assert response.headers["X-Frame-Options"] == "DENY"

    def test_cors_allows_configured_origin(self, client):
        response = client.options(
            "/api/v1/users",
            headers={
                "Origin": "http://localhost:3000",
                "Access-Control-Request-Method": "GET",
                "Access-Control-Request-Headers": "X-API-Key",
            },
        )

        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] == "http://localhost:3000"

    def test_cors_ignores_unknown_origin(self, client):
        response = client.get("/health", headers={"Origin": "https://evil.example"})

        assert "access-control-allow-origin" not in response.headers

    def test_security_headers_on_rate_limited_response(self, settings):
        limited = settings.model_copy(update={"RATE_LIMIT_ENABLED": True, "RATE_LIMIT_MAX_REQUESTS": 1})
        app = create_app(settings=limited, store=UserStore())

        with TestClient(app) as client:
            client.get("/")
            response = client.get("/")

        assert response.status_code == 429
        assert response.headers["X-Content-Type-Options"] == "nosniff"
        assert response.headers["X-Frame-Options"] == "DENY"

    def test_security_headers_on_internal_error(self, settings):
        app = create_app(settings=settings, store=UserStore())

        @app.get("/boom")
        async def boom():
            raise RuntimeError("boom")

        with TestClient(app, raise_server_exceptions=False) as client:
            response = client.get("/boom")

        assert response.status_code == 500
        assert response.headers["X-Content-Type-Options"] == "nosniff"
        assert response.headers["Referrer-Policy"] == "no-referrer"


# =============================================================================
# Request Logging
# =============================================================================

class TestRequestLogging:
    """One log line per request, whatever the outcome."""

    @staticmethod
    def _request_lines(caplog):
        return [r.getMessage() for r in caplog.records if r.name == "app.middleware"]

    def test_successful_request_is_logged(self, client, caplog):
        caplog.set_level(logging.INFO, logger="app.middleware")

        client.get("/health")

        assert any(m.startswith("GET /health -> 200") for m in self._request_lines(caplog))

    def test_rate_limited_request_is_logged(self, settings, caplog):
        caplog.set_level(logging.INFO, logger="app.middleware")
        limited = settings.model_copy(update={"RATE_LIMIT_ENABLED": True, "RATE_LIMIT_MAX_REQUESTS": 1})
        app = create_app(settings=limited, store=UserStore())

        with TestClient(app) as client:
            client.get("/")
            client.get("/")

        assert any(m.startswith("GET / -> 429") for m in self._request_lines(caplog))

    def test_crashing_request_is_logged(self, settings, caplog):
        caplog.set_level(logging.INFO, logger="app.middleware")
        app = create_app(settings=settings, store=UserStore())

        @app.get("/boom")
        async def boom():
            raise RuntimeError("boom")

        with TestClient(app, raise_server_exceptions=False) as client:
            client.get("/boom")

        assert any(m.startswith("GET /boom -> 500") for m in self._request_lines(caplog))

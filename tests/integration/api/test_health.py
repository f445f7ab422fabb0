"""Integration tests for health and info endpoints."""

import pytest
from httpx import AsyncClient

from railcat import __version__


pytestmark = pytest.mark.integration


class TestHealthEndpoints:
    """Tests for probes and application info."""

    async def test_liveness(self, client: AsyncClient) -> None:
        response = await client.get("/health/live")

        assert response.status_code == 200
        assert response.json() == {"status": "alive"}

    async def test_readiness(self, client: AsyncClient) -> None:
        """Verify readiness reports the database check."""
        response = await client.get("/health/ready")

        assert response.status_code == 200
        assert response.json() == {"status": "ready", "checks": {"database": "ok"}}

    async def test_info(self, client: AsyncClient) -> None:
        response = await client.get("/info")

        assert response.status_code == 200
        data = response.json()
        assert data["version"] == __version__
        assert data["permissions_claim"] == "permissions"
        assert data["permissions"] == [
            "ADD_CONTENT",
            "VERIFY_CONTENT",
            "DELETE_CONTENT",
            "MANAGE_ROLES",
        ]

    async def test_request_id_round_trip(self, client: AsyncClient) -> None:
        """Verify a client supplied request ID is echoed back."""
        response = await client.get("/health/live", headers={"X-Request-ID": "abc-123"})

        assert response.headers["X-Request-ID"] == "abc-123"

    async def test_request_id_generated(self, client: AsyncClient) -> None:
        response = await client.get("/health/live")

        assert response.headers.get("X-Request-ID")


class TestProblemDetails:
    """Tests for the error response format."""

    async def test_not_found_carries_trace_id(self, client: AsyncClient) -> None:
        response = await client.get(
            "/api/v1/owners/00000000-0000-0000-0000-000000000000",
            headers={"X-Request-ID": "trace-me"},
        )

        assert response.status_code == 404
        body = response.json()
        assert body["status"] == 404
        assert body["error_code"] == "not_found"
        assert body["trace_id"] == "trace-me"
        assert body["instance"] == "/api/v1/owners/00000000-0000-0000-0000-000000000000"

    async def test_validation_error_lists_fields(self, client: AsyncClient) -> None:
        response = await client.get("/api/v1/owners", params={"limit": 0})

        assert response.status_code == 422
        body = response.json()
        assert body["error_code"] == "validation_error"
        assert body["errors"][0]["field"] == "query.limit"

"""Tests for health check endpoints."""

import pytest
from httpx import AsyncClient


class TestHealthEndpoint:
    """Tests for the health check endpoints."""

    @pytest.mark.asyncio
    async def test_health_returns_200(self, client: AsyncClient) -> None:
        response = await client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["version"] == "1.0.0"
        assert {"timestamp", "environment"} <= data.keys()

    @pytest.mark.asyncio
    async def test_detailed_health_probes_store(self, client: AsyncClient) -> None:
        await client.post("/api/v1/profiles", json={"name": "Alex"})
        response = await client.get("/health/detailed")

        assert response.status_code == 200
        store = response.json()["store"]
        assert store == {"status": "healthy", "profiles": 1, "entries": 0, "error": None}

    @pytest.mark.asyncio
    async def test_request_id_header(self, client: AsyncClient) -> None:
        response = await client.get("/health", headers={"X-Request-ID": "abc-123"})

        assert response.headers["x-request-id"] == "abc-123"

"""Smoke tests for health and app wiring."""

from httpx import AsyncClient


async def test_health_returns_ok(client: AsyncClient) -> None:
    """GET /api/v1/health returns 200 and status ok."""
    response = await client.get("/api/v1/health")
    assert response.status_code == 200
    assert response.json().get("status") == "ok"


async def test_readiness_queries_database(client: AsyncClient) -> None:
    """GET /api/v1/health/ready returns 200 when the database answers."""
    response = await client.get("/api/v1/health/ready")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


async def test_root_returns_service_info(client: AsyncClient) -> None:
    response = await client.get("/")
    assert response.status_code == 200
    assert response.json()["docs"] == "/docs"


async def test_request_id_is_generated(client: AsyncClient) -> None:
    """Every response carries X-Request-ID."""
    response = await client.get("/api/v1/health")
    assert response.headers.get("x-request-id")


async def test_request_id_is_forwarded(client: AsyncClient) -> None:
    response = await client.get(
        "/api/v1/health", headers={"X-Request-ID": "abc-123"}
    )
    assert response.headers.get("x-request-id") == "abc-123"

"""
Tests for the /api/v1/transform endpoints.
"""

import httpx
import pytest

FEED_URL = "http://fake-source/feed.json"


@pytest.mark.asyncio
async def test_health_check(client: httpx.AsyncClient) -> None:
    """Health endpoint should return 200 with app info."""
    response = await client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert "version" in data
    assert "X-Request-ID" in response.headers


@pytest.mark.asyncio
async def test_request_id_is_echoed(client: httpx.AsyncClient) -> None:
    response = await client.get("/health", headers={"X-Request-ID": "req-123"})
    assert response.headers["X-Request-ID"] == "req-123"


@pytest.mark.asyncio
async def test_transform_data_model(client: httpx.AsyncClient) -> None:
    response = await client.post(
        "/api/v1/transform/",
        json={
            "records": [
                {"guid": "g1", "title": "One", "url": "http://x.com"},
                {"title": "Two"},
            ],
        },
    )

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["total_count"] == 2
    assert data["records"] == [
        {"id": "g1", "title": "One", "link": "http://x.com?ref=bookmarksfor.dev"},
        {"id": 1, "title": "Two"},
    ]
    assert data["metadata"]["add_ref_to_link"] is True


@pytest.mark.asyncio
async def test_transform_data_model_overrides(client: httpx.AsyncClient) -> None:
    response = await client.post(
        "/api/v1/transform/",
        json={
            "records": [{"slug": "s1", "guid": "g1", "link": "http://x.com"}],
            "field_mapping": {"id": ["slug"]},
            "defaults": {"domain": "x.com"},
            "add_ref_to_link": False,
        },
    )

    assert response.status_code == 200
    assert response.json()["records"] == [
        {"domain": "x.com", "id": "s1", "link": "http://x.com"},
    ]


@pytest.mark.asyncio
async def test_transform_generic(client: httpx.AsyncClient) -> None:
    response = await client.post(
        "/api/v1/transform/generic",
        json={
            "records": [{"user": {"name": "ann"}}, {"user": None}],
            "field_mapping": {"id": ["uid"], "name": ["user.name"]},
            "defaults": {"name": "anonymous"},
        },
    )

    assert response.status_code == 200
    assert response.json()["records"] == [
        {"name": "ann", "id": 0},
        {"name": "anonymous", "id": 1},
    ]


@pytest.mark.asyncio
async def test_transform_invalid_mapping_shape(client: httpx.AsyncClient) -> None:
    """A mapping value that is not a list of strings is rejected."""
    response = await client.post(
        "/api/v1/transform/generic",
        json={"records": [], "field_mapping": {"id": "guid"}},
    )

    assert response.status_code == 422
    data = response.json()
    assert data["error"] is True
    assert data["error_code"] == "VALIDATION_ERROR"
    assert "request_id" in data


@pytest.mark.asyncio
async def test_transform_remote(client: httpx.AsyncClient) -> None:
    response = await client.post(
        "/api/v1/transform/remote",
        json={
            "url": FEED_URL,
            "records_key": "items",
            "field_mapping": {"author": ["creator.name"]},
        },
    )

    assert response.status_code == 200
    data = response.json()
    assert data["total_count"] == 2
    assert data["records"][0] == {
        "id": 101,
        "title": "Python packaging guide",
        "domain": "packaging.python.org",
        "author": "PyPA",
        "description": "How to ship a library.",
        "link": "https://packaging.python.org?ref=bookmarksfor.dev",
        "tags": ["python", "packaging"],
    }
    assert data["records"][1] == {"id": 102, "title": "No link here", "tags": []}
    assert data["metadata"]["url"] == FEED_URL


@pytest.mark.asyncio
async def test_transform_remote_upstream_error(client: httpx.AsyncClient) -> None:
    response = await client.post(
        "/api/v1/transform/remote",
        json={"url": "http://fake-source/missing.json"},
    )

    assert response.status_code == 502
    data = response.json()
    assert data["error_code"] == "SOURCE_API_ERROR"
    assert data["details"]["status_code"] == 404


@pytest.mark.asyncio
async def test_transform_remote_missing_records_key(client: httpx.AsyncClient) -> None:
    response = await client.post("/api/v1/transform/remote", json={"url": FEED_URL})

    assert response.status_code == 502
    assert response.json()["error_code"] == "SOURCE_PAYLOAD_ERROR"


@pytest.mark.asyncio
async def test_transform_remote_requires_url(client: httpx.AsyncClient) -> None:
    response = await client.post("/api/v1/transform/remote", json={})
    assert response.status_code == 422
    assert response.json()["error_code"] == "VALIDATION_ERROR"

"""
Pytest configuration & shared fixtures.
"""

from collections.abc import AsyncIterator

import httpx
import pytest
import pytest_asyncio
from fastapi import FastAPI

from modelgen.main import create_app

FEED_URL = "http://fake-source/feed.json"


@pytest.fixture
def feed_payload() -> dict:
    """A raindrop-style collection response."""
    return {
        "result": True,
        "items": [
            {
                "_id": 101,
                "title": "Python packaging guide",
                "excerpt": "How to ship a library.",
                "link": "https://packaging.python.org",
                "domain": "packaging.python.org",
                "tags": ["python", "packaging"],
                "creator": {"name": "PyPA"},
            },
            {
                "_id": 102,
                "title": "No link here",
                "tags": [],
            },
        ],
    }


@pytest.fixture
def source_handler(feed_payload: dict):
    """Default upstream: serves ``feed_payload`` at FEED_URL, 404 elsewhere."""

    def _handler(request: httpx.Request) -> httpx.Response:
        if str(request.url) == FEED_URL:
            return httpx.Response(200, json=feed_payload)
        return httpx.Response(404, text="Not Found")

    return _handler


@pytest_asyncio.fixture
async def app(source_handler) -> AsyncIterator[FastAPI]:
    """Provide a fresh app whose outbound HTTP hits ``source_handler``."""
    application = create_app()

    async with httpx.AsyncClient(
        transport=httpx.MockTransport(source_handler),
        timeout=httpx.Timeout(5),
    ) as mock_http:
        application.state.http_client = mock_http
        yield application


@pytest_asyncio.fixture
async def client(app: FastAPI) -> AsyncIterator[httpx.AsyncClient]:
    """Provide an async test client."""
    async with httpx.AsyncClient(
        transport=httpx.ASGITransport(app=app),
        base_url="http://testserver",
    ) as ac:
        yield ac

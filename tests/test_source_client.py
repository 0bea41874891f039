"""
Tests for SourceClient.
"""

import httpx
import pytest

from modelgen.core.exceptions import (
    SourceAPIConnectionException,
    SourceAPIException,
    SourceAPITimeoutException,
    SourcePayloadException,
    ValidationException,
)
from modelgen.services.source_client import SourceClient

URL = "http://fake-source/items.json"


def _client_for(handler) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


@pytest.mark.asyncio
async def test_fetch_json_list_payload() -> None:
    """A list body is returned as is."""

    def _handler(request: httpx.Request) -> httpx.Response:
        assert request.headers["Accept"] == "application/json"
        return httpx.Response(200, json=[{"id": 1}, {"id": 2}])

    async with _client_for(_handler) as hc:
        records = await SourceClient(http_client=hc).fetch_records(URL)

    assert records == [{"id": 1}, {"id": 2}]


@pytest.mark.asyncio
async def test_fetch_records_with_nested_key() -> None:
    payload = {"data": {"items": [{"title": "a"}]}, "total": 1}

    async with _client_for(lambda r: httpx.Response(200, json=payload)) as hc:
        records = await SourceClient(http_client=hc).fetch_records(URL, "data.items")

    assert records == [{"title": "a"}]


@pytest.mark.asyncio
async def test_fetch_records_missing_key_raises() -> None:
    async with _client_for(lambda r: httpx.Response(200, json={"items": []})) as hc:
        with pytest.raises(SourcePayloadException):
            await SourceClient(http_client=hc).fetch_records(URL, "results")


@pytest.mark.asyncio
async def test_fetch_records_object_without_key_raises() -> None:
    async with _client_for(lambda r: httpx.Response(200, json={"items": []})) as hc:
        with pytest.raises(SourcePayloadException) as exc_info:
            await SourceClient(http_client=hc).fetch_records(URL)

    assert exc_info.value.details["payload_type"] == "dict"


@pytest.mark.asyncio
async def test_fetch_json_invalid_body_raises() -> None:
    async with _client_for(lambda r: httpx.Response(200, text="<html>")) as hc:
        with pytest.raises(SourcePayloadException):
            await SourceClient(http_client=hc).fetch_json(URL)


@pytest.mark.asyncio
async def test_fetch_json_http_error() -> None:
    """Should raise SourceAPIException on 500 from the source."""
    async with _client_for(
        lambda r: httpx.Response(500, text="Internal Server Error")
    ) as hc:
        with pytest.raises(SourceAPIException) as exc_info:
            await SourceClient(http_client=hc).fetch_json(URL)

    assert exc_info.value.details["status_code"] == 500
    assert exc_info.value.status_code == 502


@pytest.mark.asyncio
async def test_fetch_json_timeout() -> None:
    def _handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("timed out", request=request)

    async with _client_for(_handler) as hc:
        with pytest.raises(SourceAPITimeoutException) as exc_info:
            await SourceClient(http_client=hc, timeout=2).fetch_json(URL)

    assert exc_info.value.status_code == 504


@pytest.mark.asyncio
async def test_fetch_json_connection_error() -> None:
    def _handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("refused", request=request)

    async with _client_for(_handler) as hc:
        with pytest.raises(SourceAPIConnectionException):
            await SourceClient(http_client=hc).fetch_json(URL)


@pytest.mark.asyncio
@pytest.mark.parametrize("url", ["file:///etc/passwd", "ftp://host/x", "not a url"])
async def test_fetch_json_rejects_non_http_urls(url: str) -> None:
    def _handler(request: httpx.Request) -> httpx.Response:
        raise AssertionError("no request expected")

    async with _client_for(_handler) as hc:
        with pytest.raises(ValidationException):
            await SourceClient(http_client=hc).fetch_json(url)

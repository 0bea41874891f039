"""
HTTP client for remote record sources (JSON feeds, CMS and bookmark APIs).

Fetches a URL with the shared ``httpx.AsyncClient`` and parses the JSON
body.  Transport and payload failures are mapped onto the
``SourceAPIException`` family so the error handlers can render them.
"""

from typing import Any
from urllib.parse import urlparse

import httpx

from modelgen.core.exceptions import (
    SourceAPIConnectionException,
    SourceAPIException,
    SourceAPITimeoutException,
    SourcePayloadException,
    ValidationException,
)
from modelgen.core.logging import get_logger
from modelgen.mappers.generic_mapper import UNDEFINED, resolve_field

logger = get_logger(__name__)

_ALLOWED_SCHEMES = ("http", "https")


class SourceClient:
    """Thin JSON-over-HTTP client."""

    def __init__(self, http_client: httpx.AsyncClient, timeout: float = 30.0) -> None:
        self._http = http_client
        self._timeout = timeout

    async def fetch_json(self, url: str) -> Any:
        """
        GET ``url`` and return the decoded JSON body.

        Raises:
            ValidationException:          URL is not http(s).
            SourceAPITimeoutException:    Request timed out.
            SourceAPIConnectionException: Host unreachable.
            SourceAPIException:           Non-2xx response.
            SourcePayloadException:       Body is not JSON.
        """
        if urlparse(url).scheme not in _ALLOWED_SCHEMES:
            raise ValidationException(
                message="Source URL must use http or https.",
                details={"url": url},
            )

        logger.info("Fetching source records", extra={"url": url})

        try:
            response = await self._http.get(
                url,
                headers={"Accept": "application/json"},
                timeout=self._timeout,
            )
        except httpx.TimeoutException as exc:
            raise SourceAPITimeoutException(
                message=f"Request to {url} timed out after {self._timeout}s.",
                details={"url": url, "error": str(exc)},
            ) from exc
        except httpx.ConnectError as exc:
            raise SourceAPIConnectionException(
                details={"url": url, "error": str(exc)},
            ) from exc
        except httpx.HTTPError as exc:
            raise SourceAPIException(
                message=f"Request to {url} failed.",
                details={"url": url, "error": str(exc)},
            ) from exc

        if response.is_error:
            raise SourceAPIException(
                message=f"Source returned HTTP {response.status_code}.",
                details={
                    "url": url,
                    "status_code": response.status_code,
                    "body": response.text[:500],
                },
            )

        try:
            return response.json()
        except ValueError as exc:
            raise SourcePayloadException(
                message="Source response is not valid JSON.",
                details={"url": url, "body": response.text[:500]},
            ) from exc

    async def fetch_records(self, url: str, records_key: str | None = None) -> list[Any]:
        """
        Fetch ``url`` and return its record list.

        A list payload is returned as is.  For an object payload,
        ``records_key`` (dot path allowed) names the list to extract.

        Raises:
            SourcePayloadException: No list found where one was expected.
        """
        payload = await self.fetch_json(url)

        if records_key:
            records = resolve_field(payload, [records_key])
        else:
            records = payload

        if records is UNDEFINED or not isinstance(records, list):
            raise SourcePayloadException(
                message="Source payload does not contain a record list.",
                details={
                    "url": url,
                    "records_key": records_key,
                    "payload_type": type(payload).__name__,
                },
            )

        logger.info(
            "Fetched source records",
            extra={"url": url, "record_count": len(records)},
        )
        return records

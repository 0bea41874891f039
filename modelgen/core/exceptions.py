"""
Custom exception hierarchy for the application.

All application-specific exceptions inherit from AppException,
enabling consistent error handling and structured error responses.

The model generators themselves never raise these; they degrade by
omission.  The fetch helper and the HTTP layer do.

Hierarchy:
    AppException
    ├── SourceAPIException             — Errors when calling a record source
    │   ├── SourceAPITimeoutException
    │   ├── SourceAPIConnectionException
    │   └── SourcePayloadException     — Body is not JSON / has no records
    └── ValidationException            — Input data validation failures
"""

from typing import Any


class AppException(Exception):
    """
    Base exception for all application errors.

    Attributes:
        message:     Human-readable error description.
        status_code: HTTP status code to return to the client.
        error_code:  Machine-readable error identifier (e.g. "SOURCE_API_TIMEOUT").
        details:     Optional dict with extra context for debugging.
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred.",
        status_code: int = 500,
        error_code: str = "INTERNAL_ERROR",
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.status_code = status_code
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Serialize the exception into a JSON-friendly dict."""
        payload: dict[str, Any] = {
            "error": True,
            "error_code": self.error_code,
            "message": self.message,
        }
        if self.details:
            payload["details"] = self.details
        return payload


# ─── Source API Errors ────────────────────────────────────────────────


class SourceAPIException(AppException):
    """Raised when a record source returns an error or is unreachable."""

    def __init__(
        self,
        message: str = "Failed to fetch data from the source API.",
        status_code: int = 502,
        error_code: str = "SOURCE_API_ERROR",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, status_code, error_code, details)


class SourceAPITimeoutException(SourceAPIException):
    """Raised when the source request times out."""

    def __init__(
        self,
        message: str = "Source API request timed out.",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=504,
            error_code="SOURCE_API_TIMEOUT",
            details=details,
        )


class SourceAPIConnectionException(SourceAPIException):
    """Raised when unable to establish connection to the source."""

    def __init__(
        self,
        message: str = "Unable to connect to the source API.",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=502,
            error_code="SOURCE_API_CONNECTION_ERROR",
            details=details,
        )


class SourcePayloadException(SourceAPIException):
    """Raised when the source body cannot be turned into a record list."""

    def __init__(
        self,
        message: str = "Source API returned an unusable payload.",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=502,
            error_code="SOURCE_PAYLOAD_ERROR",
            details=details,
        )


# ─── Validation Errors ───────────────────────────────────────────────


class ValidationException(AppException):
    """Raised when request data fails validation."""

    def __init__(
        self,
        message: str = "Validation error.",
        status_code: int = 422,
        error_code: str = "VALIDATION_ERROR",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, status_code, error_code, details)

from modelgen.core.exceptions import (
    AppException,
    SourceAPIException,
    SourceAPITimeoutException,
    SourceAPIConnectionException,
    SourcePayloadException,
    ValidationException,
)
from modelgen.core.logging import setup_logging, get_logger

__all__ = [
    "AppException",
    "SourceAPIException",
    "SourceAPITimeoutException",
    "SourceAPIConnectionException",
    "SourcePayloadException",
    "ValidationException",
    "setup_logging",
    "get_logger",
]

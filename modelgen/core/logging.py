"""
Structured logging configuration.

Two output formats:
  - **json**    (production): one JSON object per line.
  - **console** (development): pipe-separated, human-readable.

Every record carries the current ``request_id`` (``"-"`` outside a
request) so model-generation logs can be tied back to the HTTP call
that triggered them.

Usage:
    from modelgen.core.logging import setup_logging, get_logger

    setup_logging()                   # call once at startup
    logger = get_logger(__name__)     # per-module logger
    logger.info("Generated models", extra={"record_count": 42})
"""

import logging
import sys
from contextvars import ContextVar
from typing import Literal, TextIO

from pythonjsonlogger import json as json_logger


LOG_FORMAT_CONSOLE = (
    "%(asctime)s | %(levelname)-8s | %(request_id)s | %(name)s | %(message)s"
)

LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

request_id_var: ContextVar[str] = ContextVar("request_id", default="-")


class RequestIdFilter(logging.Filter):
    """Stamp the active request id onto records that lack one."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "request_id"):
            record.request_id = request_id_var.get()  # type: ignore[attr-defined]
        return True


def setup_logging(
    level: str = "INFO",
    log_format: Literal["json", "console"] = "json",
    stream: TextIO | None = None,
) -> None:
    """
    Configure the root logger for the whole service.

    Args:
        level:      Logging level name.
        log_format: 'json' or 'console'.
        stream:     Output stream; stdout when omitted.
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(level.upper())
    root_logger.handlers.clear()

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setLevel(level.upper())
    handler.addFilter(RequestIdFilter())

    if log_format == "json":
        formatter: logging.Formatter = _build_json_formatter()
    else:
        formatter = logging.Formatter(LOG_FORMAT_CONSOLE, datefmt=LOG_DATE_FORMAT)

    handler.setFormatter(formatter)
    root_logger.addHandler(handler)

    for noisy in ("httpcore", "httpx", "uvicorn.access"):
        logging.getLogger(noisy).setLevel(logging.WARNING)

    root_logger.debug(
        "Logging initialised",
        extra={"log_level": level.upper(), "log_format": log_format},
    )


def get_logger(name: str) -> logging.Logger:
    """Return a named logger; call as ``get_logger(__name__)``."""
    return logging.getLogger(name)


# ─── Internal ─────────────────────────────────────────────────────────


def _build_json_formatter() -> json_logger.JsonFormatter:
    return json_logger.JsonFormatter(
        fmt="%(asctime)s %(levelname)s %(name)s %(request_id)s %(message)s",
        datefmt=LOG_DATE_FORMAT,
        rename_fields={
            "asctime": "timestamp",
            "levelname": "level",
            "name": "logger",
        },
    )

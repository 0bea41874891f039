"""
Small string and lookup helpers used by callers of the model generators.
"""

import math
import re
from collections.abc import Mapping
from datetime import datetime, timezone

_KEBAB_RE = re.compile(r"-([a-z])")

DEFAULT_WORDS_PER_MINUTE = 265


def utc_now() -> datetime:
    """Return the current UTC datetime (timezone-aware)."""
    return datetime.now(timezone.utc)


def kebab_to_camel(value: str) -> str:
    """
    Convert ``kebab-case`` to ``camelCase``.

    Only a dash followed by a lowercase letter is folded:
        kebab_to_camel("last-update") -> "lastUpdate"
        kebab_to_camel("page-2")      -> "page-2"
    """
    return _KEBAB_RE.sub(lambda m: m.group(1).upper(), value)


def url_mapping(slug: str, mapping: Mapping[str, str]) -> str:
    """Look up ``slug``; missing or empty entries map to ``""``."""
    return mapping.get(slug) or ""


def get_read_time(content: str | None, wpm: int = DEFAULT_WORDS_PER_MINUTE) -> int:
    """Estimated reading time in whole minutes (rounded up)."""
    if not content:
        return 0
    return math.ceil(len(content.split()) / wpm)

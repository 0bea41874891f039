"""
Date helpers for transformers and callers.

Accepted inputs (``DateInput``): ``datetime``, ``date``, epoch milliseconds
(int / float) and ISO-8601 strings (a trailing ``Z`` is accepted).  Naive
values are taken as UTC.  ISO strings produced here use millisecond
precision and a ``Z`` suffix, e.g. ``2025-04-01T00:00:00.000Z``.
"""

import calendar
from collections.abc import Iterable, Mapping
from datetime import date, datetime, timedelta, timezone
from typing import Any, Literal, TypeVar
from zoneinfo import ZoneInfo

from modelgen.utils.helpers import utc_now

DateInput = datetime | date | int | float | str
TimeUnit = Literal["second", "minute", "hour", "day", "week", "month", "year"]

T = TypeVar("T", bound=Mapping[str, Any])

DEFAULT_FORMAT = "%Y-%m-%d"

_FIXED_UNITS: dict[str, timedelta] = {
    "second": timedelta(seconds=1),
    "minute": timedelta(minutes=1),
    "hour": timedelta(hours=1),
    "day": timedelta(days=1),
    "week": timedelta(weeks=1),
}


def parse_date(value: DateInput) -> datetime:
    """Coerce any ``DateInput`` to an aware datetime."""
    if isinstance(value, datetime):
        dt = value
    elif isinstance(value, date):
        dt = datetime(value.year, value.month, value.day)
    elif isinstance(value, (int, float)) and not isinstance(value, bool):
        return datetime.fromtimestamp(value / 1000, tz=timezone.utc)
    elif isinstance(value, str):
        text = value.strip()
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        dt = datetime.fromisoformat(text)
    else:
        raise TypeError(f"Unsupported date value: {value!r}")

    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def to_iso(value: DateInput) -> str:
    dt = parse_date(value).astimezone(timezone.utc)
    return dt.strftime("%Y-%m-%dT%H:%M:%S.") + f"{dt.microsecond // 1000:03d}Z"


def format_date(value: DateInput, fmt: str = DEFAULT_FORMAT) -> str:
    """Format with ``strftime`` directives (default ``YYYY-MM-DD``)."""
    return parse_date(value).strftime(fmt)


def from_now(value: DateInput, now: datetime | None = None) -> str:
    """
    Human-readable distance to ``now``: "a few seconds ago",
    "2 hours ago", "in 3 days", "a year ago".
    """
    reference = now or utc_now()
    delta = (parse_date(value) - parse_date(reference)).total_seconds()
    phrase = _humanize(abs(delta))
    return f"in {phrase}" if delta > 0 else f"{phrase} ago"


def is_before(value: DateInput, other: DateInput) -> bool:
    return parse_date(value) < parse_date(other)


def is_after(value: DateInput, other: DateInput) -> bool:
    return parse_date(value) > parse_date(other)


def is_between(value: DateInput, start: DateInput, end: DateInput) -> bool:
    """Strictly between ``start`` and ``end``."""
    dt = parse_date(value)
    return parse_date(start) < dt < parse_date(end)


def add_time(value: DateInput, amount: int, unit: TimeUnit) -> str:
    """Shift forward by ``amount`` units; ISO string out."""
    return to_iso(_shift(parse_date(value), amount, unit))


def subtract_time(value: DateInput, amount: int, unit: TimeUnit) -> str:
    return to_iso(_shift(parse_date(value), -amount, unit))


def to_timezone(value: DateInput, tz: str) -> str:
    """Render the instant in ``tz`` as ISO-8601 with its offset."""
    return parse_date(value).astimezone(ZoneInfo(tz)).isoformat(timespec="milliseconds")


def diff(first: DateInput, second: DateInput, unit: TimeUnit) -> int:
    """Whole ``unit``s from ``second`` to ``first``, truncated toward zero."""
    a, b = parse_date(first), parse_date(second)
    if unit in ("month", "year"):
        months = _month_diff(a, b)
        return int(months / 12) if unit == "year" else months
    return int((a - b) / _FIXED_UNITS[unit])


def sort_by_date(
    items: Iterable[T], key: str, order: Literal["desc", "asc"] = "desc"
) -> list[T]:
    """Return a new list ordered by the date under ``key``; newest first by default."""
    return sorted(items, key=lambda item: parse_date(item[key]), reverse=order == "desc")


def sort_by_published_at(items: Iterable[T]) -> list[T]:
    return sort_by_date(items, "published_at")


def get_date_from_days_ago(days: int = 7, fmt: str = DEFAULT_FORMAT) -> str:
    return (utc_now() - timedelta(days=days)).strftime(fmt)


# ─── Internal ─────────────────────────────────────────────────────────


def _shift(dt: datetime, amount: int, unit: TimeUnit) -> datetime:
    if unit in _FIXED_UNITS:
        return dt + amount * _FIXED_UNITS[unit]
    months = amount * 12 if unit == "year" else amount
    return _add_months(dt, months)


def _add_months(dt: datetime, months: int) -> datetime:
    index = dt.month - 1 + months
    year, month = dt.year + index // 12, index % 12 + 1
    # Clamp to the last day, e.g. Jan 31 + 1 month -> Feb 28/29.
    day = min(dt.day, calendar.monthrange(year, month)[1])
    return dt.replace(year=year, month=month, day=day)


def _month_diff(a: datetime, b: datetime) -> int:
    months = (a.year - b.year) * 12 + (a.month - b.month)
    anchor = _add_months(b, months)
    if months > 0 and anchor > a:
        months -= 1
    elif months < 0 and anchor < a:
        months += 1
    return months


def _humanize(seconds: float) -> str:
    minutes, hours, days = seconds / 60, seconds / 3600, seconds / 86400
    if seconds < 45:
        return "a few seconds"
    if seconds < 90:
        return "a minute"
    if minutes < 45:
        return f"{round(minutes)} minutes"
    if minutes < 90:
        return "an hour"
    if hours < 22:
        return f"{round(hours)} hours"
    if hours < 36:
        return "a day"
    if round(days) <= 25:
        return f"{round(days)} days"
    if round(days) <= 45:
        return "a month"
    # Month buckets: up to 10 months, then "a year" through 17 months.
    months = round(days / 30.4)
    if months <= 10:
        return f"{months} months"
    if months <= 17:
        return "a year"
    return f"{round(days / 365)} years"

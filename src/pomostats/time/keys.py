"""Date keys and instant serialization.

Date keys (``YYYY-MM-DD``) are the join key between backend rows and
enumerated chart buckets. They are parsed and formatted from their
year/month/day components only, so a key never shifts to an adjacent day
through a timezone conversion.
"""

from __future__ import annotations

import re
from datetime import date, datetime, tzinfo
from typing import Union

from pomostats.core.errors import EInvalidFormat

_DATE_KEY_RE = re.compile(r"(\d{4})-(\d{2})-(\d{2})", re.ASCII)

DateLike = Union[datetime, date, str]


def parse_date_key(value: str, tz: tzinfo | None) -> datetime:
    """Parse ``YYYY-MM-DD`` into midnight of that day in ``tz``.

    Raises:
        EInvalidFormat: If the string does not match the pattern or names a
            day that does not exist (month 13, Feb 30, ...)
    """
    if not isinstance(value, str):
        raise EInvalidFormat(
            "Date key must be a string",
            context={"value": repr(value)},
        )
    match = _DATE_KEY_RE.fullmatch(value)
    if match is None:
        raise EInvalidFormat(
            f"Invalid date format: {value!r}",
            context={"expected": "YYYY-MM-DD"},
        )
    year, month, day = (int(part) for part in match.groups())
    try:
        return datetime(year, month, day, tzinfo=tz)
    except ValueError as e:
        raise EInvalidFormat(
            f"Invalid calendar date: {value!r}",
            context={"reason": str(e)},
        ) from e


def to_reference_date(value: DateLike, tz: tzinfo) -> date:
    """Calendar date of ``value`` as seen in ``tz``.

    Aware datetimes are converted into ``tz`` first. Naive datetimes are
    taken as wall-clock time in ``tz``. Strings must be date keys.
    """
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.date()
        return value.astimezone(tz).date()
    if isinstance(value, date):
        return value
    return parse_date_key(value, tz).date()


def to_date_key(value: DateLike, tz: tzinfo) -> str:
    """Format ``value`` as ``YYYY-MM-DD`` in ``tz``."""
    return format_date(to_reference_date(value, tz))


def format_date(day: date) -> str:
    return f"{day.year:04d}-{day.month:02d}-{day.day:02d}"


def normalize_key(raw: object) -> str:
    """Strip any time-of-day suffix from a backend bucket key.

    ``"2026-01-27T00:00:00+00:00"`` becomes ``"2026-01-27"``.
    """
    if isinstance(raw, datetime):
        return format_date(raw.date())
    if isinstance(raw, date):
        return format_date(raw)
    return str(raw).split("T")[0].split(" ")[0]


def to_iso(instant: datetime) -> str:
    """ISO-8601 with millisecond precision; UTC renders as ``Z``."""
    text = instant.isoformat(timespec="milliseconds")
    if text.endswith("+00:00"):
        text = text[: -len("+00:00")] + "Z"
    return text


def days_between(a: DateLike, b: DateLike, tz: tzinfo) -> int:
    """Number of calendar days between two instants in ``tz``.

    Order does not matter. Identical instants, and instants on the same
    reference-local day, are 0 days apart. Monday 00:00 to Sunday
    23:59:59.999 of one week is 6.
    """
    return abs((to_reference_date(b, tz) - to_reference_date(a, tz)).days)


__all__ = [
    "DateLike",
    "parse_date_key",
    "to_reference_date",
    "to_date_key",
    "format_date",
    "normalize_key",
    "to_iso",
    "days_between",
]

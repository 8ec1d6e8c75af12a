"""Calendar range calculator.

Module-level functions use a shared ``ReferenceCalendar`` on the default
reference zone and the system clock. Build a ``ReferenceCalendar`` with a
``FixedClock`` to pin "now".
"""

from __future__ import annotations

from datetime import datetime

from pomostats.time.calendar import ReferenceCalendar, default_calendar
from pomostats.time.keys import (
    DateLike,
    format_date,
    normalize_key,
    to_iso,
)
from pomostats.time.ranges import ENUMERATORS


def current_reference_date() -> datetime:
    return default_calendar().current_reference_date()


def this_week_start() -> datetime:
    return default_calendar().this_week_start()


def this_week_end() -> datetime:
    return default_calendar().this_week_end()


def last_week_start() -> datetime:
    return default_calendar().last_week_start()


def last_week_end() -> datetime:
    return default_calendar().last_week_end()


def this_month_start() -> datetime:
    return default_calendar().this_month_start()


def this_month_end() -> datetime:
    return default_calendar().this_month_end()


def this_year_start() -> datetime:
    return default_calendar().this_year_start()


def this_year_end() -> datetime:
    return default_calendar().this_year_end()


def last_year_start() -> datetime:
    return default_calendar().last_year_start()


def last_year_end() -> datetime:
    return default_calendar().last_year_end()


def parse_date_key(value: str) -> datetime:
    """Parse ``YYYY-MM-DD`` into reference-local midnight."""
    return default_calendar().parse_date_key(value)


def to_date_key(value: DateLike) -> str:
    return default_calendar().to_date_key(value)


def days_between(a: DateLike, b: DateLike) -> int:
    return default_calendar().days_between(a, b)


def enumerate_days(start: DateLike, end: DateLike) -> list[str]:
    return default_calendar().enumerate_days(start, end)


def enumerate_week_starts(start: DateLike, end: DateLike) -> list[str]:
    return default_calendar().enumerate_week_starts(start, end)


def enumerate_month_starts(start: DateLike, end: DateLike) -> list[str]:
    return default_calendar().enumerate_month_starts(start, end)


__all__ = [
    "ReferenceCalendar",
    "default_calendar",
    "DateLike",
    "ENUMERATORS",
    "current_reference_date",
    "this_week_start",
    "this_week_end",
    "last_week_start",
    "last_week_end",
    "this_month_start",
    "this_month_end",
    "this_year_start",
    "this_year_end",
    "last_year_start",
    "last_year_end",
    "parse_date_key",
    "to_date_key",
    "days_between",
    "enumerate_days",
    "enumerate_week_starts",
    "enumerate_month_starts",
    "format_date",
    "normalize_key",
    "to_iso",
]

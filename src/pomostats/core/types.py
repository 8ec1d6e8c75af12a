"""Shared type definitions for pomostats.

Value types passed between the calendar, the series filler and the
statistics views.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Literal

NamedPeriod = Literal[
    "this-week",
    "last-week",
    "this-month",
    "this-year",
    "last-year",
    "all-time",
    "custom",
]
Granularity = Literal["day", "week", "month"]
ChartView = Literal["day", "week", "month", "year"]

NAMED_PERIODS: tuple[str, ...] = (
    "this-week",
    "last-week",
    "this-month",
    "this-year",
    "last-year",
    "all-time",
    "custom",
)
GRANULARITIES: tuple[str, ...] = ("day", "week", "month")

# Bucket key column used by the backend for each granularity
KEY_COLUMNS: dict[str, str] = {
    "day": "date",
    "week": "week_start",
    "month": "month_start",
}


@dataclass(frozen=True)
class DateRange:
    """Concrete bounds for a timeframe.

    Both bounds are ``None`` for ``all-time``.
    """

    start: datetime | None
    end: datetime | None
    period: NamedPeriod

    @property
    def is_open(self) -> bool:
        return self.start is None or self.end is None


@dataclass(frozen=True)
class SeriesPoint:
    """One chart bucket: its start date key and the count inside it."""

    key: str  # YYYY-MM-DD
    count: int = 0

    def to_dict(self, key_name: str = "date") -> dict[str, int | str]:
        return {key_name: self.key, "count": self.count}


@dataclass(frozen=True)
class ChartViewPlan:
    view: ChartView
    available: tuple[ChartView, ...]


@dataclass(frozen=True)
class ChartBar:
    """A rendered bar with the inclusive date span it covers."""

    label: str
    count: int
    start_date: str
    end_date: str


__all__ = [
    "NamedPeriod",
    "Granularity",
    "ChartView",
    "NAMED_PERIODS",
    "GRANULARITIES",
    "KEY_COLUMNS",
    "DateRange",
    "SeriesPoint",
    "ChartViewPlan",
    "ChartBar",
]

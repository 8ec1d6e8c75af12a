"""Chart bars for the statistics views.

Labels are built from date components with fixed English month names, so
they do not depend on the process locale or timezone.
"""

from __future__ import annotations

import calendar as _calendar
from datetime import date, timedelta
from typing import Any

from pomostats.core.types import ChartBar, ChartViewPlan, DateRange, Granularity, SeriesPoint
from pomostats.series.fill import fill_series
from pomostats.series.rollup import rollup_by_year
from pomostats.series.rows import coerce_rows
from pomostats.time.calendar import ReferenceCalendar, default_calendar
from pomostats.time.keys import format_date, parse_date_key

MONTH_ABBR: tuple[str, ...] = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def _key_to_date(key: str) -> date:
    return parse_date_key(key, None).date()


def _as_date(value: date | str) -> date:
    return _key_to_date(value) if isinstance(value, str) else value


def format_month_year(value: date | str) -> str:
    """``"Feb 2026"``."""
    day = _as_date(value)
    return f"{MONTH_ABBR[day.month - 1]} {day.year}"


def format_week_label(value: date | str) -> str:
    """``"Jan 27"`` for a bucket start."""
    day = _as_date(value)
    return f"{MONTH_ABBR[day.month - 1]} {day.day}"


def month_end(day: date) -> date:
    return day.replace(day=_calendar.monthrange(day.year, day.month)[1])


def build_chart_bars(series: list[SeriesPoint], granularity: Granularity) -> list[ChartBar]:
    """One bar per bucket, each carrying its inclusive date span."""
    bars: list[ChartBar] = []
    for index, point in enumerate(series):
        first = _key_to_date(point.key)
        if granularity == "day":
            bars.append(ChartBar(format_week_label(first), point.count, point.key, point.key))
        elif granularity == "week":
            last = first + timedelta(days=6)
            bars.append(ChartBar(f"Week {index + 1}", point.count, point.key, format_date(last)))
        elif granularity == "month":
            bars.append(
                ChartBar(format_month_year(first), point.count, point.key, format_date(month_end(first)))
            )
        else:
            raise ValueError(f"Unknown granularity {granularity!r}")
    return bars


def build_year_bars(monthly: Any) -> list[ChartBar]:
    """Yearly bars from monthly rows (all-time view)."""
    return [
        ChartBar(point.key[:4], point.count, point.key, f"{point.key[:4]}-12-31")
        for point in rollup_by_year(monthly)
    ]


def build_chart(
    date_range: DateRange,
    plan: ChartViewPlan,
    daily: Any = None,
    weekly: Any = None,
    monthly: Any = None,
    calendar: ReferenceCalendar | None = None,
) -> list[ChartBar]:
    """Bars for the selected view.

    Bounded ranges are zero-filled over the range. The all-time range has
    no bounds, so its month view shows the monthly rows as returned and its
    year view rolls them up.
    """
    cal = calendar or default_calendar()

    if date_range.is_open:
        if plan.view == "year":
            return build_year_bars(monthly)
        if plan.view == "month":
            rows = sorted(coerce_rows(monthly, "month"), key=lambda row: row.key)
            points = [SeriesPoint(row.key, row.count) for row in rows]
            return build_chart_bars(points, "month")
        return []

    sources: dict[str, Any] = {"day": daily, "week": weekly, "month": monthly}
    if plan.view not in sources:
        return []
    granularity: Granularity = plan.view  # type: ignore[assignment]
    series = fill_series(sources[granularity], date_range.start, date_range.end, granularity, cal)
    return build_chart_bars(series, granularity)


__all__ = [
    "MONTH_ABBR",
    "format_month_year",
    "format_week_label",
    "month_end",
    "build_chart_bars",
    "build_year_bars",
    "build_chart",
]

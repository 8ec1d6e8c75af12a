"""Timeframe parameters and chart view selection.

Statistics pages carry their timeframe as a single query parameter: either a
preset name (``"this-month"``) or a custom ``"YYYY-MM-DD,YYYY-MM-DD"`` pair.
Anything unusable falls back to this week rather than failing the page.
"""

from __future__ import annotations

import logging

from pomostats.core.errors import EInvalidFormat
from pomostats.core.types import NAMED_PERIODS, ChartView, ChartViewPlan, DateRange
from pomostats.time.calendar import ReferenceCalendar, default_calendar

logger = logging.getLogger(__name__)

FALLBACK_PERIOD = "this-week"


def parse_timeframe(
    param: str | None,
    calendar: ReferenceCalendar | None = None,
) -> DateRange:
    """Resolve a timeframe query parameter into a ``DateRange``.

    Args:
        param: Preset name, ``"start,end"`` date keys, or None for the
            configured default timeframe
        calendar: Calendar providing the clock and reference zone

    Returns:
        Resolved range. Unknown presets and malformed custom ranges resolve
        to this week.
    """
    cal = calendar or default_calendar()
    if not param:
        return cal.resolve_period(cal.config.default_timeframe)

    param = param.strip()
    if "," in param:
        start, _, end = param.partition(",")
        start, end = start.strip(), end.strip()
        if start and end:
            try:
                return cal.resolve_period("custom", start, end)
            except EInvalidFormat as e:
                logger.warning("Invalid custom timeframe %r (%s); using %s", param, e.message, FALLBACK_PERIOD)
        else:
            logger.warning("Incomplete custom timeframe %r; using %s", param, FALLBACK_PERIOD)
        return cal.resolve_period(FALLBACK_PERIOD)

    if param in NAMED_PERIODS and param != "custom":
        return cal.resolve_period(param)  # type: ignore[arg-type]

    logger.warning("Unknown timeframe %r; using %s", param, FALLBACK_PERIOD)
    return cal.resolve_period(FALLBACK_PERIOD)


def available_views(
    date_range: DateRange,
    calendar: ReferenceCalendar | None = None,
) -> tuple[ChartView, ...]:
    """Chart granularities that make sense for ``date_range``."""
    cal = calendar or default_calendar()
    period = date_range.period

    if date_range.is_open:
        return ("month", "year")
    if period in ("this-week", "last-week"):
        return ("day",)
    if period == "this-month":
        return ("day", "week")
    if period in ("this-year", "last-year"):
        return ("day", "week", "month")

    # Inclusive of both the start and end day.
    day_count = cal.days_between(date_range.start, date_range.end) + 1
    if day_count <= cal.config.short_range_days:
        return ("day", "week")
    if day_count <= cal.config.long_range_days:
        return ("day", "week", "month")
    return ("month", "year")


def select_chart_view(
    date_range: DateRange,
    requested: str | None = None,
    calendar: ReferenceCalendar | None = None,
) -> ChartViewPlan:
    """Pick the chart view for a range, honouring ``requested`` when allowed.

    Ranges offering a day view default to it; longer and open ranges default
    to the month view.
    """
    views = available_views(date_range, calendar)
    default: ChartView = "day" if "day" in views else "month"
    if requested is None:
        return ChartViewPlan(view=default, available=views)
    if requested not in views:
        logger.debug("View %r not available for %s; using %s", requested, date_range.period, default)
        return ChartViewPlan(view=default, available=views)
    return ChartViewPlan(view=requested, available=views)  # type: ignore[arg-type]


__all__ = [
    "FALLBACK_PERIOD",
    "parse_timeframe",
    "available_views",
    "select_chart_view",
]

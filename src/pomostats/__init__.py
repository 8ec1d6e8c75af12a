"""pomostats - calendar ranges and chart series for pomodoro statistics.

Resolves named timeframes into reference-zone boundaries and turns sparse
per-bucket counts from the backend into dense, chart-ready series.

Basic usage:
    >>> from pomostats import ReferenceCalendar, FixedClock, fill_series
    >>> cal = ReferenceCalendar(clock=FixedClock("2026-01-31T15:00:00Z"))
    >>> rng = cal.resolve_period("this-week")
    >>> series = fill_series([("2026-01-27", 5)], rng.start, rng.end, "day", cal)
    >>> [p.count for p in series]
    [0, 5, 0, 0, 0, 0, 0]

Statistics views:
    >>> from pomostats import parse_timeframe, select_chart_view, build_chart
    >>> rng = parse_timeframe("2026-01-01,2026-03-31", cal)
    >>> plan = select_chart_view(rng, requested="month", calendar=cal)
    >>> bars = build_chart(rng, plan, monthly=rows, calendar=cal)

Reference zone:
    All boundaries use a single fixed UTC offset (default -05:00, US
    Eastern standard time). The process-local timezone is never consulted.
"""

__version__ = "1.0.0"

# Core
from pomostats.core.clock import Clock, FixedClock, SystemClock
from pomostats.core.config import CalendarConfig
from pomostats.core.errors import EContractViolation, EInvalidFormat, PomoStatsError
from pomostats.core.types import ChartBar, ChartViewPlan, DateRange, SeriesPoint

# Discovery
from pomostats.discovery import describe

# Series filling
from pomostats.series import (
    fill_daily,
    fill_monthly,
    fill_series,
    fill_weekly,
    rollup_by_year,
    to_frame,
)

# Statistics views
from pomostats.stats import (
    build_chart,
    build_chart_bars,
    build_year_bars,
    format_month_year,
    format_week_label,
    parse_timeframe,
    select_chart_view,
)

# Calendar
from pomostats.time import (
    ReferenceCalendar,
    current_reference_date,
    days_between,
    default_calendar,
    enumerate_days,
    enumerate_month_starts,
    enumerate_week_starts,
    last_week_end,
    last_week_start,
    last_year_end,
    last_year_start,
    parse_date_key,
    this_month_end,
    this_month_start,
    this_week_end,
    this_week_start,
    this_year_end,
    this_year_start,
    to_date_key,
    to_iso,
)

__all__ = [
    "__version__",
    # Core
    "CalendarConfig",
    "Clock",
    "SystemClock",
    "FixedClock",
    "DateRange",
    "SeriesPoint",
    "ChartViewPlan",
    "ChartBar",
    # Calendar
    "ReferenceCalendar",
    "default_calendar",
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
    "to_iso",
    "days_between",
    "enumerate_days",
    "enumerate_week_starts",
    "enumerate_month_starts",
    # Series
    "fill_series",
    "fill_daily",
    "fill_weekly",
    "fill_monthly",
    "to_frame",
    "rollup_by_year",
    # Statistics views
    "parse_timeframe",
    "select_chart_view",
    "build_chart",
    "build_chart_bars",
    "build_year_bars",
    "format_month_year",
    "format_week_label",
    # Discovery
    "describe",
    # Errors
    "PomoStatsError",
    "EInvalidFormat",
    "EContractViolation",
]

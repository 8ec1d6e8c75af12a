"""Statistics views: timeframe parsing, chart view selection and chart bars."""

from .chart import (
    build_chart,
    build_chart_bars,
    build_year_bars,
    format_month_year,
    format_week_label,
)
from .timeframe import available_views, parse_timeframe, select_chart_view

__all__ = [
    # Timeframes
    "parse_timeframe",
    "available_views",
    "select_chart_view",
    # Charts
    "build_chart",
    "build_chart_bars",
    "build_year_bars",
    "format_month_year",
    "format_week_label",
]

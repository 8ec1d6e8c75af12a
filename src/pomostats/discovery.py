"""API discovery and introspection for pomostats.

Provides ``describe()`` which returns a machine-readable schema of the
library's public surface: version, stable APIs, error codes with fix hints,
and the supported periods and granularities.

Usage:
    >>> from pomostats import describe
    >>> info = describe()
    >>> sorted(info)
    ['apis', 'chart_views', 'error_codes', 'granularities', 'periods', 'reference_zone', 'version']
"""

from __future__ import annotations

from typing import Any


def describe() -> dict[str, Any]:
    """Return a machine-readable API schema for pomostats."""
    import pomostats
    from pomostats.core.config import CalendarConfig
    from pomostats.core.types import GRANULARITIES, NAMED_PERIODS

    config = CalendarConfig()
    return {
        "version": pomostats.__version__,
        "apis": _get_apis(),
        "error_codes": _get_error_codes(),
        "periods": list(NAMED_PERIODS),
        "granularities": list(GRANULARITIES),
        "chart_views": ["day", "week", "month", "year"],
        "reference_zone": {
            "label": config.zone_label,
            "utc_offset_hours": config.utc_offset_hours,
        },
    }


def _get_apis() -> dict[str, dict[str, str]]:
    """Return stable API surface."""
    return {
        "resolve_period": {
            "function": "ReferenceCalendar.resolve_period",
            "description": "Resolve a named period into reference-zone start/end instants",
        },
        "parse_date_key": {
            "function": "parse_date_key",
            "description": "Parse YYYY-MM-DD into reference-local midnight without day shifts",
        },
        "days_between": {
            "function": "days_between",
            "description": "Calendar days between two instants in the reference zone",
        },
        "enumerate": {
            "function": "enumerate_days / enumerate_week_starts / enumerate_month_starts",
            "description": "Ordered bucket keys covering a range",
        },
        "fill": {
            "function": "fill_series",
            "description": "Zero-fill sparse (key, count) rows over a range",
        },
        "timeframe": {
            "function": "parse_timeframe",
            "description": "Resolve a timeframe query parameter with this-week fallback",
        },
        "chart": {
            "function": "select_chart_view / build_chart",
            "description": "Choose a chart granularity and build labelled bars",
        },
    }


def _get_error_codes() -> dict[str, dict[str, str]]:
    """Return error codes with their fix hints."""
    from pomostats.core.errors import ERROR_REGISTRY

    result: dict[str, dict[str, str]] = {}
    for code, cls in sorted(ERROR_REGISTRY.items()):
        result[code] = {
            "class": cls.__name__,
            "description": (cls.__doc__ or "").strip().split("\n")[0],
            "fix_hint": cls.fix_hint,
        }
    return result


__all__ = ["describe"]

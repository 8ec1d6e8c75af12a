"""Core types, configuration, clocks and errors."""

from pomostats.core.clock import Clock, FixedClock, SystemClock
from pomostats.core.config import CalendarConfig
from pomostats.core.errors import (
    ERROR_REGISTRY,
    EContractViolation,
    EInvalidFormat,
    PomoStatsError,
    get_error_class,
)
from pomostats.core.types import (
    GRANULARITIES,
    KEY_COLUMNS,
    NAMED_PERIODS,
    ChartBar,
    ChartView,
    ChartViewPlan,
    DateRange,
    Granularity,
    NamedPeriod,
    SeriesPoint,
)

__all__ = [
    "Clock",
    "FixedClock",
    "SystemClock",
    "CalendarConfig",
    "PomoStatsError",
    "EInvalidFormat",
    "EContractViolation",
    "ERROR_REGISTRY",
    "get_error_class",
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

"""Calendar configuration.

A single frozen config carries the reference timezone and the thresholds
the statistics views use to pick chart granularities.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta, timezone

from pomostats.core.types import NAMED_PERIODS, NamedPeriod


@dataclass(frozen=True)
class CalendarConfig:
    """Reference timezone and view thresholds.

    The reference zone is a fixed UTC offset. Period boundaries are always
    computed from this constant, never from the process-local timezone, so
    results do not depend on where the code runs. Daylight saving time is
    not modelled.

    Args:
        utc_offset_hours: Offset of the reference zone from UTC in hours
            (-5.0 for US Eastern standard time)
        zone_label: Human-readable name of the reference zone
        default_timeframe: Timeframe used when none is requested
        short_range_days: Custom ranges up to this many days offer day/week views
        long_range_days: Custom ranges up to this many days also offer a month view
    """

    utc_offset_hours: float = -5.0
    zone_label: str = "US/Eastern"
    default_timeframe: NamedPeriod = "this-week"
    short_range_days: int = 30
    long_range_days: int = 365

    def __post_init__(self) -> None:
        if not -14 <= self.utc_offset_hours <= 14:
            raise ValueError(f"utc_offset_hours must be within [-14, 14], got {self.utc_offset_hours}")
        if self.default_timeframe not in NAMED_PERIODS or self.default_timeframe == "custom":
            raise ValueError(f"default_timeframe must be a preset period, got {self.default_timeframe!r}")
        if self.short_range_days <= 0:
            raise ValueError(f"short_range_days must be positive, got {self.short_range_days}")
        if self.long_range_days < self.short_range_days:
            raise ValueError("long_range_days must be >= short_range_days")

    @property
    def tzinfo(self) -> timezone:
        """Fixed-offset tzinfo for the reference zone."""
        if self.utc_offset_hours == 0:
            return timezone.utc
        return timezone(timedelta(hours=self.utc_offset_hours), self.zone_label)

    @classmethod
    def eastern(cls) -> CalendarConfig:
        """US Eastern standard time (UTC-05:00), the default reference zone."""
        return cls()

    @classmethod
    def utc(cls) -> CalendarConfig:
        """UTC reference zone. Boundaries serialize with a ``Z`` suffix."""
        return cls(utc_offset_hours=0.0, zone_label="UTC")


__all__ = ["CalendarConfig"]

"""Period boundaries in the reference timezone.

``ReferenceCalendar`` resolves named periods ("this-week", "last-year", ...)
into concrete start/end instants. Starts are 00:00:00.000 and ends are
23:59:59.999 of their calendar day in the reference zone; every returned
instant carries the zone's fixed offset as its tzinfo.

Usage:
    >>> from pomostats.core import FixedClock
    >>> cal = ReferenceCalendar(clock=FixedClock("2026-01-31T15:00:00Z"))
    >>> cal.this_week_start().date().isoformat()
    '2026-01-26'
"""

from __future__ import annotations

import calendar as _calendar
from datetime import date, datetime, time, timedelta, tzinfo

from pomostats.core.clock import Clock, SystemClock
from pomostats.core.config import CalendarConfig
from pomostats.core.errors import EInvalidFormat
from pomostats.core.types import NAMED_PERIODS, DateRange, NamedPeriod
from pomostats.time import keys, ranges
from pomostats.time.keys import DateLike

_END_OF_DAY = time(23, 59, 59, 999000)


class ReferenceCalendar:
    """Calendar arithmetic pinned to one reference zone and one clock.

    Args:
        config: Reference zone and thresholds (default: US Eastern, UTC-05:00)
        clock: Source of "now" (default: system clock)
    """

    def __init__(
        self,
        config: CalendarConfig | None = None,
        clock: Clock | None = None,
    ) -> None:
        self.config = config or CalendarConfig()
        self.clock = clock or SystemClock()

    @property
    def tz(self) -> tzinfo:
        return self.config.tzinfo

    def __repr__(self) -> str:
        return f"ReferenceCalendar(offset={self.config.utc_offset_hours:+g}h, clock={self.clock!r})"

    # ------------------------------------------------------------------
    # Boundary helpers
    # ------------------------------------------------------------------

    def start_of_day(self, day: date) -> datetime:
        return datetime.combine(day, time(0, 0), tzinfo=self.tz)

    def end_of_day(self, day: date) -> datetime:
        return datetime.combine(day, _END_OF_DAY, tzinfo=self.tz)

    def local_date(self, value: DateLike) -> date:
        return keys.to_reference_date(value, self.tz)

    # ------------------------------------------------------------------
    # Now
    # ------------------------------------------------------------------

    def current_reference_date(self) -> datetime:
        """Current instant expressed in the reference zone."""
        return self.clock.now().astimezone(self.tz)

    def today(self) -> date:
        return self.current_reference_date().date()

    # ------------------------------------------------------------------
    # Weeks (Monday..Sunday)
    # ------------------------------------------------------------------

    def week_start(self, value: DateLike) -> datetime:
        """Monday 00:00 of the week containing ``value``.

        Sunday belongs to the week that started six days earlier.
        """
        day = self.local_date(value)
        return self.start_of_day(day - timedelta(days=day.weekday()))

    def week_end(self, value: DateLike) -> datetime:
        """Sunday 23:59:59.999 of the week containing ``value``."""
        monday = self.week_start(value).date()
        return self.end_of_day(monday + timedelta(days=6))

    def this_week_start(self) -> datetime:
        return self.week_start(self.today())

    def this_week_end(self) -> datetime:
        return self.week_end(self.today())

    def last_week_start(self) -> datetime:
        return self.week_start(self.today() - timedelta(days=7))

    def last_week_end(self) -> datetime:
        return self.week_end(self.today() - timedelta(days=7))

    # ------------------------------------------------------------------
    # Months and years
    # ------------------------------------------------------------------

    def this_month_start(self) -> datetime:
        return self.start_of_day(self.today().replace(day=1))

    def this_month_end(self) -> datetime:
        today = self.today()
        last_day = _calendar.monthrange(today.year, today.month)[1]
        return self.end_of_day(today.replace(day=last_day))

    def year_start(self, year: int) -> datetime:
        return self.start_of_day(date(year, 1, 1))

    def year_end(self, year: int) -> datetime:
        return self.end_of_day(date(year, 12, 31))

    def this_year_start(self) -> datetime:
        """Jan 1 00:00 in the reference zone.

        The instant keeps the reference offset, so ``to_iso`` renders
        ``...T00:00:00.000-05:00`` by default. Build the calendar on
        ``CalendarConfig.utc()`` for ``...Z`` strings.
        """
        return self.year_start(self.today().year)

    def this_year_end(self) -> datetime:
        return self.year_end(self.today().year)

    def last_year_start(self) -> datetime:
        return self.year_start(self.today().year - 1)

    def last_year_end(self) -> datetime:
        return self.year_end(self.today().year - 1)

    # ------------------------------------------------------------------
    # Keys, counting and enumeration
    # ------------------------------------------------------------------

    def parse_date_key(self, value: str) -> datetime:
        return keys.parse_date_key(value, self.tz)

    def to_date_key(self, value: DateLike) -> str:
        return keys.to_date_key(value, self.tz)

    def days_between(self, a: DateLike, b: DateLike) -> int:
        return keys.days_between(a, b, self.tz)

    def enumerate_days(self, start: DateLike, end: DateLike) -> list[str]:
        return ranges.enumerate_days(start, end, self.tz)

    def enumerate_week_starts(self, start: DateLike, end: DateLike) -> list[str]:
        return ranges.enumerate_week_starts(start, end, self.tz)

    def enumerate_month_starts(self, start: DateLike, end: DateLike) -> list[str]:
        return ranges.enumerate_month_starts(start, end, self.tz)

    def enumerate(self, start: DateLike, end: DateLike, granularity: str) -> list[str]:
        """Bucket keys for ``granularity`` ('day', 'week' or 'month')."""
        try:
            enumerator = ranges.ENUMERATORS[granularity]
        except KeyError:
            raise ValueError(
                f"Unknown granularity {granularity!r}; expected one of {sorted(ranges.ENUMERATORS)}"
            ) from None
        return enumerator(start, end, self.tz)

    # ------------------------------------------------------------------
    # Named periods
    # ------------------------------------------------------------------

    def resolve_period(
        self,
        period: NamedPeriod,
        start: str | None = None,
        end: str | None = None,
    ) -> DateRange:
        """Resolve a named period into concrete bounds.

        ``custom`` takes ``start`` and ``end`` date keys; the range ends at
        23:59:59.999 of the end day. ``all-time`` is open on both sides.

        Raises:
            EInvalidFormat: If custom bounds are missing or malformed
            ValueError: If ``period`` is not a known period
        """
        if period == "this-week":
            return DateRange(self.this_week_start(), self.this_week_end(), period)
        if period == "last-week":
            return DateRange(self.last_week_start(), self.last_week_end(), period)
        if period == "this-month":
            return DateRange(self.this_month_start(), self.this_month_end(), period)
        if period == "this-year":
            return DateRange(self.this_year_start(), self.this_year_end(), period)
        if period == "last-year":
            return DateRange(self.last_year_start(), self.last_year_end(), period)
        if period == "all-time":
            return DateRange(None, None, period)
        if period == "custom":
            if not start or not end:
                raise EInvalidFormat(
                    "Custom period needs both start and end date keys",
                    context={"start": start, "end": end},
                )
            first = self.parse_date_key(start)
            last = self.parse_date_key(end)
            return DateRange(first, self.end_of_day(last.date()), period)
        raise ValueError(f"Unknown period {period!r}; expected one of {list(NAMED_PERIODS)}")


_default_calendar: ReferenceCalendar | None = None


def default_calendar() -> ReferenceCalendar:
    """Shared calendar on the default config and the system clock."""
    global _default_calendar
    if _default_calendar is None:
        _default_calendar = ReferenceCalendar()
    return _default_calendar


__all__ = ["ReferenceCalendar", "default_calendar"]

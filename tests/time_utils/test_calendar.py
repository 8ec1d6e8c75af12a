"""Tests for pomostats.time.calendar – period boundaries in the reference zone."""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone

import pytest

from pomostats.core.errors import EInvalidFormat
from pomostats.time.calendar import ReferenceCalendar, default_calendar
from pomostats.time.keys import to_iso

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _pinned_nows(start: datetime, days: int, step: int = 1) -> list[str]:
    """ISO instants at 12:00 UTC, one every ``step`` days."""
    return [
        (start + timedelta(days=offset)).strftime("%Y-%m-%dT%H:%M:%SZ")
        for offset in range(0, days, step)
    ]


SAMPLE_NOWS = _pinned_nows(datetime(2024, 1, 1, 12, tzinfo=timezone.utc), 3 * 366, step=5) + [
    # Instants that are already the next day in UTC but not in US Eastern
    "2026-01-01T03:00:00Z",
    "2026-02-09T03:00:00Z",
    "2025-12-31T23:30:00Z",
]


# ---------------------------------------------------------------------------
# Now
# ---------------------------------------------------------------------------


class TestCurrentReferenceDate:
    def test_expressed_in_reference_zone(self, cal: ReferenceCalendar) -> None:
        now = cal.current_reference_date()
        assert now.utcoffset() == timedelta(hours=-5)
        assert (now.year, now.month, now.day, now.hour) == (2026, 1, 31, 10)

    def test_same_instant_as_clock(self, cal: ReferenceCalendar) -> None:
        assert cal.current_reference_date() == datetime(2026, 1, 31, 15, tzinfo=timezone.utc)

    def test_default_calendar_is_shared(self) -> None:
        assert default_calendar() is default_calendar()


# ---------------------------------------------------------------------------
# Weeks
# ---------------------------------------------------------------------------


class TestThisWeek:
    def test_start_is_monday_jan_26(self, cal: ReferenceCalendar) -> None:
        start = cal.this_week_start()
        assert start.date() == date(2026, 1, 26)
        assert start.weekday() == 0
        assert (start.hour, start.minute, start.second, start.microsecond) == (0, 0, 0, 0)
        assert to_iso(start) == "2026-01-26T00:00:00.000-05:00"

    def test_end_is_sunday_feb_1(self, cal: ReferenceCalendar) -> None:
        end = cal.this_week_end()
        assert end.date() == date(2026, 2, 1)
        assert end.weekday() == 6
        assert to_iso(end) == "2026-02-01T23:59:59.999-05:00"

    def test_week_spans_six_days(self, cal: ReferenceCalendar) -> None:
        assert cal.days_between(cal.this_week_start(), cal.this_week_end()) == 6

    def test_sunday_goes_back_to_monday(self, make_cal) -> None:
        cal = make_cal("2026-02-08T17:00:00Z")  # Sunday noon local
        assert cal.this_week_start().date() == date(2026, 2, 2)
        assert cal.this_week_end().date() == date(2026, 2, 8)

    def test_monday_is_its_own_week_start(self, make_cal) -> None:
        cal = make_cal("2026-02-02T17:00:00Z")
        assert cal.this_week_start().date() == date(2026, 2, 2)

    def test_sunday_evening_local_is_monday_in_utc(self, make_cal) -> None:
        # 03:00 UTC Monday is still Sunday 22:00 in the reference zone
        cal = make_cal("2026-02-09T03:00:00Z")
        assert cal.this_week_start().date() == date(2026, 2, 2)
        assert cal.this_week_end().date() == date(2026, 2, 8)

    @pytest.mark.parametrize("now", SAMPLE_NOWS)
    def test_always_monday_to_sunday(self, make_cal, now: str) -> None:
        cal = make_cal(now)
        start, end = cal.this_week_start(), cal.this_week_end()
        assert start.weekday() == 0
        assert end.weekday() == 6
        assert cal.days_between(start, end) == 6
        assert start.date() <= cal.today() <= end.date()


class TestLastWeek:
    def test_previous_monday_to_sunday(self, cal: ReferenceCalendar) -> None:
        assert cal.last_week_start().date() == date(2026, 1, 19)
        assert cal.last_week_end().date() == date(2026, 1, 25)

    def test_exactly_seven_days_before_this_week(self, cal: ReferenceCalendar) -> None:
        assert cal.this_week_start() - cal.last_week_start() == timedelta(days=7)
        assert cal.this_week_end() - cal.last_week_end() == timedelta(days=7)

    @pytest.mark.parametrize("now", SAMPLE_NOWS[::7])
    def test_still_monday_to_sunday(self, make_cal, now: str) -> None:
        cal = make_cal(now)
        assert cal.last_week_start().weekday() == 0
        assert cal.last_week_end().weekday() == 6


class TestWeekOf:
    def test_week_start_for_saturday(self, cal: ReferenceCalendar) -> None:
        assert cal.week_start(date(2026, 1, 31)).date() == date(2026, 1, 26)

    def test_week_end_for_monday(self, cal: ReferenceCalendar) -> None:
        assert cal.week_end(date(2026, 1, 26)).date() == date(2026, 2, 1)

    def test_accepts_date_keys(self, cal: ReferenceCalendar) -> None:
        assert cal.week_start("2026-02-01").date() == date(2026, 1, 26)

    def test_converts_aware_instants(self, cal: ReferenceCalendar) -> None:
        # Monday 02:00 UTC is Sunday 21:00 in the reference zone
        instant = datetime(2026, 2, 2, 2, tzinfo=timezone.utc)
        assert cal.week_start(instant).date() == date(2026, 1, 26)


# ---------------------------------------------------------------------------
# Months
# ---------------------------------------------------------------------------


class TestThisMonth:
    def test_january(self, cal: ReferenceCalendar) -> None:
        assert to_iso(cal.this_month_start()) == "2026-01-01T00:00:00.000-05:00"
        assert to_iso(cal.this_month_end()) == "2026-01-31T23:59:59.999-05:00"

    def test_february_non_leap(self, make_cal) -> None:
        cal = make_cal("2026-02-15T17:00:00Z")
        assert cal.this_month_end().date() == date(2026, 2, 28)

    def test_february_leap_year(self, make_cal) -> None:
        cal = make_cal("2024-02-15T17:00:00Z")
        assert cal.this_month_end().date() == date(2024, 2, 29)

    def test_december(self, make_cal) -> None:
        cal = make_cal("2026-12-15T17:00:00Z")
        assert cal.this_month_start().date() == date(2026, 12, 1)
        assert cal.this_month_end().date() == date(2026, 12, 31)

    def test_month_follows_reference_zone(self, make_cal) -> None:
        # Feb 1 01:00 UTC is still Jan 31 in the reference zone
        cal = make_cal("2026-02-01T01:00:00Z")
        assert cal.this_month_start().date() == date(2026, 1, 1)


# ---------------------------------------------------------------------------
# Years
# ---------------------------------------------------------------------------


class TestThisYear:
    def test_bounds(self, cal: ReferenceCalendar) -> None:
        assert to_iso(cal.this_year_start()) == "2026-01-01T00:00:00.000-05:00"
        assert to_iso(cal.this_year_end()) == "2026-12-31T23:59:59.999-05:00"

    def test_bounds_in_utc_zone(self, utc_cal: ReferenceCalendar) -> None:
        assert to_iso(utc_cal.this_year_start()) == "2026-01-01T00:00:00.000Z"
        assert to_iso(utc_cal.this_year_end()) == "2026-12-31T23:59:59.999Z"

    def test_no_leak_into_adjacent_years(self, cal: ReferenceCalendar) -> None:
        for instant in (cal.this_year_start(), cal.this_year_end()):
            text = to_iso(instant)
            assert "2025" not in text
            assert "2027" not in text

    def test_new_years_eve_local(self, make_cal) -> None:
        # 03:00 UTC on Jan 1 is still Dec 31 in the reference zone
        cal = make_cal("2026-01-01T03:00:00Z")
        assert cal.this_year_start().year == 2025
        assert cal.this_year_end().date() == date(2025, 12, 31)

    @pytest.mark.parametrize("now", SAMPLE_NOWS)
    def test_bounds_stay_in_reference_year(self, make_cal, now: str) -> None:
        cal = make_cal(now)
        year = cal.today().year
        start, end = cal.this_year_start(), cal.this_year_end()
        assert start.year == year
        assert end.year == year
        for text in (to_iso(start), to_iso(end)):
            assert str(year - 1) not in text
            assert str(year + 1) not in text


class TestLastYear:
    def test_spans_2025(self, cal: ReferenceCalendar) -> None:
        start, end = cal.last_year_start(), cal.last_year_end()
        assert to_iso(start) == "2025-01-01T00:00:00.000-05:00"
        assert to_iso(end) == "2025-12-31T23:59:59.999-05:00"
        for text in (to_iso(start), to_iso(end)):
            assert "2025" in text
            assert "2024" not in text
            assert "2026" not in text

    @pytest.mark.parametrize("now", SAMPLE_NOWS[::5])
    def test_one_year_before_this_year(self, make_cal, now: str) -> None:
        cal = make_cal(now)
        assert cal.last_year_start().replace(year=cal.last_year_start().year + 1) == cal.this_year_start()
        assert cal.last_year_end().replace(year=cal.last_year_end().year + 1) == cal.this_year_end()


# ---------------------------------------------------------------------------
# resolve_period
# ---------------------------------------------------------------------------


class TestResolvePeriod:
    @pytest.mark.parametrize(
        ("period", "start", "end"),
        [
            ("this-week", date(2026, 1, 26), date(2026, 2, 1)),
            ("last-week", date(2026, 1, 19), date(2026, 1, 25)),
            ("this-month", date(2026, 1, 1), date(2026, 1, 31)),
            ("this-year", date(2026, 1, 1), date(2026, 12, 31)),
            ("last-year", date(2025, 1, 1), date(2025, 12, 31)),
        ],
    )
    def test_presets(self, cal: ReferenceCalendar, period: str, start: date, end: date) -> None:
        rng = cal.resolve_period(period)  # type: ignore[arg-type]
        assert rng.period == period
        assert rng.start.date() == start
        assert rng.end.date() == end
        assert not rng.is_open

    def test_all_time_is_open(self, cal: ReferenceCalendar) -> None:
        rng = cal.resolve_period("all-time")
        assert rng.start is None
        assert rng.end is None
        assert rng.is_open

    def test_custom_ends_at_end_of_day(self, cal: ReferenceCalendar) -> None:
        rng = cal.resolve_period("custom", "2026-01-05", "2026-01-20")
        assert to_iso(rng.start) == "2026-01-05T00:00:00.000-05:00"
        assert to_iso(rng.end) == "2026-01-20T23:59:59.999-05:00"

    def test_custom_requires_both_bounds(self, cal: ReferenceCalendar) -> None:
        with pytest.raises(EInvalidFormat):
            cal.resolve_period("custom", "2026-01-05", None)

    def test_custom_rejects_impossible_dates(self, cal: ReferenceCalendar) -> None:
        with pytest.raises(EInvalidFormat):
            cal.resolve_period("custom", "2026-02-30", "2026-03-01")

    def test_unknown_period(self, cal: ReferenceCalendar) -> None:
        with pytest.raises(ValueError, match="Unknown period"):
            cal.resolve_period("next-week")  # type: ignore[arg-type]

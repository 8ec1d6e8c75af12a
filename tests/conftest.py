"""Shared fixtures: calendars pinned to a known instant."""

from __future__ import annotations

import pytest

from pomostats.core.clock import FixedClock
from pomostats.core.config import CalendarConfig
from pomostats.time.calendar import ReferenceCalendar

# Saturday, Jan 31 2026, 10:00 in US Eastern (UTC-05:00)
REFERENCE_NOW = "2026-01-31T15:00:00Z"


def make_calendar(now: str = REFERENCE_NOW, offset: float = -5.0) -> ReferenceCalendar:
    """Calendar with a fixed clock and reference offset."""
    config = CalendarConfig() if offset == -5.0 else CalendarConfig(
        utc_offset_hours=offset, zone_label=f"UTC{offset:+g}"
    )
    return ReferenceCalendar(config=config, clock=FixedClock(now))


@pytest.fixture
def cal() -> ReferenceCalendar:
    return make_calendar()


@pytest.fixture
def utc_cal() -> ReferenceCalendar:
    return ReferenceCalendar(config=CalendarConfig.utc(), clock=FixedClock(REFERENCE_NOW))


@pytest.fixture
def make_cal():
    """Factory fixture: ``make_cal(now, offset=-5.0)``."""
    return make_calendar

"""Bucket enumeration over a date range.

Every enumerator returns ascending ``YYYY-MM-DD`` keys and an empty list
when ``end`` is before ``start``; callers do not need to validate ranges.
"""

from __future__ import annotations

from datetime import timedelta, tzinfo

import pandas as pd

from pomostats.time.keys import DateLike, to_reference_date


def _keys(index: pd.DatetimeIndex) -> list[str]:
    return [ts.strftime("%Y-%m-%d") for ts in index]


def enumerate_days(start: DateLike, end: DateLike, tz: tzinfo) -> list[str]:
    """Every calendar day from ``start`` to ``end`` inclusive."""
    first = to_reference_date(start, tz)
    last = to_reference_date(end, tz)
    if last < first:
        return []
    return _keys(pd.date_range(start=pd.Timestamp(first), end=pd.Timestamp(last), freq="D"))


def enumerate_week_starts(start: DateLike, end: DateLike, tz: tzinfo) -> list[str]:
    """Monday of every week overlapping ``[start, end]``.

    ``start`` snaps back to its Monday before stepping 7 days at a time, so
    a week straddling a month boundary is keyed by its Monday even when
    that Monday falls in the previous month.
    """
    first = to_reference_date(start, tz)
    last = to_reference_date(end, tz)
    if last < first:
        return []
    monday = first - timedelta(days=first.weekday())
    return _keys(pd.date_range(start=pd.Timestamp(monday), end=pd.Timestamp(last), freq="7D"))


def enumerate_month_starts(start: DateLike, end: DateLike, tz: tzinfo) -> list[str]:
    """First day of every month from ``start``'s month to ``end``'s month."""
    first = to_reference_date(start, tz)
    last = to_reference_date(end, tz)
    if last < first:
        return []
    return _keys(
        pd.date_range(
            start=pd.Timestamp(first.replace(day=1)),
            end=pd.Timestamp(last.replace(day=1)),
            freq="MS",
        )
    )


ENUMERATORS = {
    "day": enumerate_days,
    "week": enumerate_week_starts,
    "month": enumerate_month_starts,
}


__all__ = [
    "enumerate_days",
    "enumerate_week_starts",
    "enumerate_month_starts",
    "ENUMERATORS",
]

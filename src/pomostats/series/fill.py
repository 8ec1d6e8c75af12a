"""Zero-filling of sparse chart series.

Backend aggregation calls only return buckets that have data. Charts need
every bucket in the range, so the filler enumerates the authoritative bucket
list and looks each one up in the sparse rows.
"""

from __future__ import annotations

import logging
from typing import Any

import pandas as pd

from pomostats.core.types import GRANULARITIES, KEY_COLUMNS, Granularity, SeriesPoint
from pomostats.series.rows import coerce_rows
from pomostats.time.calendar import ReferenceCalendar, default_calendar
from pomostats.time.keys import DateLike

logger = logging.getLogger(__name__)


def fill_series(
    sparse: Any,
    start: DateLike,
    end: DateLike,
    granularity: Granularity = "day",
    calendar: ReferenceCalendar | None = None,
) -> list[SeriesPoint]:
    """Merge sparse counts into a dense, gap-free series.

    Args:
        sparse: Sparse rows (see ``coerce_rows`` for accepted shapes)
        start: Range start (instant, date or date key)
        end: Range end (instant, date or date key)
        granularity: Bucket size - 'day', 'week' (Monday keys) or 'month'
        calendar: Calendar providing the reference zone (default: shared)

    Returns:
        One point per enumerated bucket in ascending order, with the sparse
        count where present and 0 elsewhere. Empty when end < start.
    """
    if granularity not in GRANULARITIES:
        raise ValueError(f"granularity must be one of {GRANULARITIES}, got {granularity!r}")
    cal = calendar or default_calendar()

    counts: dict[str, int] = {}
    for row in coerce_rows(sparse, granularity):
        if row.key in counts:
            logger.debug("Duplicate %s bucket %s; keeping the last count", granularity, row.key)
        counts[row.key] = row.count

    buckets = cal.enumerate(start, end, granularity)
    unmatched = set(counts) - set(buckets)
    if unmatched:
        logger.debug(
            "%d sparse %s rows fall outside the range: %s",
            len(unmatched),
            granularity,
            sorted(unmatched),
        )

    return [SeriesPoint(key=bucket, count=counts.get(bucket, 0)) for bucket in buckets]


def _fill_records(
    data: Any,
    start: DateLike,
    end: DateLike,
    granularity: Granularity,
    calendar: ReferenceCalendar | None,
) -> list[dict[str, int | str]]:
    key_name = KEY_COLUMNS[granularity]
    points = fill_series(data, start, end, granularity, calendar)
    return [point.to_dict(key_name) for point in points]


def fill_daily(
    data: Any,
    start: DateLike,
    end: DateLike,
    calendar: ReferenceCalendar | None = None,
) -> list[dict[str, int | str]]:
    """Fill daily rows; returns ``{"date", "count"}`` records."""
    return _fill_records(data, start, end, "day", calendar)


def fill_weekly(
    data: Any,
    start: DateLike,
    end: DateLike,
    calendar: ReferenceCalendar | None = None,
) -> list[dict[str, int | str]]:
    """Fill weekly rows; returns ``{"week_start", "count"}`` records."""
    return _fill_records(data, start, end, "week", calendar)


def fill_monthly(
    data: Any,
    start: DateLike,
    end: DateLike,
    calendar: ReferenceCalendar | None = None,
) -> list[dict[str, int | str]]:
    """Fill monthly rows; returns ``{"month_start", "count"}`` records."""
    return _fill_records(data, start, end, "month", calendar)


def to_frame(series: list[SeriesPoint]) -> pd.DataFrame:
    """Dense series as a DataFrame with ``ds`` (datetime) and ``count``."""
    if not series:
        return pd.DataFrame(
            {"ds": pd.Series([], dtype="datetime64[ns]"), "count": pd.Series([], dtype="int64")}
        )
    return pd.DataFrame(
        {
            "ds": pd.to_datetime([point.key for point in series], format="%Y-%m-%d"),
            "count": pd.Series([point.count for point in series], dtype="int64"),
        }
    )


__all__ = [
    "fill_series",
    "fill_daily",
    "fill_weekly",
    "fill_monthly",
    "to_frame",
]

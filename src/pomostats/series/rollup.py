"""Roll monthly buckets up into calendar years.

The all-time view has no bounded range, so monthly rows are not filled;
years with no data simply do not appear.
"""

from __future__ import annotations

from typing import Any

from pomostats.core.types import SeriesPoint
from pomostats.series.rows import coerce_rows


def rollup_by_year(monthly: Any) -> list[SeriesPoint]:
    """Sum monthly counts per year, keyed by January 1st, ascending."""
    totals: dict[int, int] = {}
    for row in coerce_rows(monthly, "month"):
        year = int(row.key[:4])
        totals[year] = totals.get(year, 0) + row.count
    return [SeriesPoint(key=f"{year:04d}-01-01", count=totals[year]) for year in sorted(totals)]


__all__ = ["rollup_by_year"]

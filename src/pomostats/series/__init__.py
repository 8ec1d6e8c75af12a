"""Series module for pomostats.

Turns sparse backend aggregates into dense chart series.
"""

from .fill import fill_daily, fill_monthly, fill_series, fill_weekly, to_frame
from .rollup import rollup_by_year
from .rows import SparseRow, coerce_rows

__all__ = [
    # Filling
    "fill_series",
    "fill_daily",
    "fill_weekly",
    "fill_monthly",
    "to_frame",
    # Rollup
    "rollup_by_year",
    # Row contract
    "SparseRow",
    "coerce_rows",
]

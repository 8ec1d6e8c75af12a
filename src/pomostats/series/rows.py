"""Row contract for sparse backend aggregates.

Aggregation RPCs return rows such as ``{"date": "2026-01-27", "count": 5}``,
``{"week_start": ..., "count": ...}`` or ``{"month_start": ..., "count": ...}``.
Counts sometimes arrive as numeric strings (Postgres bigint) and keys
sometimes arrive as full timestamps; both are normalized here.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

import pandas as pd
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from pomostats.core.errors import EContractViolation
from pomostats.core.types import KEY_COLUMNS, SeriesPoint
from pomostats.time.keys import normalize_key

# Columns accepted as the bucket key, in lookup order after the
# granularity's own column.
_KEY_FALLBACKS: tuple[str, ...] = ("key", "date", "week_start", "month_start", "ds")


class SparseRow(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    key: str
    count: int = Field(..., ge=0)

    @field_validator("key", mode="before")
    @classmethod
    def _strip_time(cls, value: Any) -> str:
        if value is None:
            raise ValueError("bucket key is missing")
        return normalize_key(value)


def _key_column(columns: Iterable[str], granularity: str | None) -> str | None:
    available = set(columns)
    preferred = KEY_COLUMNS.get(granularity or "", None)
    candidates = ((preferred,) if preferred else ()) + _KEY_FALLBACKS
    for name in candidates:
        if name in available:
            return name
    return None


def _as_pair(item: Any, granularity: str | None) -> dict[str, Any]:
    if isinstance(item, SeriesPoint):
        return {"key": item.key, "count": item.count}
    if isinstance(item, Mapping):
        column = _key_column(item.keys(), granularity)
        return {
            "key": item.get(column) if column else None,
            "count": item.get("count"),
        }
    if isinstance(item, (tuple, list)) and len(item) == 2:
        return {"key": item[0], "count": item[1]}
    raise EContractViolation(
        "Unsupported sparse row type",
        context={"type": type(item).__name__},
    )


def coerce_rows(sparse: Any, granularity: str | None = None) -> list[SparseRow]:
    """Validate sparse rows from any supported shape.

    Accepts a DataFrame, or an iterable of mappings, ``(key, count)`` pairs
    or ``SeriesPoint`` objects. ``None`` is treated as no rows.

    Raises:
        EContractViolation: If a row has no key, a negative count, or a
            count that is not an integer
    """
    if sparse is None:
        return []

    if isinstance(sparse, pd.DataFrame):
        column = _key_column(sparse.columns, granularity)
        if column is None or "count" not in sparse.columns:
            raise EContractViolation(
                "DataFrame needs a bucket key column and a count column",
                context={"columns": list(sparse.columns)},
            )
        items: Iterable[Any] = zip(sparse[column].tolist(), sparse["count"].tolist())
    else:
        items = sparse

    rows: list[SparseRow] = []
    for index, item in enumerate(items):
        pair = _as_pair(item, granularity)
        try:
            rows.append(SparseRow(**pair))
        except ValidationError as e:
            raise EContractViolation(
                f"Invalid sparse row at index {index}",
                context={"row": pair, "errors": e.errors(include_url=False)},
            ) from e
    return rows


__all__ = ["SparseRow", "coerce_rows"]

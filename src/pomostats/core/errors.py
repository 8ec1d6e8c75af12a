"""Core error types with rich context.

pomostats raises few errors: malformed date keys and malformed backend
rows. Everything else (reversed ranges, missing buckets, duplicate keys)
has a defined fallback instead of an error.
"""

from __future__ import annotations

from typing import Any


class PomoStatsError(Exception):
    """Base exception with rich context.

    Subclasses only pin ``error_code`` and a default ``fix_hint``; callers
    attach whatever ``context`` helps to reproduce the failure.
    """

    error_code: str = "E_UNKNOWN"
    fix_hint: str = ""

    def __init__(
        self,
        message: str,
        context: dict[str, Any] | None = None,
        fix_hint: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.context = context or {}
        if fix_hint:
            self.fix_hint = fix_hint

    def __str__(self) -> str:
        parts = [f"[{self.error_code}] {self.message}"]
        if self.context:
            parts.append(f"(context: {self.context})")
        if self.fix_hint:
            parts.append(f"[hint: {self.fix_hint}]")
        return " ".join(parts)


class EInvalidFormat(PomoStatsError):
    """Date key is malformed or names an impossible calendar date."""

    error_code = "E_INVALID_FORMAT"
    fix_hint = "Date keys must be YYYY-MM-DD and name a real calendar day"


class EContractViolation(PomoStatsError):
    """Backend rows violate the sparse series contract."""

    error_code = "E_CONTRACT_VIOLATION"
    fix_hint = "Each row needs a date key (date/week_start/month_start) and a count >= 0"


ERROR_REGISTRY: dict[str, type[PomoStatsError]] = {
    "E_INVALID_FORMAT": EInvalidFormat,
    "E_CONTRACT_VIOLATION": EContractViolation,
}


def get_error_class(error_code: str) -> type[PomoStatsError]:
    """Get error class by code."""
    return ERROR_REGISTRY.get(error_code, PomoStatsError)


__all__ = [
    "PomoStatsError",
    "EInvalidFormat",
    "EContractViolation",
    "ERROR_REGISTRY",
    "get_error_class",
]

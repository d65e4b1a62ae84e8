"""Canonical error-code taxonomy for grant propagation planning."""

from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Bounded canonical error codes for external contracts and observability."""

    VALIDATION_ERROR = "VALIDATION_ERROR"
    NOT_FOUND = "NOT_FOUND"
    NOT_COORDINATOR = "NOT_COORDINATOR"
    MALFORMED_PRIVILEGE_LIST = "MALFORMED_PRIVILEGE_LIST"
    INTERNAL_ERROR = "INTERNAL_ERROR"


_CODE_GROUPS: dict[ErrorCode, str] = {
    ErrorCode.VALIDATION_ERROR: "VALIDATION",
    ErrorCode.NOT_FOUND: "CATALOG",
    ErrorCode.NOT_COORDINATOR: "ROLE",
    ErrorCode.MALFORMED_PRIVILEGE_LIST: "INTERNAL",
    ErrorCode.INTERNAL_ERROR: "INTERNAL",
}


def parse_error_code(
    value: Any,
    *,
    fallback: ErrorCode = ErrorCode.INTERNAL_ERROR,
) -> ErrorCode:
    """Parse string-like values to `ErrorCode` with safe fallback."""
    if isinstance(value, ErrorCode):
        return value
    if value is None:
        return fallback
    try:
        return ErrorCode(str(value).strip())
    except ValueError:
        return fallback


def error_code_group(value: Any) -> str:
    """Return a stable coarse grouping for telemetry dimensions."""
    parsed = parse_error_code(value)
    return _CODE_GROUPS.get(parsed, "INTERNAL")

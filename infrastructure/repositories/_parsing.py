"""Coercion helpers for upstream JSON, where any numeric field may be null."""
from typing import Any, Optional

# Failures a single malformed payload item can raise while being parsed.
PARSE_ERRORS = (KeyError, TypeError, ValueError)


def as_int(value: Any, default: int = 0) -> int:
    if value is None:
        return default
    return int(value)


def as_optional_int(value: Any) -> Optional[int]:
    return None if value is None else int(value)


def as_str(value: Any, default: str = "") -> str:
    return default if value is None else str(value)

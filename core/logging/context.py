from __future__ import annotations

import contextvars
import logging
from typing import Any, Dict

# Fields attached to every record emitted in the current task, e.g. account_id.
_fields: contextvars.ContextVar[Dict[str, Any]] = contextvars.ContextVar("log_fields", default={})


def get_context() -> Dict[str, Any]:
    return dict(_fields.get())


def _merged(values: Dict[str, Any]) -> Dict[str, Any]:
    current = dict(_fields.get())
    current.update({k: v for k, v in values.items() if v is not None})
    return current


def bind(**values: Any) -> None:
    _fields.set(_merged(values))


def unbind(*keys: str) -> None:
    current = dict(_fields.get())
    for key in keys:
        current.pop(key, None)
    _fields.set(current)


class context:
    """Scope fields to a ``with`` block; the previous fields come back on exit."""

    def __init__(self, **values: Any) -> None:
        self._values = values
        self._token: contextvars.Token | None = None

    def __enter__(self) -> Dict[str, Any]:
        fields = _merged(self._values)
        self._token = _fields.set(fields)
        return fields

    def __exit__(self, exc_type, exc, tb) -> bool:
        if self._token is not None:
            _fields.reset(self._token)
            self._token = None
        return False


class ContextFilter(logging.Filter):
    """Snapshot the bound fields onto the record before it leaves the emitting thread."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "log_context"):
            record.log_context = get_context()
        return True

"""Structured logging: context binding, formatters and bootstrap."""
from .config import bootstrap_logging, shutdown_logging
from .context import ContextFilter, bind, context, get_context, unbind
from .logger import LogLevel, StructuredLogger, get_logger, register_levels

register_levels()

__all__ = [
    "bootstrap_logging",
    "shutdown_logging",
    "ContextFilter",
    "bind",
    "context",
    "get_context",
    "unbind",
    "LogLevel",
    "StructuredLogger",
    "get_logger",
]

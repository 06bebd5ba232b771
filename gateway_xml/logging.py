"""Logging setup for the codec.

The encoder and decoder pass `log_extra()` with every record, so a caller that
sets a correlation id (for example the gateway request id) before encoding a
request or decoding a response gets it attached to the codec's log lines.
"""
from __future__ import annotations

import logging
import sys
from contextvars import ContextVar
from typing import Any, TextIO

_correlation_id: ContextVar[str | None] = ContextVar("correlation_id", default=None)


def set_correlation_id(value: str | None) -> None:
    """Tag codec log records in the current context; `None` clears the tag."""
    _correlation_id.set(value)


def get_correlation_id() -> str | None:
    return _correlation_id.get()


class CorrelationIdFilter(logging.Filter):
    """Stamp every record with the current correlation id (`-` when unset)."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not getattr(record, "correlation_id", None):
            record.correlation_id = get_correlation_id() or "-"
        return True


def configure_logging(level: str = "INFO", stream: TextIO | None = None) -> None:
    """Send log records from the codec and its callers to `stream` (stdout by default)."""
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    # Replace existing handlers to avoid duplicate lines
    root_logger.handlers.clear()

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setLevel(getattr(logging, level.upper(), logging.INFO))
    handler.addFilter(CorrelationIdFilter())
    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)s | %(correlation_id)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handler.setFormatter(formatter)

    root_logger.addHandler(handler)


def log_extra() -> dict[str, Any]:
    """`extra=` payload for codec log calls, empty when no id is set."""
    cid = get_correlation_id()
    return {"correlation_id": cid} if cid else {}


__all__ = [
    "CorrelationIdFilter",
    "configure_logging",
    "get_correlation_id",
    "log_extra",
    "set_correlation_id",
]

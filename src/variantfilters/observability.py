"""Observability: structured logs (entry_point, filter_count, latency_ms)."""

from __future__ import annotations

import logging
from typing import Any

_LOGGER = logging.getLogger("variantfilters")


def get_logger(name: str | None = None) -> logging.Logger:
    if name:
        return _LOGGER.getChild(name)
    return _LOGGER


def configure_logging(level: str = "INFO") -> None:
    """Attach a stderr handler to the package logger (idempotent)."""
    _LOGGER.setLevel(level.upper())
    if _LOGGER.handlers:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(asctime)s | %(levelname)s | %(name)s | %(message)s"))
    _LOGGER.addHandler(handler)


def log_filters_built(
    entry_point: str,
    filter_count: int,
    latency_ms: float,
    extra: dict[str, Any] | None = None,
) -> None:
    """Emit one structured log line for a completed filter build."""
    payload: dict[str, Any] = {
        "entry_point": entry_point,
        "filter_count": filter_count,
        "latency_ms": round(latency_ms, 2),
    }
    if extra:
        payload.update(extra)
    _LOGGER.info("filters_built", extra=payload)

"""Logging and latency metrics for store operations.

Store loggers stamp ``table``, ``op``, ``key`` and ``duration_ms`` on their
records; ``StructuredFormatter`` writes them as top-level JSON fields.
Operation latencies go to callbacks added with ``register_metric_callback``.
"""

import json
import logging
import sys
import time
from collections.abc import MutableMapping
from datetime import datetime, timezone
from typing import Any, Callable

STORE_FIELDS = ("table", "op", "key", "duration_ms")


class StoreLogger(logging.LoggerAdapter):
    """Logger adapter that binds store fields to every record.

    Fields given to ``get_logger`` (usually ``table``) are merged with the
    per-call ``extra``; per-call values win.
    """

    def process(self, msg: Any, kwargs: MutableMapping[str, Any]) -> tuple[Any, MutableMapping[str, Any]]:
        kwargs["extra"] = {**self.extra, **kwargs.get("extra", {})}
        return msg, kwargs


class StructuredFormatter(logging.Formatter):
    """Formats log records as one JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for name in STORE_FIELDS:
            value = getattr(record, name, None)
            if value is not None:
                entry[name] = value
        if record.exc_info and record.exc_info[0]:
            entry["error"] = {
                "type": record.exc_info[0].__name__,
                "message": str(record.exc_info[1]),
            }
        return json.dumps(entry, default=str)


class Timer:
    """Context manager measuring wall time of a block.

    Example:
        with Timer() as t:
            client.get_item(...)
        emit_timer("dynamokv.dynamodb.get_item", t.duration_ms)
    """

    def __init__(self) -> None:
        self.start_time: float = 0
        self.end_time: float = 0

    @property
    def duration_ms(self) -> float:
        return (self.end_time - self.start_time) * 1000

    def __enter__(self) -> "Timer":
        self.start_time = time.perf_counter()
        return self

    def __exit__(self, *args: Any) -> None:
        self.end_time = time.perf_counter()


# Receives (metric name, duration in ms, labels)
MetricCallback = Callable[[str, float, dict[str, Any]], None]

_metric_callbacks: list[MetricCallback] = []


def register_metric_callback(callback: MetricCallback) -> None:
    """Register a callback to receive operation latencies."""
    _metric_callbacks.append(callback)


def emit_timer(name: str, duration_ms: float, labels: dict[str, Any] | None = None) -> None:
    """Report an operation latency to every registered callback."""
    labels = labels or {}
    for callback in _metric_callbacks:
        try:
            callback(name, duration_ms, labels)
        except Exception:
            pass  # Metric sinks never fail a store operation


def configure_logging(level: str | int = "INFO", format: str = "json") -> None:
    """Send ``dynamokv`` logs to stdout.

    Args:
        level: Level name ("debug", "INFO", ...) or number
        format: "json" for StructuredFormatter, "text" for plain lines
    """
    package_logger = logging.getLogger("dynamokv")
    package_logger.setLevel(level.upper() if isinstance(level, str) else level)
    package_logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    if format == "json":
        handler.setFormatter(StructuredFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        ))
    package_logger.addHandler(handler)


def get_logger(name: str, **fields: Any) -> StoreLogger:
    """Get a logger for a module, optionally bound to store fields.

    Example:
        logger = get_logger(__name__, table="sessions")
        logger.debug("DynamoDB call", extra={"op": "put_item", "duration_ms": 4.2})
    """
    return StoreLogger(logging.getLogger(name), fields)

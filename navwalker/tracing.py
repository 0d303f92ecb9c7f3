"""Structured logging helpers for render passes."""

from __future__ import annotations

import json
import logging
import time
from contextlib import contextmanager
from typing import Any, Dict, Iterator, Optional

__all__ = ["trace", "log_event", "safe_json"]


def safe_json(value: Any) -> Any:
    """Return ``value`` converted into a JSON-serialisable structure."""

    if value is None or isinstance(value, (str, int, float, bool)):
        return value

    if isinstance(value, (list, tuple, set, frozenset)):
        return [safe_json(item) for item in value]

    if isinstance(value, dict):
        return {str(key): safe_json(val) for key, val in value.items()}

    if hasattr(value, "model_dump") and callable(getattr(value, "model_dump")):
        return safe_json(value.model_dump())

    if hasattr(value, "to_dict") and callable(getattr(value, "to_dict")):
        return safe_json(value.to_dict())

    return repr(value)


def log_event(
    logger: logging.Logger,
    level: int,
    event: str,
    *,
    exc_info: bool | BaseException | None = None,
    **fields: Any,
) -> None:
    """Emit a structured log line encoded as JSON."""

    if not logger.isEnabledFor(level):
        return

    payload: Dict[str, Any] = {"event": event}
    payload.update({key: safe_json(value) for key, value in fields.items() if value is not None})

    logger.log(level, json.dumps(payload, ensure_ascii=False, sort_keys=True), exc_info=exc_info)


@contextmanager
def trace(name: str, *, logger: Optional[logging.Logger] = None, **fields: Any) -> Iterator[Dict[str, Any]]:
    """Log ``trace.start``/``trace.end`` around a block, with its duration.

    The yielded dictionary is merged into the ``trace.end`` event, letting the
    block report results such as the size of the generated markup.
    """

    logger = logger or logging.getLogger("navwalker.trace")
    start_time = time.perf_counter()
    base_fields = {"trace": name, **fields}
    log_event(logger, logging.DEBUG, "trace.start", **base_fields)
    results: Dict[str, Any] = {}
    try:
        yield results
    except Exception as exc:
        duration_ms = round((time.perf_counter() - start_time) * 1000, 2)
        log_event(
            logger,
            logging.ERROR,
            "trace.error",
            exc_info=True,
            duration_ms=duration_ms,
            error=repr(exc),
            **base_fields,
        )
        raise
    duration_ms = round((time.perf_counter() - start_time) * 1000, 2)
    end_fields = dict(base_fields)
    end_fields.update(results)
    end_fields["duration_ms"] = duration_ms
    log_event(logger, logging.DEBUG, "trace.end", **end_fields)

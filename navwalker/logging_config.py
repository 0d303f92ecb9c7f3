"""Logging setup for the navwalker command line and host applications."""

from __future__ import annotations

import logging
import sys
from typing import Optional


_LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def resolve_level(level: int | str) -> int:
    """Return the numeric logging level for ``level`` (``"debug"``, ``10``...)."""

    if isinstance(level, int):
        return level
    return getattr(logging, str(level).strip().upper(), logging.INFO)


def configure_logging(level: int | str = logging.INFO, stream: Optional[logging.Handler] = None) -> None:
    """Install a single formatted handler on the root logger.

    Parameters
    ----------
    level:
        Level name or number applied to the root logger.
    stream:
        Optional handler. When omitted a handler writing to ``sys.stderr`` is
        used so that rendered markup on stdout stays clean.
    """

    root_logger = logging.getLogger()
    handler: logging.Handler = stream if stream is not None else logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT))

    # Repeated calls (tests, re-entrant CLIs) must not duplicate log lines.
    for existing in list(root_logger.handlers):
        root_logger.removeHandler(existing)

    root_logger.setLevel(resolve_level(level))
    root_logger.addHandler(handler)


__all__ = ["configure_logging", "resolve_level"]

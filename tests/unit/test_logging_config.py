"""Tests for :mod:`navwalker.logging_config`."""

from __future__ import annotations

import logging
from io import StringIO

from navwalker.logging_config import configure_logging, resolve_level


def test_configure_logging_sets_handler() -> None:
    """Given a custom stream When configure_logging is called Then logs are formatted and directed there."""

    stream = StringIO()
    handler = logging.StreamHandler(stream)

    configure_logging(level="debug", stream=handler)

    logging.getLogger("demo").debug("hello")

    contents = stream.getvalue()
    assert "hello" in contents
    assert "| DEBUG | demo |" in contents


def test_configure_logging_replaces_previous_handlers() -> None:
    first = StringIO()
    second = StringIO()

    configure_logging(stream=logging.StreamHandler(first))
    configure_logging(stream=logging.StreamHandler(second))
    logging.getLogger("demo").info("once")

    assert first.getvalue() == ""
    assert second.getvalue().count("once") == 1


def test_resolve_level() -> None:
    assert resolve_level("warning") == logging.WARNING
    assert resolve_level(15) == 15
    assert resolve_level("nonsense") == logging.INFO

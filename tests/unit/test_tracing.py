"""Tests for :mod:`navwalker.tracing`."""

from __future__ import annotations

import json
import logging

import pytest

from navwalker.models import MenuItem, RenderOptions
from navwalker.tracing import log_event, safe_json, trace


def test_safe_json_serialises_dataclasses_and_models() -> None:
    payload = safe_json({"item": MenuItem(id=1, title="Home"), "options": RenderOptions(), "tags": {"a"}})

    assert payload["item"]["title"] == "Home"
    assert payload["options"]["menu_class"] == "menu"
    assert payload["tags"] == ["a"]
    assert safe_json(object()).startswith("<object")


def test_log_event_emits_json(caplog: pytest.LogCaptureFixture) -> None:
    """Given structured fields When log_event is called Then a JSON encoded message is logged."""

    logger = logging.getLogger("test")
    with caplog.at_level(logging.INFO):
        log_event(logger, logging.INFO, "test.event", answer=42, skipped=None)

    assert json.loads(caplog.records[0].getMessage()) == {"event": "test.event", "answer": 42}


def test_log_event_skips_disabled_levels(caplog: pytest.LogCaptureFixture) -> None:
    logger = logging.getLogger("test.quiet")
    with caplog.at_level(logging.WARNING):
        log_event(logger, logging.DEBUG, "test.hidden")

    assert not caplog.records


def test_trace_context_records_duration_and_results(caplog: pytest.LogCaptureFixture) -> None:
    logger = logging.getLogger("trace-test")
    with caplog.at_level(logging.DEBUG):
        with trace("unit", logger=logger, menu="primary") as span:
            span["size"] = 10

    events = [json.loads(record.getMessage()) for record in caplog.records]
    assert [event["event"] for event in events] == ["trace.start", "trace.end"]
    assert events[1]["size"] == 10
    assert events[1]["menu"] == "primary"
    assert "duration_ms" in events[1]


def test_trace_logs_and_reraises_errors(caplog: pytest.LogCaptureFixture) -> None:
    logger = logging.getLogger("trace-error")
    with caplog.at_level(logging.DEBUG):
        with pytest.raises(KeyError):
            with trace("unit", logger=logger):
                raise KeyError("missing")

    assert "trace.error" in caplog.records[-1].getMessage()
    assert caplog.records[-1].levelno == logging.ERROR

"""Tests for the JSON log formatter."""

import json
import logging

from babysleep.core.observability import JSONFormatter, setup_logging


def _record(msg: str, **extra) -> logging.LogRecord:
    record = logging.LogRecord("babysleep.test", logging.INFO, __file__, 1, msg, None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestJSONFormatter:
    def test_basic_fields(self):
        payload = json.loads(JSONFormatter().format(_record("hello")))
        assert payload["level"] == "INFO"
        assert payload["logger"] == "babysleep.test"
        assert payload["message"] == "hello"
        assert "timestamp" in payload

    def test_known_extras_included(self):
        payload = json.loads(JSONFormatter().format(_record("started", session_id=7, state="sleeping")))
        assert payload["session_id"] == 7
        assert payload["state"] == "sleeping"

    def test_unknown_extras_ignored(self):
        payload = json.loads(JSONFormatter().format(_record("x", secret="nope")))
        assert "secret" not in payload


class TestSetupLogging:
    def test_json_format_installs_single_handler(self):
        root = logging.getLogger()
        saved_handlers, saved_level = list(root.handlers), root.level
        try:
            setup_logging("debug", "json")
            assert len(root.handlers) == 1
            assert isinstance(root.handlers[0].formatter, JSONFormatter)
            assert root.level == logging.DEBUG
        finally:
            root.handlers[:] = saved_handlers
            root.setLevel(saved_level)

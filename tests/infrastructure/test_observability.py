"""Structured Logging: JSON formatter fields and idempotent setup."""

import json
import logging

from users_api.infrastructure.observability import JSONFormatter, setup_logging


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "users_api.test", logging.INFO, __file__, 1, "hello %s", ("world",), None,
    )
    record.__dict__.update(extra)
    return record


def test_json_formatter_base_fields():
    log = json.loads(JSONFormatter().format(_record()))
    assert log["level"] == "INFO"
    assert log["logger"] == "users_api.test"
    assert log["message"] == "hello world"
    assert "timestamp" in log


def test_json_formatter_surfaces_known_extras_only():
    log = json.loads(JSONFormatter().format(_record(user_id=7, unrelated="x")))
    assert log["user_id"] == 7
    assert "unrelated" not in log


def test_setup_logging_does_not_stack_handlers():
    setup_logging("DEBUG", "json")
    setup_logging("INFO", "json")
    ours = [h for h in logging.root.handlers if isinstance(h.formatter, JSONFormatter)]
    try:
        assert len(ours) == 1
        assert logging.root.level == logging.INFO
    finally:
        for handler in ours:
            logging.root.removeHandler(handler)

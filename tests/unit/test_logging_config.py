"""Unit tests for logging configuration."""

from __future__ import annotations

import json
import logging
import sys

import pytest

from api_resp.logging_config import JsonFormatter, configure_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


def _make_record(message: str, **extra: object) -> logging.LogRecord:
    record = logging.LogRecord(
        name="api_resp.test",
        level=logging.ERROR,
        pathname="test.py",
        lineno=1,
        msg=message,
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestJsonFormatter:
    def test_required_fields(self):
        parsed = json.loads(JsonFormatter().format(_make_record("hello")))
        assert parsed["level"] == "ERROR"
        assert parsed["logger"] == "api_resp.test"
        assert parsed["message"] == "hello"
        assert "timestamp" in parsed

    def test_transform_fields(self):
        record = _make_record("failed", err_log="执行出错", error_code=-1)
        parsed = json.loads(JsonFormatter().format(record))
        assert parsed["err_log"] == "执行出错"
        assert parsed["error_code"] == -1

    def test_optional_fields_absent_by_default(self):
        parsed = json.loads(JsonFormatter().format(_make_record("plain")))
        assert "err_log" not in parsed
        assert "error_code" not in parsed
        assert "exception" not in parsed

    def test_exception_included(self):
        try:
            raise ValueError("kaboom")
        except ValueError:
            record = _make_record("with exc")
            record.exc_info = sys.exc_info()
        parsed = json.loads(JsonFormatter().format(record))
        assert "ValueError: kaboom" in parsed["exception"]

    def test_sensitive_values_redacted(self):
        parsed = json.loads(JsonFormatter().format(_make_record("login password=hunter2 ok")))
        assert "hunter2" not in parsed["message"]
        assert "[REDACTED]" in parsed["message"]


class TestConfigureLogging:
    def test_installs_single_json_handler(self, restore_root_logger):
        configure_logging("warning")
        root = restore_root_logger
        assert root.level == logging.WARNING
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, JsonFormatter)

    def test_plain_text_when_disabled(self, restore_root_logger):
        configure_logging("INFO", json_output=False)
        formatter = restore_root_logger.handlers[0].formatter
        assert not isinstance(formatter, JsonFormatter)

    def test_defaults_from_settings(self, restore_root_logger, monkeypatch: pytest.MonkeyPatch):
        from api_resp.config.settings import get_settings

        monkeypatch.setenv("API_RESP_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("API_RESP_LOG_JSON", "false")
        get_settings.cache_clear()

        configure_logging()

        root = restore_root_logger
        assert root.level == logging.DEBUG
        assert not isinstance(root.handlers[0].formatter, JsonFormatter)

    def test_repeated_calls_do_not_duplicate_handlers(self, restore_root_logger):
        configure_logging("INFO")
        configure_logging("INFO")
        assert len(restore_root_logger.handlers) == 1

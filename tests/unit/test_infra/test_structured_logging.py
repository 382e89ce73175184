"""Unit tests for structured logging helpers."""

from __future__ import annotations

import json
import logging
import sys

import pytest

from skyvault.infra.logging import (
    ContextInjectingFilter,
    JSONFormatter,
    clear_log_context,
    get_lazy_logger,
    get_log_context,
    set_log_context,
)


def _record(msg: str = "Listed files", **extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="skyvault.test",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg=msg,
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


@pytest.fixture(autouse=True)
def _clean_context():
    clear_log_context()
    yield
    clear_log_context()


class TestLogContext:
    def test_set_merges_fields(self):
        set_log_context(request_id="req-1")
        set_log_context(owner_id="owner-1")

        assert get_log_context() == {"request_id": "req-1", "owner_id": "owner-1"}

    def test_clear_drops_fields(self):
        set_log_context(request_id="req-1")
        clear_log_context()

        assert get_log_context() == {}

    def test_filter_copies_context_without_overwriting(self):
        set_log_context(request_id="req-1", operation="from-context")
        record = _record(operation="from-record")

        assert ContextInjectingFilter().filter(record) is True
        assert record.request_id == "req-1"
        assert record.operation == "from-record"


class TestJSONFormatter:
    def test_one_json_object_per_record(self):
        formatter = JSONFormatter(static={"service": "skyvault"})

        line = formatter.format(_record("two\nlines", request_id="req-1", items=3))
        data = json.loads(line)

        assert "\n" not in line
        assert data["level"] == "INFO"
        assert data["logger"] == "skyvault.test"
        assert data["message"] == "two\nlines"
        assert data["service"] == "skyvault"
        assert data["request_id"] == "req-1"
        assert data["items"] == 3
        assert data["timestamp"].endswith("Z")
        assert "trace_id" not in data

    def test_exception_is_rendered(self):
        formatter = JSONFormatter()
        try:
            raise RuntimeError("boom")
        except RuntimeError:
            record = logging.LogRecord("skyvault.test", logging.ERROR, __file__, 1, "failed", (), sys.exc_info())

        data = json.loads(formatter.format(record))

        assert "RuntimeError: boom" in data["exception"]


class TestLazyLogger:
    def test_callable_is_not_evaluated_when_level_disabled(self, caplog: pytest.LogCaptureFixture):
        calls: list[int] = []
        logger = get_lazy_logger("skyvault.test.lazy")

        with caplog.at_level(logging.INFO, logger="skyvault.test.lazy"):
            logger.debug(lambda: calls.append(1) or "expensive")

        assert calls == []
        assert caplog.records == []

    def test_callable_is_evaluated_when_level_enabled(self, caplog: pytest.LogCaptureFixture):
        logger = get_lazy_logger("skyvault.test.lazy")

        with caplog.at_level(logging.DEBUG, logger="skyvault.test.lazy"):
            logger.debug(lambda: "page of 3 items")

        assert [record.getMessage() for record in caplog.records] == ["page of 3 items"]

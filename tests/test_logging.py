"""Tests for the structured logging system (iou_kernel/logging_config.py)."""

import json
import logging
from datetime import date
from decimal import Decimal
from io import StringIO
from uuid import uuid4

import pytest

from iou_kernel.domain.report import ReportType
from iou_kernel.logging_config import (
    LogContext,
    StructuredFormatter,
    configure_logging,
    get_logger,
    reset_logging,
)


@pytest.fixture(autouse=True)
def _clean_logging():
    """Reset logging state between tests."""
    reset_logging()
    LogContext.clear()
    yield
    LogContext.clear()
    reset_logging()


def _make_handler() -> tuple[logging.Handler, StringIO]:
    stream = StringIO()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(StructuredFormatter())
    return handler, stream


def _parse_log(stream: StringIO) -> dict:
    """Parse the first JSON log line from a stream."""
    line = stream.getvalue().strip().split("\n")[0]
    return json.loads(line)


def _parse_all_logs(stream: StringIO) -> list[dict]:
    lines = stream.getvalue().strip().split("\n")
    return [json.loads(line) for line in lines if line]


# ---------------------------------------------------------------------------
# StructuredFormatter tests
# ---------------------------------------------------------------------------


class TestStructuredFormatter:
    """Tests for JSON log output format."""

    def test_basic_json_output(self):
        handler, stream = _make_handler()
        configure_logging(handler=handler)
        get_logger("test").info("hello")

        record = _parse_log(stream)
        assert record["level"] == "INFO"
        assert record["message"] == "hello"
        assert record["logger"] == "iou_kernel.test"
        assert "ts" in record

    def test_extra_fields_included(self):
        handler, stream = _make_handler()
        configure_logging(handler=handler)
        get_logger("test").info("derived", extra={"is_loading": False, "kind": "merchant"})

        record = _parse_log(stream)
        assert record["is_loading"] is False
        assert record["kind"] == "merchant"

    def test_context_fields_included(self):
        handler, stream = _make_handler()
        configure_logging(handler=handler)
        LogContext.set(correlation_id="abc-123", transaction_id="txn-9")
        get_logger("test").info("test_msg")

        record = _parse_log(stream)
        assert record["correlation_id"] == "abc-123"
        assert record["transaction_id"] == "txn-9"

    def test_preview_exception_code_extracted(self):
        handler, stream = _make_handler()
        configure_logging(handler=handler)
        from iou_kernel.exceptions import InvalidPreviewConfigError

        try:
            raise InvalidPreviewConfigError("locale", "cannot be empty")
        except InvalidPreviewConfigError:
            get_logger("test").error("config_error", exc_info=True)

        record = _parse_log(stream)
        assert record["exc_code"] == "INVALID_PREVIEW_CONFIG"
        assert record["exc_type"] == "InvalidPreviewConfigError"
        assert record["exc_field"] == "locale"
        assert record["exc_reason"] == "cannot be empty"
        assert "traceback" in record

    def test_non_json_types_serialized(self):
        handler, stream = _make_handler()
        configure_logging(handler=handler)
        uid = uuid4()
        get_logger("test").info(
            "typed",
            extra={
                "uid": uid,
                "amount": Decimal("25.00"),
                "created_on": date(2026, 3, 1),
                "report_type": ReportType.EXPENSE,
            },
        )

        record = _parse_log(stream)
        assert record["uid"] == str(uid)
        assert record["amount"] == "25.00"
        assert record["created_on"] == "2026-03-01"
        assert record["report_type"] == "expense"

    def test_valid_json_every_line(self):
        handler, stream = _make_handler()
        configure_logging(handler=handler)
        logger = get_logger("test")
        logger.info("first")
        logger.warning("second", extra={"k": "v"})
        logger.debug("third")

        logs = _parse_all_logs(stream)
        # default level is INFO, so the debug line is dropped
        assert len(logs) == 2


# ---------------------------------------------------------------------------
# LogContext tests
# ---------------------------------------------------------------------------


class TestLogContext:

    def test_set_and_get(self):
        LogContext.set(correlation_id="x", report_id="y")
        assert LogContext.get_all() == {"correlation_id": "x", "report_id": "y"}

    def test_clear(self):
        LogContext.set(correlation_id="x")
        LogContext.clear()
        assert LogContext.get_all() == {}

    def test_bind_restores_previous_value(self):
        LogContext.set(report_id="outer")
        with LogContext.bind(report_id="inner"):
            assert LogContext.get_all()["report_id"] == "inner"
        assert LogContext.get_all()["report_id"] == "outer"

    def test_bind_ignores_unknown_fields(self):
        with LogContext.bind(actor_id="a", not_a_field="z"):
            assert LogContext.get_all() == {"actor_id": "a"}
        assert LogContext.get_all() == {}


# ---------------------------------------------------------------------------
# configure_logging tests
# ---------------------------------------------------------------------------


class TestConfigureLogging:

    def test_idempotent(self):
        h1, _ = _make_handler()
        configure_logging(handler=h1)
        h2, _ = _make_handler()
        configure_logging(handler=h2)
        assert len(logging.getLogger("iou_kernel").handlers) == 1

    def test_get_logger_returns_child(self):
        assert get_logger("engines.preview").name == "iou_kernel.engines.preview"

    def test_engine_tracer_logger_inherits_config(self):
        handler, stream = _make_handler()
        configure_logging(handler=handler)
        logging.getLogger("iou_kernel.engines.tracer").info("IOU_ENGINE_TRACE")

        assert _parse_log(stream)["logger"] == "iou_kernel.engines.tracer"

"""
Tests for kafkaerr.shared.logging.
"""

import json
import logging
import sys

from rich.logging import RichHandler

from kafkaerr.config import LoggingSettings
from kafkaerr.shared.error_codes import ErrorCode
from kafkaerr.shared.errors import (
    FaultCode,
    FaultContext,
    LegacyBufferError,
    new,
    new_fatal,
)
from kafkaerr.shared.logging import (
    StructuredFormatter,
    log_error_value,
    log_fault,
    setup_from_settings,
    setup_structured_logger,
)


def _record(msg="Test message", level=logging.INFO, **extra):
    record = logging.LogRecord(
        name="test_logger",
        level=level,
        pathname="test.py",
        lineno=1,
        msg=msg,
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestStructuredFormatter:
    """StructuredFormatter tests."""

    def test_format_basic_log_record(self):
        """Test the base fields."""
        log_data = json.loads(StructuredFormatter().format(_record()))

        assert log_data["level"] == "INFO"
        assert log_data["logger"] == "test_logger"
        assert log_data["message"] == "Test message"
        assert "timestamp" in log_data
        assert "error_code" not in log_data

    def test_format_error_fields(self):
        """Test that error value extras are copied into the output."""
        record = _record(
            level=logging.ERROR,
            error_code=-185,
            error_name="_TIMED_OUT",
            fatal=False,
            txn_abortable=True,
            operation="commit",
            context={"topic": "orders"},
        )

        log_data = json.loads(StructuredFormatter().format(record))

        assert log_data["error_code"] == -185
        assert log_data["error_name"] == "_TIMED_OUT"
        assert log_data["fatal"] is False
        assert log_data["txn_abortable"] is True
        assert log_data["operation"] == "commit"
        assert log_data["context"] == {"topic": "orders"}

    def test_format_exception(self):
        """Test that exception text is included."""
        try:
            raise RuntimeError("boom")
        except RuntimeError:
            record = _record(level=logging.ERROR)
            record.exc_info = sys.exc_info()

        log_data = json.loads(StructuredFormatter().format(record))
        assert "RuntimeError: boom" in log_data["exception"]


class TestSetupStructuredLogger:
    """setup_structured_logger tests."""

    def test_rich_console_handler(self):
        """Test the default Rich console handler."""
        logger = setup_structured_logger("kafkaerr.test_rich", "DEBUG")

        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0], RichHandler)
        assert logger.propagate is False

    def test_json_console_handler(self):
        """Test JSON lines on the console."""
        logger = setup_structured_logger("kafkaerr.test_json", use_rich_console=False)

        assert isinstance(logger.handlers[0].formatter, StructuredFormatter)

    def test_repeated_setup_replaces_handlers(self):
        """Test that handlers do not accumulate."""
        setup_structured_logger("kafkaerr.test_repeat")
        logger = setup_structured_logger("kafkaerr.test_repeat")
        assert len(logger.handlers) == 1

    def test_file_handler_writes_json(self, tmp_path):
        """Test the JSON file handler."""
        log_file = tmp_path / "kafkaerr.log"
        logger = setup_structured_logger(
            "kafkaerr.test_file", log_file=str(log_file), console_output=False
        )

        logger.warning("written")
        for handler in logger.handlers:
            handler.flush()

        entry = json.loads(log_file.read_text(encoding="utf-8").splitlines()[0])
        assert entry["message"] == "written"
        assert entry["level"] == "WARNING"

    def test_setup_from_settings(self):
        """Test configuration from LoggingSettings."""
        settings = LoggingSettings(level="error", console_output=False)
        logger = setup_from_settings(settings, name="kafkaerr.test_settings")

        assert logger.level == logging.ERROR
        assert logger.handlers == []


class TestLogErrorValue:
    """log_error_value and log_fault tests."""

    def test_non_fatal_logged_as_warning(self, caplog):
        """Test level and extras for an ordinary error."""
        logger = logging.getLogger("kafkaerr.test_values")
        error = new(ErrorCode._TIMED_OUT, "retry %d of %d", 2, 5)

        with caplog.at_level(logging.DEBUG, logger="kafkaerr.test_values"):
            log_error_value(logger, error, operation="produce", context={"topic": "t"})

        record = caplog.records[-1]
        assert record.levelno == logging.WARNING
        assert record.getMessage() == "_TIMED_OUT: retry 2 of 5"
        assert record.error_code == -185
        assert record.operation == "produce"
        assert record.context == {"topic": "t"}
        assert error.consumed is False

    def test_fatal_logged_as_error(self, caplog):
        """Test that fatal errors are logged at ERROR."""
        logger = logging.getLogger("kafkaerr.test_values")

        with caplog.at_level(logging.DEBUG, logger="kafkaerr.test_values"):
            log_error_value(logger, new_fatal(ErrorCode._FENCED))

        record = caplog.records[-1]
        assert record.levelno == logging.ERROR
        assert record.fatal is True
        assert record.txn_abortable is False

    def test_log_fault(self, caplog):
        """Test fault logging with structured context."""
        logger = logging.getLogger("kafkaerr.test_values")
        fault = LegacyBufferError(
            FaultCode.LEGACY_BUFFER_INVALID,
            "errstr is read-only",
            FaultContext(operation="to_legacy"),
        )

        with caplog.at_level(logging.DEBUG, logger="kafkaerr.test_values"):
            log_fault(logger, fault)

        record = caplog.records[-1]
        assert record.levelno == logging.ERROR
        assert record.error_code == "LEGACY_BUFFER_INVALID"
        assert record.operation == "to_legacy"
        assert record.exc_info is None

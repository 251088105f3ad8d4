"""Testes de config.logging.

Cobre: configure_logging, get_logger, log_fallback, log_submission_recovery,
CorrelationIdFilter, create_json_formatter.
"""

from __future__ import annotations

import io
import json
import logging
from unittest.mock import MagicMock

import pytest

from config.logging import (
    FIELD_RENAME_MAP,
    RECOVERY_MARKER,
    REQUIRED_LOG_FIELDS,
    CorrelationIdFilter,
    configure_logging,
    create_json_formatter,
    get_logger,
    log_fallback,
    log_submission_recovery,
)
from config.logging.config import DEFAULT_SERVICE_NAME, VALID_LOG_LEVELS


def _record(msg: str = "msg", level: int = logging.INFO) -> logging.LogRecord:
    return logging.LogRecord(
        name="test",
        level=level,
        pathname="",
        lineno=0,
        msg=msg,
        args=(),
        exc_info=None,
    )


class TestConfigureLogging:
    """Testes para configure_logging."""

    def test_configure_logging_default_level(self) -> None:
        configure_logging()
        assert logging.getLogger().level == logging.INFO

    @pytest.mark.parametrize(
        ("level", "expected"),
        [("DEBUG", logging.DEBUG), ("warning", logging.WARNING), ("ERROR", logging.ERROR)],
    )
    def test_configure_logging_levels(self, level: str, expected: int) -> None:
        configure_logging(level=level)
        assert logging.getLogger().level == expected

    def test_configure_logging_invalid_level_raises(self) -> None:
        with pytest.raises(ValueError, match="Nível de log inválido"):
            configure_logging(level="LOUD")

    def test_configure_logging_replaces_handlers(self) -> None:
        root = logging.getLogger()
        root.handlers = [logging.NullHandler(), logging.NullHandler()]
        configure_logging()
        assert len(root.handlers) == 1

    def test_configure_logging_with_correlation_id_getter(self) -> None:
        configure_logging(correlation_id_getter=lambda: "custom-corr-id")
        handler = logging.getLogger().handlers[0]
        assert any(isinstance(f, CorrelationIdFilter) for f in handler.filters)

    def test_constants(self) -> None:
        assert {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"} == VALID_LOG_LEVELS
        assert DEFAULT_SERVICE_NAME == "ppp_form_relay"


class TestGetLogger:
    """Testes para get_logger."""

    def test_get_logger_same_name_returns_same_instance(self) -> None:
        logger = get_logger("app.services.dispatcher")
        assert isinstance(logger, logging.Logger)
        assert logger is get_logger("app.services.dispatcher")


class TestLogFallback:
    """Testes para log_fallback."""

    def test_log_fallback_basic(self) -> None:
        logger = MagicMock(spec=logging.Logger)
        log_fallback(logger, "admin_fallback")
        call_args = logger.info.call_args
        assert call_args[0] == ("Fallback applied for %s", "admin_fallback")
        extra = call_args[1]["extra"]
        assert extra == {"fallback_used": True, "component": "admin_fallback"}

    def test_log_fallback_with_reason_and_form(self) -> None:
        logger = MagicMock(spec=logging.Logger)
        log_fallback(logger, "admin_fallback", reason="primary_not_delivered", form_type="quote")
        extra = logger.info.call_args[1]["extra"]
        assert extra["reason"] == "primary_not_delivered"
        assert extra["form_type"] == "quote"


class TestLogSubmissionRecovery:
    """Testes para log_submission_recovery."""

    def test_emits_error_with_marker(self) -> None:
        logger = MagicMock(spec=logging.Logger)
        submission = {"name": "Bob", "timestamp": "2026-10-18T12:00:00.000Z"}

        log_submission_recovery(logger, "contact", submission)

        logger.error.assert_called_once()
        assert logger.error.call_args[0][0] == "submission_recovery"
        extra = logger.error.call_args[1]["extra"]
        assert extra["recovery_marker"] == RECOVERY_MARKER == "SUBMISSION_RECOVERY"
        assert extra["form_type"] == "contact"
        assert extra["submission"] == submission
        assert "labels" not in extra

    def test_includes_labels_when_present(self) -> None:
        logger = MagicMock(spec=logging.Logger)
        log_submission_recovery(logger, "quote", {}, labels={"serviceLabel": "Sublimation"})
        extra = logger.error.call_args[1]["extra"]
        assert extra["labels"] == {"serviceLabel": "Sublimation"}


class TestCorrelationIdFilter:
    """Testes para CorrelationIdFilter."""

    def test_filter_adds_correlation_id_from_getter(self) -> None:
        record = _record()
        assert CorrelationIdFilter("my_service", lambda: "corr-123").filter(record) is True
        assert record.correlation_id == "corr-123"
        assert record.service == "my_service"

    def test_filter_preserves_explicit_correlation_id(self) -> None:
        record = _record()
        record.correlation_id = "explicit-id"
        CorrelationIdFilter("svc", lambda: "from-getter").filter(record)
        assert record.correlation_id == "explicit-id"

    def test_filter_uses_empty_string_when_no_getter(self) -> None:
        record = _record()
        CorrelationIdFilter("service_name", None).filter(record)
        assert record.correlation_id == ""


class TestCreateJsonFormatter:
    """Testes para create_json_formatter e constantes."""

    def test_required_log_fields_content(self) -> None:
        expected = {"asctime", "levelname", "name", "message", "correlation_id", "service"}
        assert expected == REQUIRED_LOG_FIELDS

    def test_field_rename_map_content(self) -> None:
        assert FIELD_RENAME_MAP == {"levelname": "level", "name": "logger"}

    def test_json_formatter_renames_fields(self) -> None:
        formatter = create_json_formatter()
        record = _record("submission_received")
        record.correlation_id = "abc-123"
        record.service = "ppp_form_relay"

        payload = json.loads(formatter.format(record))

        assert payload["message"] == "submission_received"
        assert payload["level"] == "INFO"
        assert payload["logger"] == "test"
        assert payload["correlation_id"] == "abc-123"


class TestLoggingIntegration:
    """Testes de integração do sistema de logging."""

    def test_recovery_record_is_single_json_line(self) -> None:
        configure_logging(
            level="INFO",
            service_name="integration_test",
            correlation_id_getter=lambda: "int-test-001",
        )
        stream = io.StringIO()
        logging.getLogger().handlers[0].setStream(stream)

        log_submission_recovery(
            get_logger("integration.recovery"),
            "quote",
            {"firstName": "Zoë", "quantity": 3},
            labels={"timelineLabel": "Rush (3-5 days)"},
        )

        lines = stream.getvalue().strip().splitlines()
        assert len(lines) == 1
        payload = json.loads(lines[0])
        assert payload["recovery_marker"] == "SUBMISSION_RECOVERY"
        assert payload["service"] == "integration_test"
        assert payload["correlation_id"] == "int-test-001"
        assert payload["submission"] == {"firstName": "Zoë", "quantity": 3}
        assert payload["labels"] == {"timelineLabel": "Rush (3-5 days)"}
        assert "Zoë" in lines[0]

"""
Unit tests for the shared logging helpers.
"""

import json
import logging

import pytest

from appointment_scheduler.core.shared.logger import (
    ColoredFormatter,
    JSONFormatter,
    configure_logging,
    get_repository_logger,
    get_use_case_logger,
)


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


def _record(message: str = "hello", **extra) -> logging.LogRecord:
    record = logging.LogRecord("scheduler", logging.INFO, __file__, 10, message, None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


@pytest.mark.unit
class TestFormatters:
    """Tests for JSON and colored formatters."""

    def test_json_formatter_includes_context(self):
        output = json.loads(JSONFormatter().format(_record(extra_data={"appointment_id": "apt-1"})))

        assert output["level"] == "INFO"
        assert output["message"] == "hello"
        assert output["extra"] == {"appointment_id": "apt-1"}

    def test_colored_formatter_does_not_mutate_record(self):
        record = _record()

        text = ColoredFormatter("%(levelname)s %(message)s").format(record)

        assert "\033[32m" in text
        assert record.levelname == "INFO"


@pytest.mark.unit
class TestContextLogger:
    """Tests for ContextLogger."""

    def test_repository_logger_context(self, caplog):
        logger = get_repository_logger("appointments")

        with caplog.at_level(logging.WARNING, logger="repository.appointments"):
            logger.warning("Ignoring unknown status", status="archived")

        record = caplog.records[-1]
        assert record.extra_data == {
            "component": "repository",
            "repository": "appointments",
            "status": "archived",
        }

    def test_use_case_logger_binds_appointment(self, caplog):
        logger = get_use_case_logger("cancel_appointment").with_context(appointment_id="apt-1")

        with caplog.at_level(logging.INFO, logger="use_case.cancel_appointment"):
            logger.info("Cancelled appointment", staff_id="staff-a")

        assert logger.name == "use_case.cancel_appointment"
        assert caplog.records[-1].extra_data == {
            "component": "use_case",
            "operation": "cancel_appointment",
            "appointment_id": "apt-1",
            "staff_id": "staff-a",
        }

    def test_disabled_level_is_skipped(self, caplog):
        logger = get_use_case_logger("book_appointment")

        with caplog.at_level(logging.WARNING, logger="use_case.book_appointment"):
            logger.debug("Checking slot")

        assert caplog.records == []


@pytest.mark.unit
def test_configure_logging_json_with_file(restore_root_logger, tmp_path):
    log_file = tmp_path / "scheduler.log"

    configure_logging(level="DEBUG", format_type="json", log_file=str(log_file))

    handlers = restore_root_logger.handlers
    assert restore_root_logger.level == logging.DEBUG
    assert len(handlers) == 2
    assert all(isinstance(h.formatter, JSONFormatter) for h in handlers)
    handlers[1].close()

"""
Tests for logging configuration.
"""

import json
import logging
import pytest
import os
import sys

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from services.logging_config import (
    ContextLogger,
    DeadlineRunLogger,
    JsonFormatter,
    ReadableFormatter,
    configure_logging,
    entity_id_var,
    get_logger,
    log_performance,
    timed,
)


def _record(message="hello", **extra_data):
    record = logging.LogRecord(
        name="deadlines.test",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg=message,
        args=(),
        exc_info=None,
    )
    if extra_data:
        record.extra_data = extra_data
    return record


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


class TestFormatters:
    """Tests for log formatters."""

    def test_json_formatter(self):
        data = json.loads(JsonFormatter().format(_record(source="periodic", count=4)))
        assert data["message"] == "hello"
        assert data["level"] == "INFO"
        assert data["logger"] == "deadlines.test"
        assert data["source"] == "periodic"
        assert data["count"] == 4

    def test_json_formatter_includes_entity_context(self):
        token = entity_id_var.set("spac-001")
        try:
            data = json.loads(JsonFormatter().format(_record()))
        finally:
            entity_id_var.reset(token)
        assert data["entity_id"] == "spac-001"

    def test_readable_formatter(self):
        output = ReadableFormatter(use_color=False).format(_record(count=2))
        assert "INFO" in output
        assert "[deadlines.test] hello" in output
        assert "count=2" in output
        assert "\033[" not in output


class TestConfigureLogging:
    """Tests for root logger setup."""

    def test_json_output(self, restore_root_logger):
        configure_logging(level="DEBUG", json_output=True)
        assert restore_root_logger.level == logging.DEBUG
        assert len(restore_root_logger.handlers) == 1
        assert isinstance(restore_root_logger.handlers[0].formatter, JsonFormatter)

    def test_log_file(self, restore_root_logger, tmp_path):
        log_file = tmp_path / "logs" / "engine.log"
        configure_logging(level="INFO", log_file=log_file)
        assert len(restore_root_logger.handlers) == 2
        assert log_file.parent.exists()
        for handler in restore_root_logger.handlers[1:]:
            handler.close()


class TestContextLogger:
    """Tests for the context-carrying adapter."""

    def test_get_logger(self):
        logger = get_logger("deadlines.test", entity_id="spac-001")
        assert isinstance(logger, ContextLogger)
        assert logger.extra == {"entity_id": "spac-001"}

    def test_process_merges_context(self):
        logger = get_logger("deadlines.test", entity_id="spac-001")
        _, kwargs = logger.process("msg", {"extra": {"extra_data": {"count": 3}}})
        assert kwargs["extra"]["extra_data"] == {"entity_id": "spac-001", "count": 3}


class TestDeadlineRunLogger:
    """Tests for the generation run logger."""

    def test_counts(self):
        run_logger = DeadlineRunLogger("spac-001", "Test SPAC")
        run_logger.start("SEARCHING", "2025-02-01")
        run_logger.log_source("outer_deadline", 1)
        run_logger.log_source("periodic", 4)
        run_logger.log_source("stage_rules", 0)
        assert run_logger.counts == {"outer_deadline": 1, "periodic": 4, "stage_rules": 0}

    def test_complete_logs_total(self, caplog):
        run_logger = DeadlineRunLogger("spac-001")
        with caplog.at_level(logging.INFO, logger="deadlines.run"):
            run_logger.start("CLOSING", "2025-02-01")
            run_logger.complete(1)
        record = caplog.records[-1]
        assert record.getMessage() == "Generated 1 deadline(s)"
        assert record.extra_data["entity_id"] == "spac-001"
        assert record.extra_data["total"] == 1


class TestLogPerformance:
    """Tests for the timing decorator."""

    def test_returns_result(self):
        @log_performance("double")
        def double(x):
            return x * 2

        assert double(4) == 8
        assert double.__name__ == "double"

    def test_reraises(self, caplog):
        @log_performance()
        def explode():
            raise ValueError("boom")

        with caplog.at_level(logging.ERROR, logger="performance"):
            with pytest.raises(ValueError):
                explode()
        assert any("explode failed" in r.getMessage() for r in caplog.records)

    def test_timed_block(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="performance"):
            with timed("periodic schedule"):
                pass
        record = caplog.records[-1]
        assert record.getMessage() == "periodic schedule completed"
        assert "duration_ms" in record.extra_data

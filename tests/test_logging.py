"""Tests for logging setup."""

import json

import pytest

from data_api_client.core.logging import get_logger, setup_logging


@pytest.mark.unit
class TestSetupLogging:
    def test_setup_without_errors(self):
        setup_logging()

    def test_setup_verbose(self):
        setup_logging(verbose=True)


@pytest.mark.unit
class TestGetLogger:
    def test_get_logger_without_name(self):
        setup_logging()
        assert get_logger() is not None

    def test_get_logger_with_name(self):
        setup_logging()
        assert get_logger("test_module") is not None


@pytest.mark.unit
class TestLogOutput:
    def test_log_to_stderr(self, capsys):
        """Log output goes to stderr, not stdout."""
        setup_logging(verbose=True)
        log = get_logger()
        log.info("test message")

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "test message" in captured.err

    def test_json_lines(self, capsys):
        setup_logging(json_logs=True)
        log = get_logger("data_api_client.client")
        log.info("statement complete", record_count=2)

        line = capsys.readouterr().err.strip()
        event = json.loads(line)
        assert event["event"] == "statement complete"
        assert event["record_count"] == 2
        assert event["logger"] == "data_api_client.client"
        assert event["level"] == "info"

    def test_debug_filtered_when_not_verbose(self, capsys):
        setup_logging(verbose=False)
        get_logger().debug("hidden")
        assert "hidden" not in capsys.readouterr().err

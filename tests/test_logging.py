"""Tests for logging configuration module."""

import logging
import sys
from io import StringIO
from unittest.mock import patch

import structlog

from subway.core.logging import configure_logging


class TestConfigureLogging:
    """Tests for configure_logging function."""

    def test_configure_logging_sets_log_level(self) -> None:
        """Test that configure_logging sets the root logger level."""
        configure_logging(log_level="DEBUG")
        assert logging.getLogger().level == logging.DEBUG

        configure_logging(log_level="WARNING")
        assert logging.getLogger().level == logging.WARNING

    def test_configure_logging_default_level_is_info(self) -> None:
        configure_logging()
        assert logging.getLogger().level == logging.INFO

    def test_configure_logging_case_insensitive(self) -> None:
        configure_logging(log_level="Debug")
        assert logging.getLogger().level == logging.DEBUG

    def test_configure_logging_sets_noisy_loggers_to_warning(self) -> None:
        configure_logging(log_level="DEBUG")

        assert logging.getLogger("httpx").level == logging.WARNING
        assert logging.getLogger("uvicorn.access").level == logging.WARNING

    def test_configure_logging_replaces_existing_handlers(self) -> None:
        root_logger = logging.getLogger()
        dummy_handler = logging.StreamHandler()
        root_logger.addHandler(dummy_handler)

        configure_logging()

        assert dummy_handler not in root_logger.handlers
        assert len(root_logger.handlers) == 1

    def test_configure_logging_handler_outputs_to_stdout(self) -> None:
        configure_logging()

        handler = logging.getLogger().handlers[0]
        assert isinstance(handler, logging.StreamHandler)
        assert handler.stream == sys.stdout

    def test_structlog_event_rendered(self) -> None:
        """Structlog events reach stdout with their keyword context."""
        with patch("sys.stdout", new_callable=StringIO) as mock_stdout:
            configure_logging(log_level="INFO")
            structlog.get_logger("test").info("section_added", line="Shinbundang")
            output = mock_stdout.getvalue()

        assert "section_added" in output
        assert "Shinbundang" in output

    def test_debug_level_renders_json(self) -> None:
        with patch("sys.stdout", new_callable=StringIO) as mock_stdout:
            configure_logging(log_level="DEBUG")
            structlog.get_logger("test").debug("line_created", name="Shinbundang")
            output = mock_stdout.getvalue()

        assert '"event": "line_created"' in output

    def test_stdlib_logger_routed_through_structlog(self) -> None:
        with patch("sys.stdout", new_callable=StringIO) as mock_stdout:
            configure_logging(log_level="INFO")
            logging.getLogger("stdlib_test").info("stdlib message")
            output = mock_stdout.getvalue()

        assert "stdlib message" in output

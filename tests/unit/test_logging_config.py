"""Unit tests for script logging setup"""

import io
import logging
from logging.handlers import RotatingFileHandler

import pytest

from katadasar.logging_config import setup_logging

pytestmark = pytest.mark.unit


class TestSetupLogging:
    """Console and rotating file handlers"""

    def test_console_only(self):
        """Without a log file only the console handler is installed"""
        stream = io.StringIO()

        assert setup_logging(stream=stream) is None

        handlers = logging.getLogger().handlers
        assert len(handlers) == 1
        assert handlers[0].level == logging.INFO

        logging.getLogger("katadasar.test").info("hello")
        logging.getLogger("katadasar.test").debug("hidden")
        assert stream.getvalue() == "INFO: hello\n"

    def test_console_level(self):
        """Console level is configurable"""
        stream = io.StringIO()
        setup_logging(console_level=logging.WARNING, stream=stream)

        logging.getLogger("katadasar.test").info("quiet")
        logging.getLogger("katadasar.test").warning("loud")

        assert stream.getvalue() == "WARNING: loud\n"

    def test_file_handler(self, tmp_path):
        """Log file gets detailed DEBUG records, parent directory created"""
        log_file = tmp_path / "logs" / "stem.log"

        result = setup_logging(log_file=log_file, stream=io.StringIO())
        logging.getLogger("katadasar.test").debug("details")
        for handler in logging.getLogger().handlers:
            handler.flush()

        assert result == log_file
        file_handlers = [h for h in logging.getLogger().handlers if isinstance(h, RotatingFileHandler)]
        assert len(file_handlers) == 1
        assert file_handlers[0].maxBytes == 10 * 1024 * 1024
        assert file_handlers[0].backupCount == 5

        content = log_file.read_text(encoding="utf-8")
        assert "DEBUG" in content
        assert "katadasar.test" in content
        assert "details" in content

    def test_repeated_setup_replaces_handlers(self):
        """Calling twice does not duplicate output"""
        first = io.StringIO()
        second = io.StringIO()
        setup_logging(stream=first)
        setup_logging(stream=second)

        logging.getLogger("katadasar.test").info("once")

        assert first.getvalue() == ""
        assert second.getvalue() == "INFO: once\n"

"""
Tests for logging utilities.

This module tests logging setup and formatter functionality.
"""

import logging
from unittest.mock import patch

import pytest

from appcast_tool.utils import WrappingFormatter, get_logger, setup_logging
from appcast_tool.utils.logger import verbosity_to_level


def _record(message: str) -> logging.LogRecord:
    return logging.LogRecord("test", logging.INFO, "/test/path", 1, message, None, None)


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo handler and level changes made by setup_logging."""
    root_logger = logging.getLogger()
    level = root_logger.level
    yield
    for handler in list(root_logger.handlers):
        if isinstance(handler.formatter, WrappingFormatter):
            root_logger.removeHandler(handler)
    root_logger.setLevel(level)
    for name in ("httpx", "httpcore"):
        logging.getLogger(name).setLevel(logging.NOTSET)


class TestLoggingUtilities:
    """Test logging utility functions."""

    @pytest.mark.parametrize(
        "verbosity,level", [(0, logging.WARNING), (1, logging.INFO), (2, logging.DEBUG), (5, logging.DEBUG)]
    )
    def test_verbosity_to_level(self, verbosity, level):
        """Each -d raises verbosity one step."""
        assert verbosity_to_level(verbosity) == level

    def test_setup_logging_info(self):
        """Test setup_logging with info level."""
        with patch("logging.basicConfig") as mock_basic_config:
            setup_logging(verbosity=1)
            mock_basic_config.assert_called_once()
            assert mock_basic_config.call_args.kwargs["level"] == logging.INFO

    def test_setup_logging_with_wrapping(self):
        """Test setup_logging with wrapping enabled."""
        setup_logging(verbosity=2, use_wrapping=True)

        root_logger = logging.getLogger()
        assert root_logger.level == logging.DEBUG
        assert any(isinstance(h.formatter, WrappingFormatter) for h in root_logger.handlers)

    def test_http_loggers_quiet_by_default(self):
        """Request logs from httpx only appear at the highest verbosity."""
        with patch("logging.basicConfig"):
            setup_logging(verbosity=2)
            assert logging.getLogger("httpx").level == logging.WARNING

            setup_logging(verbosity=3)
            assert logging.getLogger("httpx").level == logging.DEBUG

    def test_wrapping_formatter(self):
        """Test WrappingFormatter class."""
        formatter = WrappingFormatter(width=50)

        formatted = formatter.format(_record("Short message"))
        assert formatted == "Short message"

        formatted = formatter.format(
            _record("This is a very long message that should be wrapped because it exceeds the width limit")
        )
        assert "\n" in formatted
        assert all(line.startswith("    ") for line in formatted.splitlines()[1:])

    def test_get_logger(self):
        """Test get_logger returns a named logger."""
        assert get_logger("appcast_tool.test").name == "appcast_tool.test"

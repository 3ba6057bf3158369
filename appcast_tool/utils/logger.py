"""
Logging configuration for appcast-tool.

Library code logs through the standard ``logging`` module; only the CLI
calls ``setup_logging``.
"""

import logging
import textwrap
from typing import Optional

# Default width for log message wrapping
DEFAULT_LOG_WIDTH = 120

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"

# Loggers that emit one line per HTTP request
HTTP_LOGGERS = ("httpx", "httpcore")


class WrappingFormatter(logging.Formatter):
    """
    Formatter that wraps long log messages.

    Continuation lines are indented so wrapped records remain easy to tell
    apart in a terminal.
    """

    def __init__(
        self, fmt: Optional[str] = None, datefmt: Optional[str] = None, width: int = DEFAULT_LOG_WIDTH
    ) -> None:
        super().__init__(fmt, datefmt)
        self.width = width

    def format(self, record: logging.LogRecord) -> str:
        formatted = super().format(record)
        if len(formatted) <= self.width:
            return formatted
        return "\n".join(
            textwrap.wrap(formatted, width=self.width, subsequent_indent="    ", break_long_words=False)
        )


def verbosity_to_level(verbosity: int) -> int:
    """Map a ``-d`` count to a logging level (0=WARNING, 1=INFO, 2+=DEBUG)."""
    if verbosity <= 0:
        return logging.WARNING
    if verbosity == 1:
        return logging.INFO
    return logging.DEBUG


def setup_logging(verbosity: int = 0, use_wrapping: bool = False) -> None:
    """
    Configure the root logger.

    Args:
        verbosity: Verbosity level (0=WARNING, 1=INFO, 2=DEBUG, 3+=DEBUG with HTTP logs)
        use_wrapping: If True, use WrappingFormatter for long messages

    Example:
        >>> setup_logging(1)  # INFO level, retries and size warnings visible
    """
    level = verbosity_to_level(verbosity)

    if use_wrapping:
        handler = logging.StreamHandler()
        handler.setFormatter(WrappingFormatter(fmt=LOG_FORMAT))

        root_logger = logging.getLogger()
        root_logger.handlers.clear()
        root_logger.addHandler(handler)
        root_logger.setLevel(level)
    else:
        logging.basicConfig(level=level, format=LOG_FORMAT)

    # httpx logs every request at INFO, only show that at -ddd
    http_level = logging.DEBUG if verbosity >= 3 else logging.WARNING
    for name in HTTP_LOGGERS:
        logging.getLogger(name).setLevel(http_level)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance with the given name.

    Example:
        >>> logger = get_logger(__name__)
    """
    return logging.getLogger(name)


__all__ = [
    "WrappingFormatter",
    "verbosity_to_level",
    "setup_logging",
    "get_logger",
]

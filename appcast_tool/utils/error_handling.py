"""
Error handling utilities for standardized error logging.

Used by the CLI to turn exceptions from providers and the pipe assembler
into readable log messages.
"""

import logging
import sys
import traceback
from typing import NoReturn

import httpx

from ..exceptions import AppcastError


def handle_http_error(error: httpx.HTTPError, operation: str, *, log_traceback: bool = True) -> None:
    """
    Handle HTTP errors with standardized logging.

    Args:
        error: The HTTP error to handle
        operation: Description of the operation that failed
        log_traceback: Whether to log the full traceback
    """
    status = error.response.status_code if isinstance(error, httpx.HTTPStatusError) else None

    if status == 401:
        logging.error(
            "Authentication failed during %s: invalid token. Check the token of the source provider.",
            operation,
        )
    elif status == 403:
        logging.error(
            "Authentication failed during %s: the token lacks permission for this repository.",
            operation,
        )
    elif status == 404:
        logging.error("Resource not found during %s: %s", operation, error)
    elif status is not None and status >= 500:
        logging.error("Server error during %s: %s", operation, error)
    elif isinstance(error, httpx.TransportError):
        logging.error("Network error during %s: %s", operation, error)
    else:
        logging.error("HTTP error during %s: %s", operation, error)

    if log_traceback:
        logging.debug("Traceback: %s", traceback.format_exc())


def handle_appcast_error(error: AppcastError, operation: str) -> None:
    """
    Log a domain error. These carry complete messages, no traceback needed.

    Args:
        error: The error to handle
        operation: Description of the operation that failed
    """
    logging.error("%s failed: %s", operation.capitalize(), error)


def handle_generic_error(error: Exception, operation: str, *, log_traceback: bool = True) -> None:
    """
    Handle unexpected errors with standardized logging.

    Args:
        error: The exception to handle
        operation: Description of the operation that failed
        log_traceback: Whether to log the full traceback
    """
    logging.error("Unexpected error during %s: %s", operation, error)

    if log_traceback:
        logging.error("Traceback: %s", traceback.format_exc())


def handle_error(error: Exception, operation: str) -> None:
    """
    Log any exception with the handler matching its type.

    Args:
        error: The exception to handle
        operation: Description of the operation that failed
    """
    if isinstance(error, AppcastError):
        handle_appcast_error(error, operation)
    elif isinstance(error, httpx.HTTPError):
        handle_http_error(error, operation)
    else:
        handle_generic_error(error, operation)


def log_and_exit(message: str, exit_code: int = 1) -> NoReturn:
    """
    Log an error message and exit the program.

    Args:
        message: Error message to log
        exit_code: Exit code (default: 1)
    """
    logging.error(message)
    sys.exit(exit_code)


__all__ = [
    "handle_http_error",
    "handle_appcast_error",
    "handle_generic_error",
    "handle_error",
    "log_and_exit",
]

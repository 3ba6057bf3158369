"""
Session utilities for hosting API access.

This module provides utilities for creating and configuring async HTTP
clients with retry strategies and connection pooling.
"""

from typing import Dict, Optional
import logging
import httpx
from httpx import AsyncHTTPTransport

from .constants import CONNECT_TIMEOUT, DEFAULT_TIMEOUT, MAX_RETRIES, RETRY_BACKOFF_FACTOR
from .retry import RetryTransport


def create_session_with_retry(
    headers: Optional[Dict[str, str]] = None,
    *,
    base_url: str = "",
    timeout: float = DEFAULT_TIMEOUT,
    max_connections: int = 100,
    max_retries: int = MAX_RETRIES,
    backoff_factor: float = RETRY_BACKOFF_FACTOR,
) -> httpx.AsyncClient:
    """
    Create an httpx async client with retry strategy and connection pooling.

    Args:
        headers: Extra default headers (e.g. authentication)
        base_url: Base URL prepended to relative request URLs
        timeout: Total timeout in seconds (default: 120.0)
        max_connections: Maximum number of connections in the pool (default: 100)
        max_retries: Retries for transient failures (default: 3)
        backoff_factor: Base backoff delay in seconds (default: 0.5)

    Returns:
        Configured httpx.AsyncClient object with:
        - Retries with exponential backoff on connection errors, 429 and 5xx
        - HTTP/2 support for multiplexing when available
        - Compression support (gzip, deflate)
        - Optimized connection pooling
        - Timeout configuration

    Example:
        >>> client = create_session_with_retry({"PRIVATE-TOKEN": "glpat-..."})
        >>> response = await client.get("https://gitlab.com/api/v4/projects")
    """
    # Configure connection limits - increased for parallel size probes
    limits = httpx.Limits(
        max_connections=max_connections,
        max_keepalive_connections=max(20, max_connections // 5),
    )

    # Configure timeout (total, connect, read, write)
    timeout_config = httpx.Timeout(timeout, connect=CONNECT_TIMEOUT)

    # Try to enable HTTP/2 if available, but don't fail if not
    try:
        import importlib.util  # pylint: disable=import-outside-toplevel

        use_http2 = importlib.util.find_spec("h2") is not None
    except (ImportError, AttributeError):
        use_http2 = False

    if not use_http2:
        logging.debug("HTTP/2 support not available (h2 package not installed)")

    transport = RetryTransport(
        AsyncHTTPTransport(limits=limits, http2=use_http2),
        max_retries=max_retries,
        backoff_factor=backoff_factor,
    )

    # Add compression support headers
    default_headers = {
        "Accept-Encoding": "gzip, deflate",
    }
    if headers:
        default_headers.update(headers)

    client = httpx.AsyncClient(
        transport=transport,
        base_url=base_url,
        timeout=timeout_config,
        follow_redirects=True,
        headers=default_headers,
    )

    return client


__all__ = ["create_session_with_retry"]

"""
Retrying transport for httpx.

httpx only retries failed connection attempts. ``RetryTransport`` adds
status-based retries with exponential backoff on top of any async
transport, so every request made through a client built by
``create_session_with_retry`` is retried the same way.
"""

import asyncio
import logging
from typing import Iterable, Optional

import httpx

from .constants import MAX_BACKOFF, MAX_RETRIES, RETRY_BACKOFF_FACTOR, RETRY_STATUS_CODES

# Transport failures that may succeed on a second attempt. Misconfiguration
# (unsupported scheme, proxy errors, malformed requests) never does.
RETRYABLE_ERRORS = (httpx.TimeoutException, httpx.NetworkError, httpx.RemoteProtocolError)


def parse_retry_after(value: Optional[str]) -> Optional[float]:
    """
    Parse a Retry-After header given in seconds.

    HTTP-date values are ignored and fall back to regular backoff.

    Returns:
        Delay in seconds, or None if the header is absent or not numeric
    """
    if not value:
        return None
    try:
        delay = float(value)
    except ValueError:
        return None
    return delay if delay >= 0 else None


class RetryTransport(httpx.AsyncBaseTransport):
    """
    Async transport that retries transient failures with exponential backoff.

    Retried: the transport errors in ``RETRYABLE_ERRORS`` (timeouts, network
    failures, a server breaking the protocol) and responses whose status is
    in ``retry_status_codes``. Other transport errors are raised and other
    responses returned immediately. After ``max_retries`` retries the last
    response is returned, or the last transport error raised.

    Backoff waits use ``asyncio.sleep``: cancelling the calling task stops the
    loop during a wait, and cancels an attempt in flight the same way.
    """

    def __init__(
        self,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        *,
        max_retries: int = MAX_RETRIES,
        backoff_factor: float = RETRY_BACKOFF_FACTOR,
        retry_status_codes: Iterable[int] = RETRY_STATUS_CODES,
        max_backoff: float = MAX_BACKOFF,
    ) -> None:
        """
        Initialize the retrying transport.

        Args:
            transport: Transport performing the actual requests
            max_retries: Maximum number of retries after the first attempt
            backoff_factor: Base delay; attempt n waits backoff_factor * 2 ** (n - 1)
            retry_status_codes: Response codes that trigger a retry
            max_backoff: Upper bound for a single wait in seconds
        """
        self._transport = transport or httpx.AsyncHTTPTransport()
        self.max_retries = max_retries
        self.backoff_factor = backoff_factor
        self.retry_status_codes = frozenset(retry_status_codes)
        self.max_backoff = max_backoff

    def backoff(self, attempt: int, response: Optional[httpx.Response] = None) -> float:
        """
        Compute the delay before retrying after ``attempt`` failed attempts.

        A numeric Retry-After header on ``response`` takes precedence.
        """
        delay = self.backoff_factor * (2 ** (attempt - 1))
        if response is not None:
            retry_after = parse_retry_after(response.headers.get("Retry-After"))
            if retry_after is not None:
                delay = retry_after
        return min(delay, self.max_backoff)

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        attempt = 0
        while True:
            attempt += 1
            try:
                response = await self._transport.handle_async_request(request)
            except RETRYABLE_ERRORS as e:
                if attempt > self.max_retries:
                    logging.debug("Giving up on %s %s after %d attempts: %s", request.method, request.url, attempt, e)
                    raise
                delay = self.backoff(attempt)
                logging.warning(
                    "%s %s failed (%s), retrying in %.1fs (attempt %d/%d)",
                    request.method,
                    request.url,
                    e,
                    delay,
                    attempt,
                    self.max_retries + 1,
                )
            else:
                if response.status_code not in self.retry_status_codes or attempt > self.max_retries:
                    return response
                delay = self.backoff(attempt, response)
                await response.aclose()
                logging.warning(
                    "%s %s returned %d, retrying in %.1fs (attempt %d/%d)",
                    request.method,
                    request.url,
                    response.status_code,
                    delay,
                    attempt,
                    self.max_retries + 1,
                )

            await asyncio.sleep(delay)

    async def aclose(self) -> None:
        await self._transport.aclose()


__all__ = ["RETRYABLE_ERRORS", "RetryTransport", "parse_retry_after"]

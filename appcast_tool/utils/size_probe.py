"""
Best-effort asset size lookup.

Used by backends whose list API does not report asset sizes. Each asset URL
gets a HEAD request and its Content-Length is read; the body is never
downloaded. A failed probe degrades the size to 0 and produces a warning
instead of an exception.
"""

import asyncio
import logging
from typing import List, Optional, Sequence, Tuple

import httpx

from ..models.release import AssetWarning
from .constants import SIZE_PROBE_CONCURRENCY

# (asset name, asset url)
AssetRef = Tuple[str, str]


async def probe_size(client: httpx.AsyncClient, url: str) -> int:
    """
    Read the size of the resource at ``url`` from a HEAD response.

    Args:
        client: Client used for the request (carries auth and retries)
        url: Absolute asset URL

    Returns:
        Content length in bytes

    Raises:
        httpx.HTTPError: If the request fails
        ValueError: If the response carries no valid Content-Length
    """
    # identity: the length of a compressed representation is not the asset size
    response = await client.head(url, headers={"Accept-Encoding": "identity"})
    response.raise_for_status()

    content_length = response.headers.get("Content-Length")
    if content_length is None:
        raise ValueError("response has no Content-Length header")
    size = int(content_length)
    if size < 0:
        raise ValueError(f"invalid Content-Length: {content_length}")
    return size


async def probe_sizes(
    client: httpx.AsyncClient,
    version: str,
    assets: Sequence[AssetRef],
    *,
    concurrency: int = SIZE_PROBE_CONCURRENCY,
) -> Tuple[List[int], List[AssetWarning]]:
    """
    Probe the sizes of several assets concurrently.

    Args:
        client: Client used for the requests
        version: Version of the release owning the assets (for warnings)
        assets: (name, url) pairs in backend order
        concurrency: Maximum number of probes in flight

    Returns:
        Tuple of (sizes in the same order as ``assets``, warnings for failed probes)
    """
    semaphore = asyncio.Semaphore(concurrency)

    async def _probe(name: str, url: str) -> Tuple[int, Optional[AssetWarning]]:
        async with semaphore:
            try:
                return await probe_size(client, url), None
            except (httpx.HTTPError, ValueError) as e:
                logging.warning("Failed to get size for %s: %s", name, e)
                return 0, AssetWarning(version=version, asset=name, message=f"failed to get size: {e}")

    # gather keeps input order regardless of completion order
    results = await asyncio.gather(*(_probe(name, url) for name, url in assets))

    sizes = [size for size, _ in results]
    warnings = [warning for _, warning in results if warning is not None]
    return sizes, warnings


__all__ = ["probe_size", "probe_sizes", "AssetRef"]

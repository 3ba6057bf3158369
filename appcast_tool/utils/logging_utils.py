"""
Logging and display helpers shared by providers and the CLI.
"""

import logging
from typing import Optional

from ..models.release import ReleaseListing


def log_operation_start(operation: str, **details) -> None:
    """
    Log the start of an operation.

    Args:
        operation: Description of the operation
        **details: Additional details to log as key=value pairs
    """
    if details:
        logging.info("Starting %s (%s)", operation, format_details(details))
    else:
        logging.info("Starting %s", operation)


def log_operation_complete(operation: str, **details) -> None:
    """
    Log the completion of an operation.

    Args:
        operation: Description of the operation
        **details: Additional details to log as key=value pairs
    """
    if details:
        logging.info("Completed %s (%s)", operation, format_details(details))
    else:
        logging.info("Completed %s", operation)


def format_details(details: dict) -> str:
    """Format keyword details as ``k=v, k=v``."""
    return ", ".join(f"{k}={v}" for k, v in details.items())


def format_count_with_unit(count: int, unit: str, *, plural: Optional[str] = None) -> str:
    """
    Format a count with proper pluralization.

    Examples:
        >>> format_count_with_unit(1, "release")
        '1 release'
        >>> format_count_with_unit(3, "asset")
        '3 assets'
    """
    if count == 1:
        return f"{count} {unit}"
    return f"{count} {plural or unit + 's'}"


def format_file_size(size_bytes: int) -> str:
    """
    Format file size in human-readable format.

    Examples:
        >>> format_file_size(0)
        '0 B'
        >>> format_file_size(1536)
        '1.5 KB'
    """
    if size_bytes == 0:
        return "0 B"

    size_names = ["B", "KB", "MB", "GB", "TB"]
    i = 0
    size_float = float(size_bytes)

    while size_float >= 1024 and i < len(size_names) - 1:
        size_float /= 1024.0
        i += 1

    return f"{size_float:.1f} {size_names[i]}"


def log_listing_summary(listing: ReleaseListing, *, level: int = logging.INFO) -> None:
    """
    Log how many releases and assets a listing contains.

    Args:
        listing: Result of ``list_releases``
        level: Logging level to use
    """
    asset_count = sum(len(release.assets) for release in listing.releases)
    logging.log(
        level,
        "Found %s with %s",
        format_count_with_unit(len(listing.releases), "release"),
        format_count_with_unit(asset_count, "asset"),
    )
    if listing.has_warnings:
        logging.warning(
            "%s could not be fully described",
            format_count_with_unit(len(listing.warnings), "asset"),
        )


__all__ = [
    "log_operation_start",
    "log_operation_complete",
    "format_details",
    "format_count_with_unit",
    "format_file_size",
    "log_listing_summary",
]

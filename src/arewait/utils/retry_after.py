r"""Retry-After header parsing utilities.

This module provides functions for parsing the Retry-After header value
of HTTP responses according to RFC 7231, and a mapping function that
turns an ``httpx.HTTPStatusError`` into a sleep time for
``arewait.strategies.exception_wait``.
"""

from __future__ import annotations

__all__ = ["parse_retry_after", "retry_after_millis"]

import logging
import math
from contextlib import suppress
from datetime import datetime, timezone
from email.utils import parsedate_to_datetime

import httpx

from arewait.units import MAX_DURATION_MILLIS

logger: logging.Logger = logging.getLogger(__name__)


def parse_retry_after(retry_after_header: str | None) -> float | None:
    """Parse the Retry-After header value from an HTTP response.

    The Retry-After header can be specified in two formats according to RFC 7231:
    1. An integer representing the number of seconds to wait (e.g., "120")
    2. An HTTP-date in RFC 5322 format (e.g., "Wed, 21 Oct 2015 07:28:00 GMT")

    Args:
        retry_after_header: The value of the Retry-After header as a string,
            or None if the header is not present in the response.

    Returns:
        The number of seconds to wait, or None if the header is absent
        or cannot be parsed. Negative values are clamped to 0.0.

    Example:
        ```pycon
        >>> from arewait.utils.retry_after import parse_retry_after
        >>> parse_retry_after("120")
        120.0
        >>> parse_retry_after(None) is None
        True
        >>> parse_retry_after("invalid") is None
        True

        ```
    """
    if retry_after_header is None:
        return None

    with suppress(ValueError):
        return max(0.0, float(retry_after_header))

    try:
        retry_date: datetime = parsedate_to_datetime(retry_after_header)
        now = datetime.now(timezone.utc)
        delta_seconds = (retry_date - now).total_seconds()
        return max(0.0, delta_seconds)
    except (ValueError, TypeError, OverflowError):
        logger.debug(f"Failed to parse Retry-After header: {retry_after_header!r}")
        return None


def retry_after_millis(error: httpx.HTTPStatusError) -> int:
    """Compute a sleep time from the Retry-After header of a failed
    response.

    This function is meant to be used with
    ``exception_wait(httpx.HTTPStatusError, retry_after_millis)``.

    Args:
        error: The error raised by ``httpx.Response.raise_for_status``.

    Returns:
        The delay requested by the server in milliseconds, or 0 if
        ``error`` is not an ``httpx.HTTPStatusError`` or the header is
        absent or cannot be parsed.

    Example:
        ```pycon
        >>> import httpx
        >>> from arewait.utils.retry_after import retry_after_millis
        >>> request = httpx.Request("GET", "https://api.example.com")
        >>> response = httpx.Response(429, headers={"Retry-After": "3"}, request=request)
        >>> error = httpx.HTTPStatusError("Too Many Requests", request=request, response=response)
        >>> retry_after_millis(error)
        3000

        ```
    """
    if not isinstance(error, httpx.HTTPStatusError):
        return 0
    seconds = parse_retry_after(error.response.headers.get("Retry-After"))
    if seconds is None or not math.isfinite(seconds):
        return 0
    return min(int(seconds * 1000), MAX_DURATION_MILLIS)

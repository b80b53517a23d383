r"""Utility functions for computing wait times from HTTP failures."""

from __future__ import annotations

__all__ = ["parse_retry_after", "retry_after_millis"]

from arewait.utils.retry_after import parse_retry_after, retry_after_millis

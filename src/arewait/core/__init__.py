r"""Core shared logic for constructing wait strategies."""

from __future__ import annotations

__all__ = ["check_argument", "check_integer", "check_not_none", "check_state"]

from arewait.core.validation import (
    check_argument,
    check_integer,
    check_not_none,
    check_state,
)

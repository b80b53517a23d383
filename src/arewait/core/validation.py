r"""Precondition helpers used when constructing wait strategies.

This module provides small validation functions that raise the
configuration errors of ``arewait.exceptions`` with a formatted message.
They are only called at construction time.
"""

from __future__ import annotations

__all__ = ["check_argument", "check_integer", "check_not_none", "check_state"]

import numbers
from typing import Any, TypeVar

from arewait.exceptions import InvalidArgumentError, InvalidStateError

T = TypeVar("T")


def check_argument(condition: bool, template: str, *args: Any) -> None:
    """Ensure a condition about a single parameter holds.

    Args:
        condition: The condition that must be true.
        template: The error message template, formatted with ``%``
            and ``args`` when the check fails.
        *args: The values used to format the message.

    Raises:
        InvalidArgumentError: If ``condition`` is false.

    Example:
        ```pycon
        >>> from arewait.core.validation import check_argument
        >>> check_argument(5 >= 0, "sleep_time must be >= 0 but is %s", 5)
        >>> check_argument(-5 >= 0, "sleep_time must be >= 0 but is %s", -5)  # doctest: +SKIP
        Traceback (most recent call last):
        ...
        arewait.exceptions.InvalidArgumentError: sleep_time must be >= 0 but is -5

        ```
    """
    if not condition:
        msg = template % args if args else template
        raise InvalidArgumentError(msg)


def check_state(condition: bool, template: str, *args: Any) -> None:
    """Ensure a structural condition holds.

    Args:
        condition: The condition that must be true.
        template: The error message template.
        *args: The values used to format the message.

    Raises:
        InvalidStateError: If ``condition`` is false.
    """
    if not condition:
        msg = template % args if args else template
        raise InvalidStateError(msg)


def check_not_none(value: T | None, name: str) -> T:
    """Ensure a parameter is not ``None`` and return it.

    Args:
        value: The value to check.
        name: The parameter name used in the error message.

    Returns:
        The value, unchanged.

    Raises:
        InvalidArgumentError: If ``value`` is ``None``.
    """
    if value is None:
        msg = f"{name} may not be None"
        raise InvalidArgumentError(msg)
    return value


def check_integer(value: Any, name: str) -> int:
    """Ensure a parameter is an integral number and return it as
    ``int``.

    Floats are accepted only when they have no fractional part, so a
    value is never silently truncated before its range is checked.

    Args:
        value: The value to check.
        name: The parameter name used in the error message.

    Returns:
        The value converted to ``int``.

    Raises:
        InvalidArgumentError: If ``value`` is not an integral number.

    Example:
        ```pycon
        >>> from arewait.core.validation import check_integer
        >>> check_integer(2.0, "maximum")
        2

        ```
    """
    check_argument(
        isinstance(value, numbers.Integral)
        or (isinstance(value, float) and value.is_integer()),
        "%s must be an integer but is %s",
        name,
        value,
    )
    return int(value)

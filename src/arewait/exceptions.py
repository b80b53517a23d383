r"""Exceptions raised when a wait strategy is misconfigured.

Both exception types are raised synchronously while a wait strategy is
being constructed. Computing a sleep time never raises.
"""

from __future__ import annotations

__all__ = ["InvalidArgumentError", "InvalidStateError", "WaitStrategyError"]


class WaitStrategyError(Exception):
    """Base class for wait strategy configuration errors."""


class InvalidArgumentError(WaitStrategyError, ValueError):
    """Exception raised when a single parameter violates its constraint.

    The message identifies the offending parameter and its actual value.

    Example:
        ```pycon
        >>> from arewait.exceptions import InvalidArgumentError
        >>> from arewait.strategies import fixed_wait
        >>> try:
        ...     fixed_wait(-500)
        ... except InvalidArgumentError as exc:
        ...     print(exc)
        ...
        sleep_time must be >= 0 but is -500

        ```
    """


class InvalidStateError(WaitStrategyError, RuntimeError):
    """Exception raised when a set of wait strategies cannot be
    combined.

    For example, joining zero strategies or a ``None`` strategy.
    """

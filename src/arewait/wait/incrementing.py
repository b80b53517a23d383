r"""Incrementing wait strategy."""

from __future__ import annotations

__all__ = ["IncrementingWait"]

import logging
from typing import TYPE_CHECKING

from arewait.core.validation import check_argument, check_integer
from arewait.wait.base import BaseWaitStrategy

if TYPE_CHECKING:
    from arewait.attempt import Attempt

logger: logging.Logger = logging.getLogger(__name__)


class IncrementingWait(BaseWaitStrategy):
    """Incrementing (linear) wait strategy.

    Calculates the sleep time as:
    ``initial_sleep_time + increment * (attempt_number - 1)``, floored at 0.

    The increment may be negative, in which case the sleep time
    decreases with each attempt until it reaches 0. There is no upper
    bound.

    Args:
        initial_sleep_time: The sleep time after the first failed attempt,
            in milliseconds.
        increment: The time added after each further failed attempt, in
            milliseconds.

    Raises:
        InvalidArgumentError: If ``initial_sleep_time`` is negative.

    Example:
        ```pycon
        >>> from arewait.attempt import Attempt
        >>> from arewait.wait import IncrementingWait
        >>> wait = IncrementingWait(initial_sleep_time=500, increment=100)
        >>> [wait.compute_sleep_time(Attempt.from_result(None, n)) for n in (1, 2, 3)]
        [500, 600, 700]
        >>> wait = IncrementingWait(initial_sleep_time=500, increment=-200)
        >>> [wait.compute_sleep_time(Attempt.from_result(None, n)) for n in (1, 2, 3, 4)]
        [500, 300, 100, 0]

        ```
    """

    def __init__(self, initial_sleep_time: int, increment: int) -> None:
        initial_sleep_time = check_integer(initial_sleep_time, "initial_sleep_time")
        increment = check_integer(increment, "increment")
        check_argument(
            initial_sleep_time >= 0,
            "initial_sleep_time must be >= 0 but is %s",
            initial_sleep_time,
        )
        self._initial_sleep_time = initial_sleep_time
        self._increment = increment

    @property
    def initial_sleep_time(self) -> int:
        return self._initial_sleep_time

    @property
    def increment(self) -> int:
        return self._increment

    def compute_sleep_time(self, attempt: Attempt) -> int:
        """Calculate incrementing sleep time.

        Args:
            attempt: The record of the last failed attempt.

        Returns:
            The calculated sleep time in milliseconds, never negative.
        """
        result = self._initial_sleep_time + self._increment * (attempt.attempt_number - 1)
        sleep_time = max(result, 0)
        logger.debug(f"Waiting {sleep_time}ms before attempt {attempt.attempt_number + 1}")
        return sleep_time

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(initial_sleep_time={self._initial_sleep_time}, "
            f"increment={self._increment})"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IncrementingWait):
            return NotImplemented
        return (self._initial_sleep_time, self._increment) == (
            other._initial_sleep_time,
            other._increment,
        )

    def __hash__(self) -> int:
        return hash((IncrementingWait, self._initial_sleep_time, self._increment))

r"""Fixed wait strategy."""

from __future__ import annotations

__all__ = ["FixedWait"]

from typing import TYPE_CHECKING

from arewait.core.validation import check_argument, check_integer
from arewait.wait.base import BaseWaitStrategy

if TYPE_CHECKING:
    from arewait.attempt import Attempt


class FixedWait(BaseWaitStrategy):
    """Fixed wait strategy.

    Returns the same sleep time for every attempt, regardless of the
    attempt number. A sleep time of 0 means no wait at all.

    Args:
        sleep_time: The sleep time in milliseconds.

    Raises:
        InvalidArgumentError: If ``sleep_time`` is negative.

    Example:
        ```pycon
        >>> from arewait.attempt import Attempt
        >>> from arewait.wait import FixedWait
        >>> wait = FixedWait(sleep_time=1000)
        >>> wait.compute_sleep_time(Attempt.from_exception(OSError(), attempt_number=1))
        1000
        >>> wait.compute_sleep_time(Attempt.from_exception(OSError(), attempt_number=12))
        1000

        ```
    """

    def __init__(self, sleep_time: int) -> None:
        sleep_time = check_integer(sleep_time, "sleep_time")
        check_argument(sleep_time >= 0, "sleep_time must be >= 0 but is %s", sleep_time)
        self._sleep_time = sleep_time

    @property
    def sleep_time(self) -> int:
        return self._sleep_time

    def compute_sleep_time(self, attempt: Attempt) -> int:  # noqa: ARG002
        """Return the fixed sleep time.

        Args:
            attempt: The record of the last failed attempt (unused).

        Returns:
            The configured sleep time in milliseconds.
        """
        return self._sleep_time

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(sleep_time={self._sleep_time})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FixedWait):
            return NotImplemented
        return self._sleep_time == other._sleep_time

    def __hash__(self) -> int:
        return hash((FixedWait, self._sleep_time))

r"""Fibonacci wait strategy."""

from __future__ import annotations

__all__ = ["FibonacciWait"]

import logging
from typing import TYPE_CHECKING

from arewait.units import MAX_DURATION_MILLIS
from arewait.wait.base import BaseWaitStrategy
from arewait.wait.exponential import check_multiplier_and_maximum

if TYPE_CHECKING:
    from arewait.attempt import Attempt

logger: logging.Logger = logging.getLogger(__name__)


class FibonacciWait(BaseWaitStrategy):
    """Fibonacci wait strategy.

    Calculates the sleep time as: ``multiplier * fibonacci(attempt_number)``,
    capped at ``maximum_wait``.

    This strategy provides a middle ground between incrementing and
    exponential waits. The Fibonacci sequence (1, 1, 2, 3, 5, 8, 13, ...)
    grows more gradually than powers of two.

    Args:
        multiplier: The factor applied to the Fibonacci number (default: 1).
        maximum_wait: The maximum sleep time in milliseconds
            (default: the largest representable duration).

    Raises:
        InvalidArgumentError: If ``multiplier`` is not positive, if
            ``maximum_wait`` is negative, or if ``multiplier`` is not
            strictly smaller than ``maximum_wait``.

    Example:
        ```pycon
        >>> from arewait.attempt import Attempt
        >>> from arewait.wait import FibonacciWait
        >>> wait = FibonacciWait()
        >>> [wait.compute_sleep_time(Attempt.from_result(None, n)) for n in range(1, 7)]
        [1, 1, 2, 3, 5, 8]
        >>> # With maximum_wait cap
        >>> wait = FibonacciWait(multiplier=1000, maximum_wait=50000)
        >>> wait.compute_sleep_time(Attempt.from_result(None, 10))  # 55000, but capped
        50000

        ```
    """

    def __init__(self, multiplier: int = 1, maximum_wait: int = MAX_DURATION_MILLIS) -> None:
        self._multiplier, self._maximum_wait = check_multiplier_and_maximum(
            multiplier, maximum_wait
        )

    @property
    def multiplier(self) -> int:
        return self._multiplier

    @property
    def maximum_wait(self) -> int:
        return self._maximum_wait

    @staticmethod
    def _fibonacci(n: int, limit: int | None = None) -> int:
        """Calculate the nth Fibonacci number.

        Args:
            n: The position in the Fibonacci sequence, ``fib(0) = 0``.
            limit: Optional bound. The iteration stops early and returns
                the first Fibonacci number greater than ``limit``.

        Returns:
            The nth Fibonacci number, or the first one above ``limit``.
        """
        if n <= 0:
            return 0
        prev_prev, prev = 0, 1
        for _ in range(n - 1):
            prev_prev, prev = prev, prev + prev_prev
            if limit is not None and prev > limit:
                break
        return prev

    def compute_sleep_time(self, attempt: Attempt) -> int:
        """Calculate Fibonacci sleep time.

        Args:
            attempt: The record of the last failed attempt.

        Returns:
            The calculated sleep time: ``multiplier * fibonacci(attempt_number)``,
            capped at ``maximum_wait``.
        """
        fib_number = self._fibonacci(
            attempt.attempt_number, limit=self._maximum_wait // self._multiplier
        )
        result = self._multiplier * fib_number
        # A negative product is treated like one above the cap
        if result > self._maximum_wait or result < 0:
            result = self._maximum_wait
        sleep_time = max(result, 0)
        logger.debug(
            f"Waiting {sleep_time}ms before attempt {attempt.attempt_number + 1} "
            f"(multiplier={self._multiplier}, maximum_wait={self._maximum_wait})"
        )
        return sleep_time

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(multiplier={self._multiplier}, "
            f"maximum_wait={self._maximum_wait})"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FibonacciWait):
            return NotImplemented
        return (self._multiplier, self._maximum_wait) == (other._multiplier, other._maximum_wait)

    def __hash__(self) -> int:
        return hash((FibonacciWait, self._multiplier, self._maximum_wait))

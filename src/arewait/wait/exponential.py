r"""Exponential wait strategy."""

from __future__ import annotations

__all__ = ["ExponentialWait"]

import logging
from typing import TYPE_CHECKING

from arewait.core.validation import check_argument, check_integer
from arewait.units import MAX_DURATION_MILLIS
from arewait.wait.base import BaseWaitStrategy

if TYPE_CHECKING:
    from arewait.attempt import Attempt

logger: logging.Logger = logging.getLogger(__name__)


def check_multiplier_and_maximum(multiplier: int, maximum_wait: int) -> tuple[int, int]:
    r"""Validate the parameters shared by the growing wait strategies.

    Args:
        multiplier: The multiplier, must be a positive integer.
        maximum_wait: The cap in milliseconds, must be a non-negative
            integer greater than ``multiplier``.

    Returns:
        The multiplier and the cap, as ``int``.

    Raises:
        InvalidArgumentError: If any constraint is violated.
    """
    multiplier = check_integer(multiplier, "multiplier")
    maximum_wait = check_integer(maximum_wait, "maximum_wait")
    check_argument(multiplier > 0, "multiplier must be > 0 but is %s", multiplier)
    check_argument(maximum_wait >= 0, "maximum_wait must be >= 0 but is %s", maximum_wait)
    check_argument(
        multiplier < maximum_wait,
        "multiplier must be < maximum_wait (%s) but is %s",
        maximum_wait,
        multiplier,
    )
    return multiplier, maximum_wait


class ExponentialWait(BaseWaitStrategy):
    """Exponential wait strategy.

    Calculates the sleep time as: ``multiplier * (2 ** attempt_number)``,
    capped at ``maximum_wait``.

    Growth is driven by the attempt number itself, so the first failed
    attempt already waits ``2 * multiplier`` milliseconds.

    Args:
        multiplier: The factor applied to ``2 ** attempt_number``
            (default: 1).
        maximum_wait: The maximum sleep time in milliseconds
            (default: the largest representable duration).

    Raises:
        InvalidArgumentError: If ``multiplier`` is not positive, if
            ``maximum_wait`` is negative, or if ``multiplier`` is not
            strictly smaller than ``maximum_wait``.

    Example:
        ```pycon
        >>> from arewait.attempt import Attempt
        >>> from arewait.wait import ExponentialWait
        >>> wait = ExponentialWait()
        >>> [wait.compute_sleep_time(Attempt.from_result(None, n)) for n in range(1, 7)]
        [2, 4, 8, 16, 32, 64]
        >>> # With maximum_wait cap
        >>> wait = ExponentialWait(maximum_wait=40)
        >>> [wait.compute_sleep_time(Attempt.from_result(None, n)) for n in range(5, 9)]
        [32, 40, 40, 40]

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

    def compute_sleep_time(self, attempt: Attempt) -> int:
        """Calculate exponential sleep time.

        Args:
            attempt: The record of the last failed attempt.

        Returns:
            The calculated sleep time: ``multiplier * (2 ** attempt_number)``,
            capped at ``maximum_wait``.
        """
        exponent = attempt.attempt_number
        # 2**exponent alone already exceeds the cap, skip the big product
        if exponent >= self._maximum_wait.bit_length():
            result = self._maximum_wait
        else:
            result = min(self._multiplier << exponent, self._maximum_wait)
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
        if not isinstance(other, ExponentialWait):
            return NotImplemented
        return (self._multiplier, self._maximum_wait) == (other._multiplier, other._maximum_wait)

    def __hash__(self) -> int:
        return hash((ExponentialWait, self._multiplier, self._maximum_wait))

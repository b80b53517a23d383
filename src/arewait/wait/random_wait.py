r"""Random wait strategy."""

from __future__ import annotations

__all__ = ["RandomWait"]

import logging
import random
import threading
from typing import TYPE_CHECKING

from arewait.core.validation import check_argument, check_integer
from arewait.wait.base import BaseWaitStrategy

if TYPE_CHECKING:
    from arewait.attempt import Attempt

logger: logging.Logger = logging.getLogger(__name__)

# Shared by every RandomWait instance for the lifetime of the process
_RANDOM = random.Random()  # noqa: S311
_RANDOM_LOCK = threading.Lock()

_MIN_INT64 = -(2**63)


def _random_positive_int64(rng: random.Random) -> int:
    r"""Draw a non-negative integer from a signed 64-bit draw.

    ``abs`` of the most negative 64-bit value is not representable in
    64 bits, so that one value is replaced by its neighbour first.
    """
    with _RANDOM_LOCK:
        raw = rng.getrandbits(64)
    value = raw - 2**64 if raw >= 2**63 else raw
    if value == _MIN_INT64:
        value = _MIN_INT64 + 1
    return abs(value)


class RandomWait(BaseWaitStrategy):
    """Random wait strategy.

    Returns a sleep time drawn uniformly from ``[minimum, maximum)``
    milliseconds, independently of the attempt number. Two calls with
    the same attempt usually return different values.

    Args:
        minimum: The inclusive lower bound in milliseconds.
        maximum: The exclusive upper bound in milliseconds.
        rng: Optional random generator. By default all instances share
            one process-wide generator.

    Raises:
        InvalidArgumentError: If ``minimum`` is negative or ``maximum``
            is not greater than ``minimum``.

    Example:
        ```pycon
        >>> from arewait.attempt import Attempt
        >>> from arewait.wait import RandomWait
        >>> wait = RandomWait(minimum=1000, maximum=2000)
        >>> 1000 <= wait.compute_sleep_time(Attempt.from_result(None, 1)) < 2000
        True

        ```
    """

    def __init__(self, minimum: int, maximum: int, rng: random.Random | None = None) -> None:
        minimum = check_integer(minimum, "minimum")
        maximum = check_integer(maximum, "maximum")
        check_argument(minimum >= 0, "minimum must be >= 0 but is %s", minimum)
        check_argument(
            maximum > minimum,
            "maximum must be > minimum but maximum is %s and minimum is %s",
            maximum,
            minimum,
        )
        self._minimum = minimum
        self._maximum = maximum
        self._rng = rng if rng is not None else _RANDOM

    @property
    def minimum(self) -> int:
        return self._minimum

    @property
    def maximum(self) -> int:
        return self._maximum

    def compute_sleep_time(self, attempt: Attempt) -> int:
        """Draw a random sleep time.

        Args:
            attempt: The record of the last failed attempt (unused
                except for logging).

        Returns:
            A sleep time in ``[minimum, maximum)`` milliseconds.
        """
        sleep_time = _random_positive_int64(self._rng) % (self._maximum - self._minimum)
        sleep_time += self._minimum
        logger.debug(
            f"Waiting {sleep_time}ms before attempt {attempt.attempt_number + 1} "
            f"(random in [{self._minimum}, {self._maximum}))"
        )
        return sleep_time

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(minimum={self._minimum}, maximum={self._maximum})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RandomWait):
            return NotImplemented
        return (self._minimum, self._maximum) == (other._minimum, other._maximum)

    def __hash__(self) -> int:
        return hash((RandomWait, self._minimum, self._maximum))

r"""Time units and conversion of durations to milliseconds.

Every time-valued parameter accepted by ``arewait.strategies`` is a
``(value, unit)`` pair. This module converts such pairs to the integer
milliseconds used internally by all wait strategies.
"""

from __future__ import annotations

__all__ = ["MAX_DURATION_MILLIS", "TimeUnit", "to_millis"]

import math
import numbers
from datetime import timedelta
from enum import Enum

from arewait.exceptions import InvalidArgumentError

# Largest representable duration (signed 64-bit milliseconds)
# Used as the cap of "unbounded" exponential and Fibonacci strategies
MAX_DURATION_MILLIS = 2**63 - 1

_ALIASES = {
    "ns": "nanoseconds",
    "us": "microseconds",
    "ms": "milliseconds",
    "s": "seconds",
    "sec": "seconds",
    "min": "minutes",
    "h": "hours",
    "d": "days",
}


class TimeUnit(Enum):
    """Units accepted for time-valued parameters.

    The value of each member is the number of nanoseconds in one unit.

    Example:
        ```pycon
        >>> from arewait.units import TimeUnit
        >>> TimeUnit.SECONDS.to_millis(3)
        3000
        >>> TimeUnit.MICROSECONDS.to_millis(2500)
        2
        >>> TimeUnit.from_name("min")
        <TimeUnit.MINUTES: 60000000000>

        ```
    """

    NANOSECONDS = 1
    MICROSECONDS = 1_000
    MILLISECONDS = 1_000_000
    SECONDS = 1_000_000_000
    MINUTES = 60_000_000_000
    HOURS = 3_600_000_000_000
    DAYS = 86_400_000_000_000

    def to_millis(self, value: int) -> int:
        """Convert a value expressed in this unit to milliseconds.

        Sub-millisecond remainders are truncated toward zero, and the
        result saturates at ``MAX_DURATION_MILLIS`` in both directions.

        Args:
            value: The duration expressed in this unit.

        Returns:
            The duration in milliseconds.
        """
        nanos = int(value) * self.value
        millis = abs(nanos) // 1_000_000
        if nanos < 0:
            millis = -millis
        return max(-MAX_DURATION_MILLIS - 1, min(millis, MAX_DURATION_MILLIS))

    @classmethod
    def from_name(cls, name: str) -> TimeUnit:
        """Look up a unit by name or short alias, case-insensitively.

        Args:
            name: The unit name, e.g. ``"seconds"``, ``"SECONDS"`` or ``"s"``.

        Returns:
            The matching unit.

        Raises:
            InvalidArgumentError: If the name does not match any unit.
        """
        key = name.strip().lower()
        key = _ALIASES.get(key, key)
        try:
            return cls[key.upper()]
        except KeyError:
            msg = f"unknown time unit: {name!r}"
            raise InvalidArgumentError(msg) from None


def to_millis(value: int | timedelta, unit: TimeUnit | str = TimeUnit.MILLISECONDS) -> int:
    """Convert a duration to integer milliseconds.

    Args:
        value: The duration value, or a ``timedelta`` in which case
            ``unit`` is ignored.
        unit: The unit of ``value``, either a ``TimeUnit`` or its name.

    Returns:
        The duration in milliseconds, truncated toward zero.

    Raises:
        InvalidArgumentError: If ``value`` is not a finite number or a
            ``timedelta``, or if ``unit`` is not a ``TimeUnit`` or the
            name of one.

    Example:
        ```pycon
        >>> from datetime import timedelta
        >>> from arewait.units import TimeUnit, to_millis
        >>> to_millis(2, TimeUnit.SECONDS)
        2000
        >>> to_millis(250)
        250
        >>> to_millis(1, "minutes")
        60000
        >>> to_millis(timedelta(seconds=1.5))
        1500

        ```
    """
    if isinstance(value, timedelta):
        return TimeUnit.MICROSECONDS.to_millis(
            (value.days * 86_400 + value.seconds) * 1_000_000 + value.microseconds
        )
    if unit is None:
        msg = "unit may not be None"
        raise InvalidArgumentError(msg)
    if isinstance(unit, str):
        unit = TimeUnit.from_name(unit)
    if not isinstance(unit, TimeUnit):
        msg = f"unit must be a TimeUnit or the name of one but is {unit!r}"
        raise InvalidArgumentError(msg)
    if not isinstance(value, numbers.Integral) and not (
        isinstance(value, numbers.Real) and math.isfinite(value)
    ):
        msg = f"duration must be a finite number or a timedelta but is {value!r}"
        raise InvalidArgumentError(msg)
    return unit.to_millis(value)

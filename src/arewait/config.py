r"""Configuration dataclass and defaults for wait strategies.

This module provides the default values used by the factory functions
and a dataclass-based configuration object that builds a wait strategy
from plain values, for example values loaded from a settings file.
"""

from __future__ import annotations

__all__ = ["DEFAULT_MULTIPLIER", "DEFAULT_UNIT", "WAIT_KINDS", "WaitConfig"]

from dataclasses import asdict, dataclass, replace
from typing import Any

from arewait.core.validation import check_argument
from arewait.units import MAX_DURATION_MILLIS, TimeUnit, to_millis
from arewait.wait import (
    BaseWaitStrategy,
    ExponentialWait,
    FibonacciWait,
    FixedWait,
    IncrementingWait,
    RandomWait,
)

# Default factor of exponential and Fibonacci waits
# With 1: the first failed attempt waits 2ms (exponential) or 1ms (Fibonacci)
DEFAULT_MULTIPLIER = 1

# Default unit of time-valued parameters
DEFAULT_UNIT = TimeUnit.MILLISECONDS

# Kinds of wait strategy that can be built from a WaitConfig
WAIT_KINDS = ("none", "fixed", "random", "incrementing", "exponential", "fibonacci")


@dataclass(frozen=True)
class WaitConfig:
    """Declarative configuration of a wait strategy.

    Only the fields relevant to ``kind`` are used when building the
    strategy. All time values are expressed in ``unit``.

    Args:
        kind: The kind of wait strategy, one of ``WAIT_KINDS``.
        sleep_time: The sleep time of a fixed wait.
        minimum_time: The lower bound of a random wait.
        maximum_time: The upper bound of a random wait, or the cap of an
            exponential or Fibonacci wait (unbounded if ``None``).
        initial_sleep_time: The first sleep time of an incrementing wait.
        increment: The increment of an incrementing wait.
        multiplier: The multiplier of an exponential or Fibonacci wait.
        unit: The unit of every time value, a ``TimeUnit`` or its name.

    Raises:
        InvalidArgumentError: If ``kind`` or ``unit`` is unknown.

    Example:
        ```pycon
        >>> from arewait.config import WaitConfig
        >>> config = WaitConfig(kind="exponential", maximum_time=30, unit="seconds")
        >>> config.build()
        ExponentialWait(multiplier=1, maximum_wait=30000)
        >>> config.merge(multiplier=100).build()
        ExponentialWait(multiplier=100, maximum_wait=30000)
        >>> config.multiplier  # Original unchanged
        1

        ```
    """

    kind: str = "none"
    sleep_time: int = 0
    minimum_time: int = 0
    maximum_time: int | None = None
    initial_sleep_time: int = 0
    increment: int = 0
    multiplier: int = DEFAULT_MULTIPLIER
    unit: TimeUnit | str = DEFAULT_UNIT

    def __post_init__(self) -> None:
        check_argument(
            self.kind in WAIT_KINDS, "kind must be one of %s but is %r", WAIT_KINDS, self.kind
        )
        if isinstance(self.unit, str):
            object.__setattr__(self, "unit", TimeUnit.from_name(self.unit))

    def merge(self, **overrides: Any) -> WaitConfig:
        """Create a new config with specified parameters overridden.

        Only non-None override values are applied.

        Args:
            **overrides: Keyword arguments for parameters to override.

        Returns:
            A new ``WaitConfig`` instance with overrides applied.
        """
        changes = {key: value for key, value in overrides.items() if value is not None}
        return replace(self, **changes)

    def to_dict(self) -> dict[str, Any]:
        """Convert the config to a dictionary.

        Returns:
            A dictionary of all fields, with the unit given by name.
        """
        data = asdict(self)
        data["unit"] = self.unit.name.lower()
        return data

    def build(self) -> BaseWaitStrategy:
        """Build the configured wait strategy.

        Returns:
            A new wait strategy.

        Raises:
            InvalidArgumentError: If a parameter is invalid for ``kind``.
        """
        unit = self.unit
        if self.kind == "fixed":
            return FixedWait(to_millis(self.sleep_time, unit))
        if self.kind == "random":
            check_argument(
                self.maximum_time is not None, "maximum_time is required for a random wait"
            )
            return RandomWait(
                to_millis(self.minimum_time, unit), to_millis(self.maximum_time, unit)
            )
        if self.kind == "incrementing":
            return IncrementingWait(
                to_millis(self.initial_sleep_time, unit), to_millis(self.increment, unit)
            )
        if self.kind in {"exponential", "fibonacci"}:
            maximum_wait = (
                MAX_DURATION_MILLIS
                if self.maximum_time is None
                else to_millis(self.maximum_time, unit)
            )
            cls = ExponentialWait if self.kind == "exponential" else FibonacciWait
            return cls(multiplier=self.multiplier, maximum_wait=maximum_wait)
        return FixedWait(0)

r"""Composite wait strategy summing several wait strategies."""

from __future__ import annotations

__all__ = ["CompositeWait"]

from typing import TYPE_CHECKING

from arewait.core.validation import check_state
from arewait.wait.base import BaseWaitStrategy

if TYPE_CHECKING:
    from collections.abc import Iterable

    from arewait.attempt import Attempt


class CompositeWait(BaseWaitStrategy):
    """Composite wait strategy.

    The sleep time is the sum of the sleep times of the wrapped
    strategies, computed one after another in order for the same
    attempt. Composite strategies can themselves be wrapped.

    The sum is not capped: each wrapped strategy applies its own bounds.

    Args:
        strategies: The ordered wait strategies to sum. Must contain at
            least one strategy and no ``None``.

    Raises:
        InvalidStateError: If ``strategies`` is empty or contains ``None``.

    Example:
        ```pycon
        >>> from arewait.attempt import Attempt
        >>> from arewait.wait import CompositeWait, FixedWait, IncrementingWait
        >>> wait = CompositeWait([FixedWait(100), IncrementingWait(500, 100)])
        >>> wait.compute_sleep_time(Attempt.from_result(None, 3))
        800

        ```
    """

    def __init__(self, strategies: Iterable[BaseWaitStrategy | None]) -> None:
        strategies = tuple(strategies)
        check_state(len(strategies) > 0, "Must have at least one wait strategy")
        check_state(
            all(strategy is not None for strategy in strategies),
            "Cannot have a null wait strategy",
        )
        self._strategies: tuple[BaseWaitStrategy, ...] = strategies

    @property
    def strategies(self) -> tuple[BaseWaitStrategy, ...]:
        return self._strategies

    def compute_sleep_time(self, attempt: Attempt) -> int:
        """Sum the sleep times of all wrapped strategies.

        Args:
            attempt: The record of the last failed attempt.

        Returns:
            The total sleep time in milliseconds.
        """
        wait_time = 0
        for strategy in self._strategies:
            wait_time += strategy.compute_sleep_time(attempt)
        return wait_time

    def __repr__(self) -> str:
        inner = ", ".join(repr(strategy) for strategy in self._strategies)
        return f"{self.__class__.__qualname__}([{inner}])"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CompositeWait):
            return NotImplemented
        return self._strategies == other._strategies

    def __hash__(self) -> int:
        return hash((CompositeWait, self._strategies))

r"""Abstract base class for wait strategies."""

from __future__ import annotations

__all__ = ["BaseWaitStrategy"]

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from arewait.attempt import Attempt


class BaseWaitStrategy(ABC):
    """Abstract base class for wait strategies.

    A wait strategy determines how long to wait before the next attempt
    based on the record of the last failed attempt. Strategies are
    configured once, validated at construction, and may then be shared
    between any number of retry sessions.
    """

    @abstractmethod
    def compute_sleep_time(self, attempt: Attempt) -> int:
        """Compute the time to sleep before the next attempt.

        Args:
            attempt: The record of the last failed attempt.

        Returns:
            The sleep time in milliseconds. Never negative.
        """

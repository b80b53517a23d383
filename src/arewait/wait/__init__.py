r"""Wait strategies computing the delay before the next attempt.

This package provides the wait strategy implementations: fixed, random,
incrementing, exponential, Fibonacci, exception-driven and composite
waits.
"""

from __future__ import annotations

__all__ = [
    "BaseWaitStrategy",
    "CompositeWait",
    "ExceptionWait",
    "ExponentialWait",
    "FibonacciWait",
    "FixedWait",
    "IncrementingWait",
    "RandomWait",
]

from arewait.wait.base import BaseWaitStrategy
from arewait.wait.composite import CompositeWait
from arewait.wait.exception import ExceptionWait
from arewait.wait.exponential import ExponentialWait
from arewait.wait.fibonacci import FibonacciWait
from arewait.wait.fixed import FixedWait
from arewait.wait.incrementing import IncrementingWait
from arewait.wait.random_wait import RandomWait

r"""arewait - Wait strategies for retrying operations.

This package computes how long a retry loop should sleep before the next
attempt of a failed operation. It never sleeps and never calls the
operation itself: a wait strategy is a reusable function from the record
of the last failed attempt to a sleep time in milliseconds.

Key Features:
    - Fixed, random, incrementing, exponential and Fibonacci waits
    - Waits computed from the exception of the last attempt, e.g. from a
      server-supplied Retry-After header
    - Composition of several strategies by summing their sleep times
    - Eager validation at construction, infallible evaluation
    - Thread-safe shared random generator for jittered waits

Example:
    ```pycon
    >>> from arewait import Attempt, exponential_wait, join, random_wait
    >>> wait = join(exponential_wait(10, "seconds", multiplier=100), random_wait(100))
    >>> attempt = Attempt.from_exception(ConnectionError("reset"), attempt_number=3)
    >>> 800 <= wait.compute_sleep_time(attempt) < 900
    True

    ```
"""

from __future__ import annotations

__all__ = [
    "Attempt",
    "BaseWaitStrategy",
    "InvalidArgumentError",
    "InvalidStateError",
    "TimeUnit",
    "WaitConfig",
    "WaitStrategyError",
    "__version__",
    "exception_wait",
    "exponential_wait",
    "fibonacci_wait",
    "fixed_wait",
    "incrementing_wait",
    "join",
    "no_wait",
    "random_wait",
]

from importlib.metadata import PackageNotFoundError, version

from arewait.attempt import Attempt
from arewait.config import WaitConfig
from arewait.exceptions import InvalidArgumentError, InvalidStateError, WaitStrategyError
from arewait.strategies import (
    exception_wait,
    exponential_wait,
    fibonacci_wait,
    fixed_wait,
    incrementing_wait,
    join,
    no_wait,
    random_wait,
)
from arewait.units import TimeUnit
from arewait.wait import BaseWaitStrategy

try:
    __version__ = version(__name__)
except PackageNotFoundError:  # pragma: no cover
    # Package is not installed, fallback if needed
    __version__ = "0.0.0"

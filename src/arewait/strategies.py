r"""Factory functions for wait strategies.

This module is the main construction surface of the library. Each
function validates its parameters eagerly and returns a reusable wait
strategy. Time-valued parameters are ``(value, unit)`` pairs where the
unit is a ``TimeUnit`` or its name, and defaults to milliseconds. A
``datetime.timedelta`` is also accepted as value.

Example:
    ```pycon
    >>> from arewait.attempt import Attempt
    >>> from arewait.strategies import exponential_wait, fixed_wait, join, random_wait
    >>> wait = join(exponential_wait(100, 30, "seconds"), random_wait(500))
    >>> 200 <= wait.compute_sleep_time(Attempt.from_exception(OSError(), 1)) < 700
    True
    >>> fixed_wait(2, "seconds").compute_sleep_time(Attempt.from_exception(OSError(), 1))
    2000

    ```
"""

from __future__ import annotations

__all__ = [
    "exception_wait",
    "exponential_wait",
    "fibonacci_wait",
    "fixed_wait",
    "incrementing_wait",
    "join",
    "no_wait",
    "random_wait",
]

from typing import TYPE_CHECKING, Any, TypeVar

from arewait.config import DEFAULT_MULTIPLIER, DEFAULT_UNIT
from arewait.core.validation import check_not_none
from arewait.units import MAX_DURATION_MILLIS, TimeUnit, to_millis
from arewait.wait import (
    BaseWaitStrategy,
    CompositeWait,
    ExceptionWait,
    ExponentialWait,
    FibonacciWait,
    FixedWait,
    IncrementingWait,
    RandomWait,
)

if TYPE_CHECKING:
    from collections.abc import Callable
    from datetime import timedelta

E = TypeVar("E", bound=BaseException)

_NO_WAIT = FixedWait(0)


def _bind_positional(
    name: str,
    args: tuple[Any, ...],
    forms: dict[int, tuple[str, ...]],
    keywords: dict[str, Any],
) -> dict[str, Any]:
    r"""Bind positional arguments to parameter names by their count.

    Args:
        name: The name of the factory function, used in error messages.
        args: The positional arguments.
        forms: The parameter names accepted for each number of
            positional arguments.
        keywords: The keyword arguments, ``None`` when not given.

    Returns:
        The keyword arguments updated with the positional ones.

    Raises:
        TypeError: If the number of positional arguments matches no
            form, or a parameter is given both ways.
    """
    if len(args) not in forms:
        counts = sorted(forms)
        expected = ", ".join(str(count) for count in counts[:-1]) + f" or {counts[-1]}"
        msg = f"{name}() takes {expected} positional arguments but {len(args)} were given"
        raise TypeError(msg)
    bound = dict(keywords)
    for key, value in zip(forms[len(args)], args, strict=True):
        if bound[key] is not None:
            msg = f"{name}() got multiple values for argument {key!r}"
            raise TypeError(msg)
        bound[key] = value
    return bound


def _maximum_wait(maximum_time: int | timedelta | None, unit: TimeUnit | str | None) -> int:
    if maximum_time is None:
        return MAX_DURATION_MILLIS
    return to_millis(maximum_time, DEFAULT_UNIT if unit is None else unit)


def no_wait() -> FixedWait:
    """Return a wait strategy that does not wait at all.

    Returns:
        A shared fixed wait strategy of 0 milliseconds.
    """
    return _NO_WAIT


def fixed_wait(sleep_time: int | timedelta, unit: TimeUnit | str = DEFAULT_UNIT) -> FixedWait:
    """Return a wait strategy that sleeps a fixed amount of time.

    Args:
        sleep_time: The time to sleep.
        unit: The unit of ``sleep_time``.

    Returns:
        A fixed wait strategy.

    Raises:
        InvalidArgumentError: If ``sleep_time`` is negative.

    Example:
        ```pycon
        >>> from arewait.strategies import fixed_wait
        >>> fixed_wait(1000)
        FixedWait(sleep_time=1000)
        >>> fixed_wait(3, "seconds")
        FixedWait(sleep_time=3000)

        ```
    """
    return FixedWait(to_millis(sleep_time, unit))


def random_wait(
    *args: int | timedelta | TimeUnit | str,
    minimum_time: int | timedelta | None = None,
    minimum_unit: TimeUnit | str | None = None,
    maximum_time: int | timedelta | None = None,
    maximum_unit: TimeUnit | str | None = None,
) -> RandomWait:
    """Return a wait strategy that sleeps a random amount of time.

    The sleep time is drawn uniformly from ``[minimum_time, maximum_time)``.
    Positional arguments take one of two forms:

    - ``random_wait(maximum_time, maximum_unit)`` with a minimum of 0,
      the unit being optional.
    - ``random_wait(minimum_time, minimum_unit, maximum_time, maximum_unit)``.

    Args:
        *args: The bounds, in one of the forms above.
        minimum_time: The inclusive lower bound of the sleep time
            (default: 0).
        minimum_unit: The unit of ``minimum_time``. Defaults to
            ``maximum_unit``.
        maximum_time: The exclusive upper bound of the sleep time.
        maximum_unit: The unit of ``maximum_time`` (default: milliseconds).

    Returns:
        A random wait strategy.

    Raises:
        InvalidArgumentError: If the maximum is missing, the minimum is
            negative, or the maximum is not greater than the minimum.
        TypeError: If the positional arguments match no form.

    Example:
        ```pycon
        >>> from arewait.strategies import random_wait
        >>> random_wait(2000)
        RandomWait(minimum=0, maximum=2000)
        >>> random_wait(1000, "ms", 2, "seconds")
        RandomWait(minimum=1000, maximum=2000)
        >>> random_wait(maximum_time=2, maximum_unit="seconds", minimum_time=500)
        RandomWait(minimum=500, maximum=2000)

        ```
    """
    bound = _bind_positional(
        "random_wait",
        args,
        {
            0: (),
            1: ("maximum_time",),
            2: ("maximum_time", "maximum_unit"),
            4: ("minimum_time", "minimum_unit", "maximum_time", "maximum_unit"),
        },
        {
            "minimum_time": minimum_time,
            "minimum_unit": minimum_unit,
            "maximum_time": maximum_time,
            "maximum_unit": maximum_unit,
        },
    )
    check_not_none(bound["maximum_time"], "maximum_time")
    maximum_unit = DEFAULT_UNIT if bound["maximum_unit"] is None else bound["maximum_unit"]
    minimum_unit = maximum_unit if bound["minimum_unit"] is None else bound["minimum_unit"]
    minimum_time = 0 if bound["minimum_time"] is None else bound["minimum_time"]
    return RandomWait(
        minimum=to_millis(minimum_time, minimum_unit),
        maximum=to_millis(bound["maximum_time"], maximum_unit),
    )


def incrementing_wait(
    *args: int | timedelta | TimeUnit | str,
    initial_sleep_time: int | timedelta | None = None,
    initial_unit: TimeUnit | str | None = None,
    increment: int | timedelta | None = None,
    increment_unit: TimeUnit | str | None = None,
) -> IncrementingWait:
    """Return a wait strategy that sleeps longer after each failure.

    The strategy sleeps ``initial_sleep_time`` after the first failed
    attempt, and ``increment`` more after each further failed attempt.
    Positional arguments take one of two forms:

    - ``incrementing_wait(initial_sleep_time, increment)`` in milliseconds.
    - ``incrementing_wait(initial_sleep_time, initial_unit, increment,
      increment_unit)``.

    Args:
        *args: The durations, in one of the forms above.
        initial_sleep_time: The time to sleep after the first failure.
        initial_unit: The unit of ``initial_sleep_time``
            (default: milliseconds).
        increment: The time added after each further failure. May be
            negative.
        increment_unit: The unit of ``increment``. Defaults to
            ``initial_unit``.

    Returns:
        An incrementing wait strategy.

    Raises:
        InvalidArgumentError: If a duration is missing or
            ``initial_sleep_time`` is negative.
        TypeError: If the positional arguments match no form.

    Example:
        ```pycon
        >>> from arewait.strategies import incrementing_wait
        >>> incrementing_wait(500, 100)
        IncrementingWait(initial_sleep_time=500, increment=100)
        >>> incrementing_wait(1, "seconds", 250, "ms")
        IncrementingWait(initial_sleep_time=1000, increment=250)

        ```
    """
    bound = _bind_positional(
        "incrementing_wait",
        args,
        {
            0: (),
            2: ("initial_sleep_time", "increment"),
            4: ("initial_sleep_time", "initial_unit", "increment", "increment_unit"),
        },
        {
            "initial_sleep_time": initial_sleep_time,
            "initial_unit": initial_unit,
            "increment": increment,
            "increment_unit": increment_unit,
        },
    )
    check_not_none(bound["initial_sleep_time"], "initial_sleep_time")
    check_not_none(bound["increment"], "increment")
    initial_unit = DEFAULT_UNIT if bound["initial_unit"] is None else bound["initial_unit"]
    increment_unit = initial_unit if bound["increment_unit"] is None else bound["increment_unit"]
    return IncrementingWait(
        initial_sleep_time=to_millis(bound["initial_sleep_time"], initial_unit),
        increment=to_millis(bound["increment"], increment_unit),
    )


# Positional forms shared by the exponential and Fibonacci factories
_GROWING_FORMS = {
    0: (),
    1: ("maximum_time",),
    2: ("maximum_time", "unit"),
    3: ("multiplier", "maximum_time", "unit"),
}


def exponential_wait(
    *args: int | timedelta | TimeUnit | str,
    multiplier: int | None = None,
    maximum_time: int | timedelta | None = None,
    unit: TimeUnit | str | None = None,
) -> ExponentialWait:
    """Return a wait strategy that sleeps exponentially longer after
    each failure.

    The sleep time is ``multiplier * 2 ** attempt_number`` milliseconds,
    capped at ``maximum_time``. Positional arguments take one of the
    forms ``exponential_wait()``, ``exponential_wait(maximum_time, unit)``
    (the unit being optional) or
    ``exponential_wait(multiplier, maximum_time, unit)``.

    Args:
        *args: The parameters, in one of the forms above.
        multiplier: The factor applied to the exponential term
            (default: 1).
        maximum_time: The maximum time to sleep. Unbounded if ``None``.
        unit: The unit of ``maximum_time`` (default: milliseconds).

    Returns:
        An exponential wait strategy.

    Raises:
        InvalidArgumentError: If ``multiplier`` is not positive, the
            maximum is negative, or ``multiplier`` is not smaller than
            the maximum.
        TypeError: If the positional arguments match no form.

    Example:
        ```pycon
        >>> from arewait.strategies import exponential_wait
        >>> exponential_wait(40)
        ExponentialWait(multiplier=1, maximum_wait=40)
        >>> exponential_wait(1000, 50, "seconds")
        ExponentialWait(multiplier=1000, maximum_wait=50000)

        ```
    """
    bound = _bind_positional(
        "exponential_wait",
        args,
        _GROWING_FORMS,
        {"multiplier": multiplier, "maximum_time": maximum_time, "unit": unit},
    )
    return ExponentialWait(
        multiplier=DEFAULT_MULTIPLIER if bound["multiplier"] is None else bound["multiplier"],
        maximum_wait=_maximum_wait(bound["maximum_time"], bound["unit"]),
    )


def fibonacci_wait(
    *args: int | timedelta | TimeUnit | str,
    multiplier: int | None = None,
    maximum_time: int | timedelta | None = None,
    unit: TimeUnit | str | None = None,
) -> FibonacciWait:
    """Return a wait strategy that sleeps longer after each failure,
    following the Fibonacci sequence.

    The sleep time is ``multiplier * fibonacci(attempt_number)``
    milliseconds, capped at ``maximum_time``. Positional arguments take
    the same forms as ``exponential_wait``.

    Args:
        *args: The parameters, in one of the forms of ``exponential_wait``.
        multiplier: The factor applied to the Fibonacci number
            (default: 1).
        maximum_time: The maximum time to sleep. Unbounded if ``None``.
        unit: The unit of ``maximum_time`` (default: milliseconds).

    Returns:
        A Fibonacci wait strategy.

    Raises:
        InvalidArgumentError: If ``multiplier`` is not positive, the
            maximum is negative, or ``multiplier`` is not smaller than
            the maximum.
        TypeError: If the positional arguments match no form.
    """
    bound = _bind_positional(
        "fibonacci_wait",
        args,
        _GROWING_FORMS,
        {"multiplier": multiplier, "maximum_time": maximum_time, "unit": unit},
    )
    return FibonacciWait(
        multiplier=DEFAULT_MULTIPLIER if bound["multiplier"] is None else bound["multiplier"],
        maximum_wait=_maximum_wait(bound["maximum_time"], bound["unit"]),
    )


def exception_wait(exception_class: type[E], function: Callable[[E], int]) -> ExceptionWait[E]:
    """Return a wait strategy whose sleep time is computed from the
    exception of the last attempt.

    If the exception does not match ``exception_class``, or the attempt
    succeeded, the sleep time is 0.

    Args:
        exception_class: The exception type to match, subclasses included.
        function: Maps a matching exception to a sleep time in milliseconds.

    Returns:
        An exception wait strategy.

    Raises:
        InvalidArgumentError: If either argument is ``None`` or invalid.

    Example:
        ```pycon
        >>> from arewait.attempt import Attempt
        >>> from arewait.strategies import exception_wait
        >>> wait = exception_wait(ConnectionError, lambda exc: 250)
        >>> wait.compute_sleep_time(Attempt.from_exception(ConnectionResetError(), 1))
        250

        ```
    """
    check_not_none(exception_class, "exception_class")
    check_not_none(function, "function")
    return ExceptionWait(exception_class, function)


def join(*strategies: BaseWaitStrategy | None) -> CompositeWait:
    """Join one or more wait strategies into a composite one.

    The sleep time of the composite strategy is the total of the sleep
    times computed by each strategy, one after another in order.

    Args:
        *strategies: The wait strategies to apply.

    Returns:
        A composite wait strategy.

    Raises:
        InvalidStateError: If no strategy is given or one is ``None``.

    Example:
        ```pycon
        >>> from arewait.strategies import exponential_wait, fixed_wait, join
        >>> join(fixed_wait(100), exponential_wait(40))
        CompositeWait([FixedWait(sleep_time=100), ExponentialWait(multiplier=1, maximum_wait=40)])

        ```
    """
    return CompositeWait(strategies)

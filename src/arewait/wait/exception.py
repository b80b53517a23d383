r"""Wait strategy driven by the exception of the last attempt."""

from __future__ import annotations

__all__ = ["ExceptionWait"]

import logging
from typing import TYPE_CHECKING, Generic, TypeVar

from arewait.core.validation import check_argument
from arewait.wait.base import BaseWaitStrategy

if TYPE_CHECKING:
    from collections.abc import Callable

    from arewait.attempt import Attempt

logger: logging.Logger = logging.getLogger(__name__)

E = TypeVar("E", bound=BaseException)


class ExceptionWait(BaseWaitStrategy, Generic[E]):
    """Wait strategy computed from the exception of the last attempt.

    If the last attempt raised an instance of ``exception_class`` (or of
    one of its subclasses), the sleep time is ``function(exception)``.
    Otherwise, including when the attempt succeeded, the sleep time is 0.

    This is useful when the sleep time is dictated by the failure itself,
    for example a server-supplied retry delay carried by the exception.

    Args:
        exception_class: The exception type to match.
        function: Maps a matching exception to a sleep time in
            milliseconds. Negative values are floored at 0.

    Raises:
        InvalidArgumentError: If ``exception_class`` is not an exception
            type or ``function`` is not callable.

    Example:
        ```pycon
        >>> from arewait.attempt import Attempt
        >>> from arewait.wait import ExceptionWait
        >>> wait = ExceptionWait(TimeoutError, lambda exc: 1500)
        >>> wait.compute_sleep_time(Attempt.from_exception(TimeoutError(), 1))
        1500
        >>> wait.compute_sleep_time(Attempt.from_exception(KeyError(), 1))
        0
        >>> wait.compute_sleep_time(Attempt.from_result("ok", 1))
        0

        ```
    """

    def __init__(self, exception_class: type[E], function: Callable[[E], int]) -> None:
        check_argument(
            isinstance(exception_class, type) and issubclass(exception_class, BaseException),
            "exception_class must be an exception type but is %r",
            exception_class,
        )
        check_argument(callable(function), "function must be callable but is %r", function)
        self._exception_class = exception_class
        self._function = function

    @property
    def exception_class(self) -> type[E]:
        return self._exception_class

    @property
    def function(self) -> Callable[[E], int]:
        return self._function

    def compute_sleep_time(self, attempt: Attempt) -> int:
        """Calculate the sleep time from the exception of the attempt.

        Args:
            attempt: The record of the last failed attempt.

        Returns:
            ``function(exception)`` if the attempt raised a matching
            exception, otherwise 0.
        """
        exception = attempt.exception
        if exception is None or not isinstance(exception, self._exception_class):
            return 0
        sleep_time = max(int(self._function(exception)), 0)
        logger.debug(
            f"Waiting {sleep_time}ms before attempt {attempt.attempt_number + 1} "
            f"(computed from {type(exception).__qualname__})"
        )
        return sleep_time

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(exception_class={self._exception_class.__qualname__}, "
            f"function={self._function!r})"
        )

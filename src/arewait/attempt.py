r"""Immutable record of one completed try of a retried operation.

An ``Attempt`` is created by the retry loop right after each try
completes and handed once to a wait strategy. Wait strategies only read
it.
"""

from __future__ import annotations

__all__ = ["Attempt"]

from dataclasses import dataclass, field
from typing import Any

from arewait.core.validation import check_argument

_NO_RESULT = object()


@dataclass(frozen=True)
class Attempt:
    """Outcome and timing of one completed try.

    An attempt holds exactly one outcome: either a result (which may
    be ``None``) or a captured exception. Use ``from_result`` and
    ``from_exception`` to build one.

    Args:
        attempt_number: The ordinal of the try, 1 for the first try.
        delay_since_first_attempt: Milliseconds elapsed since the first
            try began. Wait strategies do not read it.
        result: The value returned by the try, if it succeeded.
        exception: The exception raised by the try, if it failed.

    Raises:
        InvalidArgumentError: If ``attempt_number`` is lower than 1, if
            ``delay_since_first_attempt`` is negative, or if both or
            neither outcome are given.

    Example:
        ```pycon
        >>> from arewait.attempt import Attempt
        >>> attempt = Attempt.from_exception(TimeoutError("slow"), attempt_number=2)
        >>> attempt.has_exception()
        True
        >>> attempt.attempt_number
        2
        >>> Attempt.from_result(42, attempt_number=1).get()
        42

        ```
    """

    attempt_number: int
    delay_since_first_attempt: int = 0
    result: Any = field(default=_NO_RESULT, repr=False)
    exception: BaseException | None = None

    def __post_init__(self) -> None:
        check_argument(
            self.attempt_number >= 1,
            "attempt_number must be >= 1 but is %s",
            self.attempt_number,
        )
        check_argument(
            self.delay_since_first_attempt >= 0,
            "delay_since_first_attempt must be >= 0 but is %s",
            self.delay_since_first_attempt,
        )
        has_result = self.result is not _NO_RESULT
        check_argument(
            has_result != (self.exception is not None),
            "an attempt must have exactly one of a result or an exception",
        )

    @classmethod
    def from_result(
        cls, result: Any, attempt_number: int, delay_since_first_attempt: int = 0
    ) -> Attempt:
        """Create the record of a try that returned a value."""
        return cls(
            attempt_number=attempt_number,
            delay_since_first_attempt=delay_since_first_attempt,
            result=result,
        )

    @classmethod
    def from_exception(
        cls,
        exception: BaseException,
        attempt_number: int,
        delay_since_first_attempt: int = 0,
    ) -> Attempt:
        """Create the record of a try that raised an exception."""
        return cls(
            attempt_number=attempt_number,
            delay_since_first_attempt=delay_since_first_attempt,
            exception=exception,
        )

    def has_result(self) -> bool:
        return self.exception is None

    def has_exception(self) -> bool:
        return self.exception is not None

    def get(self) -> Any:
        """Return the result of the try, or re-raise its exception.

        Returns:
            The value returned by the try.

        Raises:
            BaseException: The exception captured by the try, if any.
        """
        if self.exception is not None:
            raise self.exception
        return self.result

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from arewait.attempt import Attempt

if TYPE_CHECKING:
    from collections.abc import Callable


@pytest.fixture
def failed_attempt() -> Callable[..., Attempt]:
    """Create a factory of failed attempt records.

    Returns:
        A function taking an attempt number and an optional delay since
        the first attempt, and returning an attempt that raised a
        ``RuntimeError``.

    Example:
        >>> def test_wait(failed_attempt):
        ...     attempt = failed_attempt(3)
        ...     assert attempt.attempt_number == 3
    """

    def _make(attempt_number: int, delay_since_first_attempt: int = 0) -> Attempt:
        return Attempt.from_exception(
            RuntimeError("boom"),
            attempt_number=attempt_number,
            delay_since_first_attempt=delay_since_first_attempt,
        )

    return _make


@pytest.fixture
def successful_attempt() -> Attempt:
    """Create the record of a try that returned a value."""
    return Attempt.from_result("ok", attempt_number=1, delay_since_first_attempt=10)

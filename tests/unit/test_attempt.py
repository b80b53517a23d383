r"""Unit tests for the Attempt record."""

from __future__ import annotations

import dataclasses

import pytest

from arewait.attempt import Attempt
from arewait.exceptions import InvalidArgumentError

#############################
#     Tests for Attempt     #
#############################


def test_attempt_from_result() -> None:
    attempt = Attempt.from_result(42, attempt_number=3, delay_since_first_attempt=1500)
    assert attempt.attempt_number == 3
    assert attempt.delay_since_first_attempt == 1500
    assert attempt.has_result()
    assert not attempt.has_exception()
    assert attempt.exception is None
    assert attempt.get() == 42


def test_attempt_from_none_result() -> None:
    """Test that None is a valid result."""
    attempt = Attempt.from_result(None, attempt_number=1)
    assert attempt.has_result()
    assert attempt.get() is None


def test_attempt_from_exception() -> None:
    error = ValueError("bad value")
    attempt = Attempt.from_exception(error, attempt_number=2, delay_since_first_attempt=10)
    assert attempt.has_exception()
    assert not attempt.has_result()
    assert attempt.exception is error


def test_attempt_get_reraises_exception() -> None:
    attempt = Attempt.from_exception(ValueError("bad value"), attempt_number=1)
    with pytest.raises(ValueError, match=r"bad value"):
        attempt.get()


def test_attempt_default_delay() -> None:
    assert Attempt.from_result("ok", attempt_number=1).delay_since_first_attempt == 0


def test_attempt_is_immutable() -> None:
    attempt = Attempt.from_result("ok", attempt_number=1)
    with pytest.raises(dataclasses.FrozenInstanceError):
        attempt.attempt_number = 2  # type: ignore[misc]


@pytest.mark.parametrize("attempt_number", [0, -1])
def test_attempt_invalid_attempt_number(attempt_number: int) -> None:
    with pytest.raises(
        InvalidArgumentError, match=rf"^attempt_number must be >= 1 but is {attempt_number}$"
    ):
        Attempt.from_result("ok", attempt_number=attempt_number)


def test_attempt_negative_delay() -> None:
    with pytest.raises(
        InvalidArgumentError, match=r"^delay_since_first_attempt must be >= 0 but is -5$"
    ):
        Attempt.from_result("ok", attempt_number=1, delay_since_first_attempt=-5)


def test_attempt_requires_an_outcome() -> None:
    with pytest.raises(InvalidArgumentError, match=r"exactly one of a result or an exception"):
        Attempt(attempt_number=1)


def test_attempt_rejects_both_outcomes() -> None:
    with pytest.raises(InvalidArgumentError, match=r"exactly one of a result or an exception"):
        Attempt(attempt_number=1, result="ok", exception=ValueError())

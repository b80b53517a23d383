r"""Unit tests for Retry-After header parsing utilities."""

from __future__ import annotations

from datetime import datetime, timezone
from unittest.mock import Mock, patch

import httpx
import pytest

from arewait.attempt import Attempt
from arewait.strategies import exception_wait, fixed_wait, join
from arewait.units import MAX_DURATION_MILLIS
from arewait.utils import parse_retry_after, retry_after_millis


def make_status_error(
    status_code: int, headers: dict[str, str] | None = None
) -> httpx.HTTPStatusError:
    request = httpx.Request("GET", "https://api.example.com/data")
    response = httpx.Response(status_code, headers=headers, request=request)
    return httpx.HTTPStatusError(f"HTTP {status_code}", request=request, response=response)


def frozen_now() -> Mock:
    return Mock(
        spec=datetime,
        now=Mock(
            return_value=datetime(
                year=2015, month=10, day=21, hour=7, minute=28, second=0, tzinfo=timezone.utc
            )
        ),
    )


#######################################
#     Tests for parse_retry_after     #
#######################################


@pytest.mark.parametrize(
    ("header", "seconds"), [("1", 1.0), ("0", 0.0), ("120", 120.0), ("3600", 3600.0)]
)
def test_parse_retry_after_integer(header: str, seconds: float) -> None:
    """Test parsing Retry-After header with integer seconds."""
    assert parse_retry_after(header) == seconds


def test_parse_retry_after_negative_integer() -> None:
    assert parse_retry_after("-5") == 0.0


@pytest.mark.parametrize("header", [None, "invalid", "not a number", "1.2.3"])
def test_parse_retry_after_none(header: str | None) -> None:
    """Test parsing None or invalid Retry-After header."""
    assert parse_retry_after(header) is None


def test_parse_retry_after_http_date() -> None:
    """Test parsing Retry-After header with HTTP-date format."""
    with patch("arewait.utils.retry_after.datetime", frozen_now()):
        result = parse_retry_after("Wed, 21 Oct 2015 07:29:00 GMT")

    assert result is not None
    assert 59.0 <= result <= 61.0


def test_parse_retry_after_http_date_in_the_past() -> None:
    with patch("arewait.utils.retry_after.datetime", frozen_now()):
        assert parse_retry_after("Wed, 21 Oct 2015 07:00:00 GMT") == 0.0


########################################
#     Tests for retry_after_millis     #
########################################


def test_retry_after_millis_seconds() -> None:
    assert retry_after_millis(make_status_error(429, {"Retry-After": "3"})) == 3000


def test_retry_after_millis_http_date() -> None:
    error = make_status_error(503, {"Retry-After": "Wed, 21 Oct 2015 07:28:30 GMT"})
    with patch("arewait.utils.retry_after.datetime", frozen_now()):
        assert retry_after_millis(error) == 30_000


@pytest.mark.parametrize("headers", [None, {"Retry-After": "soon"}, {"Retry-After": "nan"}])
def test_retry_after_millis_missing_or_invalid(headers: dict[str, str] | None) -> None:
    assert retry_after_millis(make_status_error(503, headers)) == 0


def test_retry_after_millis_infinite() -> None:
    assert retry_after_millis(make_status_error(503, {"Retry-After": "inf"})) == 0


def test_retry_after_millis_huge_value() -> None:
    error = make_status_error(503, {"Retry-After": str(10**20)})
    assert retry_after_millis(error) == MAX_DURATION_MILLIS


def test_retry_after_millis_without_response() -> None:
    assert retry_after_millis(Mock(spec=[])) == 0


def test_retry_after_millis_other_error_with_response() -> None:
    """Test that only httpx status errors are read."""
    error = Mock(spec=["response"], response=Mock(headers={"Retry-After": "3"}))
    assert retry_after_millis(error) == 0
    assert retry_after_millis(httpx.ReadTimeout("timed out")) == 0


def test_retry_after_millis_with_exception_wait() -> None:
    """Test the mapping function combined with other wait strategies."""
    wait = join(fixed_wait(100), exception_wait(httpx.HTTPStatusError, retry_after_millis))
    limited = Attempt.from_exception(make_status_error(429, {"Retry-After": "2"}), 1)
    assert wait.compute_sleep_time(limited) == 2100
    timeout = Attempt.from_exception(httpx.ReadTimeout("timed out"), 1)
    assert wait.compute_sleep_time(timeout) == 100

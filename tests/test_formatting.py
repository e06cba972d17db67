"""Tests for attempt result display formatting."""

from __future__ import annotations

import pytest

from attempt_results.core.formatting import centiseconds_to_clock_format, format_value
from attempt_results.core.models import ResultFormat


@pytest.mark.parametrize(
    ("value", "expected"),
    [(0, ""), (-1, "DNF"), (-2, "DNS")],
)
def test_sentinels(value: int, expected: str) -> None:
    for fmt in ResultFormat:
        assert format_value(value, fmt) == expected


def test_strips_leading_zeros() -> None:
    assert format_value(150, ResultFormat.DURATION) == "1.50"
    assert format_value(60 * 100, ResultFormat.DURATION) == "1:00.00"
    assert format_value(60 * 60 * 100 + 15, ResultFormat.DURATION) == "1:00:00.15"


def test_keeps_one_leading_zero_under_a_second() -> None:
    assert centiseconds_to_clock_format(15) == "0.15"
    assert centiseconds_to_clock_format(5) == "0.05"


def test_clock_format_minutes_and_seconds() -> None:
    assert centiseconds_to_clock_format(6123) == "1:01.23"
    assert centiseconds_to_clock_format(1000) == "10.00"
    assert centiseconds_to_clock_format(25 * 60 * 60 * 100) == "25:00:00.00"


def test_fewest_moves_single_and_average() -> None:
    assert format_value(28, ResultFormat.MOVE_COUNT) == "28"
    assert format_value(2833, ResultFormat.MOVE_COUNT, is_average=True) == "28.33"
    assert format_value(2500, ResultFormat.MOVE_COUNT, is_average=True) == "25.00"


def test_multi_blind_shows_cubes_and_time_without_centiseconds() -> None:
    assert format_value(900348002, ResultFormat.PACKED) == "11/13 58:00"
    assert format_value(970360001, ResultFormat.PACKED) == "3/4 1:00:00"

"""Tests for the multi-blind attempt result codec and autocompletion."""

from __future__ import annotations

import pytest

from attempt_results.core.config import ScoringSettings
from attempt_results.core.mbld import (
    autocomplete_mbld_decoded_value,
    decode_mbld_attempt_result,
    encode_mbld_attempt_result,
)
from attempt_results.core.models import DecodedMbld

DNF = DecodedMbld(solved=0, attempted=0, centiseconds=-1)


@pytest.mark.parametrize("sentinel", [0, -1, -2])
def test_decode_sentinels(sentinel: int) -> None:
    assert decode_mbld_attempt_result(sentinel) == DecodedMbld(solved=0, attempted=0, centiseconds=sentinel)


@pytest.mark.parametrize("sentinel", [0, -1, -2])
def test_encode_sentinels(sentinel: int) -> None:
    assert encode_mbld_attempt_result(DecodedMbld(centiseconds=sentinel)) == sentinel


def test_decode_successful_attempt() -> None:
    """11/13 in 58:00 is stored as 900348002."""

    decoded = decode_mbld_attempt_result(900348002)
    assert decoded == DecodedMbld(solved=11, attempted=13, centiseconds=348000)
    assert decoded.points == 9
    assert decoded.missed == 2


def test_encode_successful_attempt() -> None:
    assert encode_mbld_attempt_result(DecodedMbld(solved=11, attempted=13, centiseconds=348000)) == 900348002


def test_encode_rounds_centiseconds_to_seconds() -> None:
    """Half a second rounds up."""

    assert encode_mbld_attempt_result(DecodedMbld(solved=11, attempted=13, centiseconds=348050)) == 900348102
    assert encode_mbld_attempt_result(DecodedMbld(solved=11, attempted=13, centiseconds=348049)) == 900348002


@pytest.mark.parametrize("value", [900348002, 970360001, 990006000, 10360012])
def test_decode_then_encode_is_identity(value: int) -> None:
    assert encode_mbld_attempt_result(decode_mbld_attempt_result(value)) == value


def test_autocomplete_sets_attempted_to_solved_when_missing() -> None:
    decoded = DecodedMbld(solved=2, attempted=0, centiseconds=6000)
    assert autocomplete_mbld_decoded_value(decoded) == DecodedMbld(solved=2, attempted=2, centiseconds=6000)


def test_autocomplete_raises_attempted_to_solved() -> None:
    decoded = DecodedMbld(solved=3, attempted=2, centiseconds=6000)
    assert autocomplete_mbld_decoded_value(decoded) == DecodedMbld(solved=3, attempted=3, centiseconds=6000)


def test_autocomplete_dnf_for_negative_points() -> None:
    assert autocomplete_mbld_decoded_value(DecodedMbld(solved=2, attempted=5, centiseconds=6000)) == DNF


def test_autocomplete_dnf_for_one_of_two() -> None:
    assert autocomplete_mbld_decoded_value(DecodedMbld(solved=1, attempted=2, centiseconds=6000)) == DNF


def test_autocomplete_dnf_over_time_limit() -> None:
    """Three cubes get 30 minutes."""

    decoded = DecodedMbld(solved=2, attempted=3, centiseconds=40 * 60 * 100)
    assert autocomplete_mbld_decoded_value(decoded) == DNF


def test_autocomplete_tolerates_a_few_seconds_over_for_penalties() -> None:
    decoded = DecodedMbld(solved=2, attempted=3, centiseconds=30 * 60 * 100 + 12 * 100)
    assert autocomplete_mbld_decoded_value(decoded) == decoded


def test_autocomplete_caps_time_limit_at_six_cubes() -> None:
    """Twelve cubes still only get one hour."""

    within = DecodedMbld(solved=11, attempted=12, centiseconds=60 * 60 * 100)
    assert autocomplete_mbld_decoded_value(within) == within

    over = DecodedMbld(solved=11, attempted=12, centiseconds=62 * 60 * 100)
    assert autocomplete_mbld_decoded_value(over) == DNF


def test_autocomplete_uses_configured_grace() -> None:
    decoded = DecodedMbld(solved=2, attempted=3, centiseconds=30 * 60 * 100 + 12 * 100)
    strict = ScoringSettings(mbld_grace_seconds=0)
    assert autocomplete_mbld_decoded_value(decoded, strict) == DNF


def test_autocomplete_dnf_for_one_of_one() -> None:
    """A single cube is not a valid multi-blind attempt."""

    assert autocomplete_mbld_decoded_value(DecodedMbld(solved=1, attempted=1, centiseconds=6000)) == DNF


def test_autocomplete_dnf_without_solved_cubes() -> None:
    """A bare time with no cubes does not encode as a zero-point success."""

    assert autocomplete_mbld_decoded_value(DecodedMbld(solved=0, attempted=0, centiseconds=1000)) == DNF
    assert autocomplete_mbld_decoded_value(DecodedMbld(solved=0, attempted=2, centiseconds=1000)) == DNF


@pytest.mark.parametrize("sentinel", [0, -1, -2])
def test_autocomplete_keeps_sentinels(sentinel: int) -> None:
    decoded = DecodedMbld(solved=0, attempted=0, centiseconds=sentinel)
    assert autocomplete_mbld_decoded_value(decoded) == decoded

"""Multi-blind attempt result codec.

A successful multi-blind attempt is stored as a single integer `PPTTTTTMM`:
`PP` is 99 minus the points, `TTTTT` the duration in whole seconds and `MM`
the number of missed cubes. Smaller encoded values are better results.
"""

from __future__ import annotations

import logging
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

from .config import DEFAULT_SETTINGS, ScoringSettings
from .models import DNF_VALUE, AttemptResult, DecodedMbld

logger = logging.getLogger(__name__)

POINTS_BASE = 99
POINTS_FACTOR = 10**7
SECONDS_FACTOR = 10**2


def decode_mbld_attempt_result(value: AttemptResult) -> DecodedMbld:
    """Split an encoded multi-blind attempt result into solved, attempted and time."""
    if value <= 0:
        return DecodedMbld(solved=0, attempted=0, centiseconds=value)

    points = POINTS_BASE - value // POINTS_FACTOR
    remainder = value % POINTS_FACTOR
    missed = remainder % SECONDS_FACTOR
    seconds = remainder // SECONDS_FACTOR
    return DecodedMbld(
        solved=points + missed,
        attempted=points + 2 * missed,
        centiseconds=seconds * 100,
    )


def encode_mbld_attempt_result(decoded: DecodedMbld) -> AttemptResult:
    """Pack a decoded multi-blind result, rounding the time to whole seconds."""
    if decoded.centiseconds <= 0:
        return decoded.centiseconds

    seconds = int((Decimal(decoded.centiseconds) / 100).quantize(Decimal(1), rounding=ROUND_HALF_UP))
    return (POINTS_BASE - decoded.points) * POINTS_FACTOR + seconds * SECONDS_FACTOR + decoded.missed


def mbld_sort_key(value: AttemptResult) -> tuple[int, int, int]:
    """Ranking key for a successful attempt: more points, then less time, then fewer misses."""
    decoded = decode_mbld_attempt_result(value)
    return (-decoded.points, decoded.centiseconds, decoded.missed)


def autocomplete_mbld_decoded_value(
    decoded: DecodedMbld,
    settings: Optional[ScoringSettings] = None,
) -> DecodedMbld:
    """Correct a multi-blind result as typed in by a scoretaker.

    A missing or too small attempted count is raised to the solved count.
    Results worth no points, fewer than two solved cubes and times over the limit
    (10 minutes per cube, capped at 6 cubes, plus a grace margin for
    penalties) become DNF.
    """
    settings = settings or DEFAULT_SETTINGS
    solved, attempted, centiseconds = decoded.solved, decoded.attempted, decoded.centiseconds
    if centiseconds <= 0:
        return DecodedMbld(solved=0, attempted=0, centiseconds=centiseconds)

    if attempted == 0 or solved > attempted:
        attempted = solved

    dnf = DecodedMbld(solved=0, attempted=0, centiseconds=DNF_VALUE)
    missed = attempted - solved
    if solved < missed or solved <= 1:
        logger.debug("Multi-blind %d/%d is not a success, setting DNF", solved, attempted)
        return dnf

    time_limit = settings.mbld_time_limit(attempted)
    if centiseconds > time_limit:
        logger.debug("Multi-blind time %d over limit %d, setting DNF", centiseconds, time_limit)
        return dnf

    return DecodedMbld(solved=solved, attempted=attempted, centiseconds=centiseconds)

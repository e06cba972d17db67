"""Average computation for a round of attempts.

Averages follow the regulations: the best and worst of five attempts are
dropped, means are rounded half up, and anything from 10 minutes on is
rounded to the nearest second.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from decimal import ROUND_HALF_UP, Decimal
from typing import Callable, Optional

from .config import DEFAULT_SETTINGS, ScoringSettings
from .models import DNF_VALUE, SKIPPED_VALUE, AttemptResult, ResultFormat
from .semantics import is_complete, is_skipped, sort_key

logger = logging.getLogger(__name__)

AVERAGE_LENGTHS = (3, 5)


def round_half_up(numerator: int, denominator: int = 1) -> int:
    """Round `numerator / denominator` to the nearest integer, halves up."""
    return int((Decimal(numerator) / Decimal(denominator)).quantize(Decimal(1), rounding=ROUND_HALF_UP))


def round_over_10_minutes(centiseconds: AttemptResult, settings: Optional[ScoringSettings] = None) -> AttemptResult:
    """Round a time of 10 minutes or more to the nearest second."""
    settings = settings or DEFAULT_SETTINGS
    if centiseconds < settings.clock_rounding_threshold:
        return centiseconds
    return round_half_up(centiseconds, 100) * 100


def _mean_duration(values: Sequence[AttemptResult], settings: ScoringSettings) -> AttemptResult:
    return round_over_10_minutes(round_half_up(sum(values), len(values)), settings)


def _mean_move_count(values: Sequence[AttemptResult], settings: ScoringSettings) -> AttemptResult:
    # Stored with two decimal places, e.g. 2433 for 24.33 moves
    return round_half_up(sum(values) * 100, len(values))


_MEANS: dict[ResultFormat, Callable[[Sequence[AttemptResult], ScoringSettings], AttemptResult]] = {
    ResultFormat.DURATION: _mean_duration,
    ResultFormat.MOVE_COUNT: _mean_move_count,
}


def counting_attempt_results(
    attempt_results: Sequence[AttemptResult],
    fmt: ResultFormat,
) -> list[AttemptResult]:
    """Attempt results that count towards the average.

    Of five attempts the single best and single worst are dropped, three
    attempts all count.
    """
    if len(attempt_results) == 3:
        return list(attempt_results)
    ordered = sorted(attempt_results, key=lambda a: sort_key(a, fmt))
    return ordered[1:-1]


def compute_average(
    attempt_results: Sequence[AttemptResult],
    fmt: ResultFormat,
    settings: Optional[ScoringSettings] = None,
) -> AttemptResult:
    """Average of 3 or 5 attempt results, or a sentinel when there is none.

    Raises:
        ValueError: When the number of attempt results is neither 3 nor 5.
    """
    if len(attempt_results) not in AVERAGE_LENGTHS:
        raise ValueError(
            f"Invalid number of attempt results, expected 3 or 5, given {len(attempt_results)}."
        )
    settings = settings or DEFAULT_SETTINGS

    # Multi-blind has no average
    if fmt is ResultFormat.PACKED:
        return SKIPPED_VALUE
    if any(is_skipped(a) for a in attempt_results):
        return SKIPPED_VALUE

    counting = counting_attempt_results(attempt_results, fmt)
    if not all(is_complete(a) for a in counting):
        logger.debug("Unsuccessful attempt counts towards average of %s, setting DNF", list(attempt_results))
        return DNF_VALUE

    return _MEANS[fmt](counting, settings)

"""Cutoff and time limit enforcement over a round of attempts.

Both operations return new lists and never modify the input.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Optional

from .mbld import decode_mbld_attempt_result
from .models import DNF_VALUE, SKIPPED_VALUE, AttemptResult, Cutoff, ResultFormat, TimeLimit
from .semantics import is_better, is_complete

logger = logging.getLogger(__name__)


def meets_cutoff(
    attempt_results: Sequence[AttemptResult],
    cutoff: Optional[Cutoff],
    fmt: ResultFormat = ResultFormat.DURATION,
) -> bool:
    """Check whether any attempt within the cutoff window beats the cutoff.

    Matching the cutoff exactly is not enough. No cutoff is always met.
    """
    if cutoff is None:
        return True
    window = attempt_results[: cutoff.number_of_attempts]
    return any(is_better(a, cutoff.attempt_result, fmt) for a in window)


def apply_cutoff(
    attempt_results: Sequence[AttemptResult],
    cutoff: Optional[Cutoff],
    fmt: ResultFormat = ResultFormat.DURATION,
) -> list[AttemptResult]:
    """Skip the attempts after the cutoff window when the cutoff is not met."""
    if meets_cutoff(attempt_results, cutoff, fmt):
        return list(attempt_results)

    logger.debug("Cutoff %s not met, skipping further attempts", cutoff)
    return [
        a if index < cutoff.number_of_attempts else SKIPPED_VALUE
        for index, a in enumerate(attempt_results)
    ]


def _attempt_time(attempt_result: AttemptResult, fmt: ResultFormat) -> Optional[int]:
    """Centiseconds spent on a successful attempt, or None when not timed."""
    if not is_complete(attempt_result) or fmt is ResultFormat.MOVE_COUNT:
        return None
    if fmt is ResultFormat.PACKED:
        return decode_mbld_attempt_result(attempt_result).centiseconds
    return attempt_result


def apply_time_limit(
    attempt_results: Sequence[AttemptResult],
    time_limit: Optional[TimeLimit],
    fmt: ResultFormat = ResultFormat.DURATION,
) -> list[AttemptResult]:
    """Turn attempts reaching the time limit into DNF.

    A per-attempt limit applies to every attempt on its own. A cumulative
    limit sums the successful attempts in order; the attempt at which the
    total reaches the limit and every successful attempt after it become DNF.
    Cross-round cumulative limits are applied to this round's attempts only.
    Multi-blind attempts are checked on their decoded time, fewest moves
    results carry no time and pass through.
    """
    if time_limit is None:
        return list(attempt_results)

    if not time_limit.is_cumulative:
        times = [_attempt_time(a, fmt) for a in attempt_results]
        return [
            DNF_VALUE if time is not None and time >= time_limit.centiseconds else a
            for a, time in zip(attempt_results, times)
        ]

    updated: list[AttemptResult] = []
    total = 0
    for attempt_result in attempt_results:
        time = _attempt_time(attempt_result, fmt)
        if time is not None:
            total += time
            if total >= time_limit.centiseconds:
                logger.debug("Cumulative time %d reached limit %d", total, time_limit.centiseconds)
                attempt_result = DNF_VALUE
        updated.append(attempt_result)
    return updated

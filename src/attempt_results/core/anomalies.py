"""Heuristic checks for attempt results that were likely entered incorrectly.

Each check returns a message for the scoretaker or None. Only the first
matching check is reported; none of them blocks scoring.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Optional

from .config import DEFAULT_SETTINGS, ScoringSettings
from .formatting import format_value
from .mbld import decode_mbld_attempt_result
from .models import AttemptResult, ResultFormat
from .semantics import is_complete, is_skipped

logger = logging.getLogger(__name__)


def check_mbld_pace(attempt_results: Sequence[AttemptResult], settings: ScoringSettings) -> Optional[str]:
    """Flag multi-blind attempts done faster than humanly plausible per cube."""
    min_centiseconds = settings.mbld_min_seconds_per_cube * 100
    for index, attempt_result in enumerate(attempt_results):
        if not is_complete(attempt_result):
            continue
        decoded = decode_mbld_attempt_result(attempt_result)
        if decoded.attempted and decoded.centiseconds / decoded.attempted < min_centiseconds:
            return (
                "The result you're trying to submit seems to be impossible: "
                f"attempt {index + 1} is done in less than {settings.mbld_min_seconds_per_cube} "
                "seconds per cube tried. If you want to enter minutes, don't forget "
                "to add two zeros for centiseconds at the end of the score."
            )
    return None


def check_spread(
    attempt_results: Sequence[AttemptResult],
    fmt: ResultFormat,
    settings: ScoringSettings,
) -> Optional[str]:
    """Flag a worst single that is several times the best single."""
    complete = [a for a in attempt_results if is_complete(a)]
    if not complete:
        return None
    best_single, worst_single = min(complete), max(complete)
    if worst_single < best_single * settings.spread_factor:
        return None
    return (
        "The result you're trying to submit seem to be inconsistent. "
        f"There's a big difference between the best single ({format_value(best_single, fmt)}) "
        f"and the worst single ({format_value(worst_single, fmt)}). "
        "Please check that the results are accurate."
    )


def check_omitted(attempt_results: Sequence[AttemptResult]) -> Optional[str]:
    """Flag a skipped attempt followed by an entered one."""
    entered = [index for index, a in enumerate(attempt_results) if not is_skipped(a)]
    if not entered:
        return None
    for index, attempt_result in enumerate(attempt_results[: entered[-1]]):
        if is_skipped(attempt_result):
            return f"You've omitted attempt {index + 1}. Make sure it's intentional."
    return None


def detect_anomaly(
    attempt_results: Sequence[AttemptResult],
    fmt: ResultFormat,
    settings: Optional[ScoringSettings] = None,
) -> Optional[str]:
    """Return the most important warning for a round of attempts, if any."""
    settings = settings or DEFAULT_SETTINGS

    if fmt is ResultFormat.PACKED:
        # Encoded multi-blind values are not comparable by magnitude
        warning = check_mbld_pace(attempt_results, settings)
    else:
        warning = check_spread(attempt_results, fmt, settings)

    if warning is None:
        warning = check_omitted(attempt_results)

    if warning is not None:
        logger.debug("Attempt results %s look suspicious", list(attempt_results))
    return warning

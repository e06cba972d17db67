"""Event-aware attempt result API.

Every function here takes an event id, resolves it to a result format once
and hands over to the format-aware scoring functions. This is the surface
used by the MCP server and any other caller holding event ids.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Optional

from . import aggregation, anomalies, formatting, mbld, qualification, semantics
from .config import DEFAULT_SETTINGS, ScoringSettings
from .events import FormatLookup, resolve_format
from .models import (
    DNF_VALUE,
    AttemptResult,
    Cutoff,
    DecodedMbld,
    ResultFormat,
    RoundResult,
    TimeLimit,
)

logger = logging.getLogger(__name__)

decode_mbld_attempt_result = mbld.decode_mbld_attempt_result
encode_mbld_attempt_result = mbld.encode_mbld_attempt_result


def best(
    attempt_results: Sequence[AttemptResult],
    event_id: Optional[str] = None,
    lookup: Optional[FormatLookup] = None,
) -> AttemptResult:
    """Best attempt result; the event id only matters for multi-blind ordering."""
    fmt = resolve_format(event_id, lookup) if event_id else ResultFormat.DURATION
    return semantics.best(attempt_results, fmt)


def average(
    attempt_results: Sequence[AttemptResult],
    event_id: Optional[str] = None,
    lookup: Optional[FormatLookup] = None,
    settings: Optional[ScoringSettings] = None,
) -> AttemptResult:
    """Average of 3 or 5 attempt results for the given event.

    Raises:
        ValueError: When the event id is missing or unknown, or the number of
            attempt results is neither 3 nor 5.
    """
    fmt = resolve_format(event_id, lookup)
    return aggregation.compute_average(attempt_results, fmt, settings)


def format_attempt_result(
    attempt_result: AttemptResult,
    event_id: str,
    is_average: bool = False,
    lookup: Optional[FormatLookup] = None,
) -> str:
    return formatting.format_value(attempt_result, resolve_format(event_id, lookup), is_average)


def autocomplete_mbld_decoded_value(
    decoded: DecodedMbld,
    settings: Optional[ScoringSettings] = None,
) -> DecodedMbld:
    return mbld.autocomplete_mbld_decoded_value(decoded, settings)


def autocomplete_fm_attempt_result(
    moves: AttemptResult,
    settings: Optional[ScoringSettings] = None,
) -> AttemptResult:
    """Fewest moves solutions over the move cap are DNF."""
    settings = settings or DEFAULT_SETTINGS
    if moves > settings.fm_max_moves:
        return DNF_VALUE
    return moves


def autocomplete_time_attempt_result(
    centiseconds: AttemptResult,
    settings: Optional[ScoringSettings] = None,
) -> AttemptResult:
    """Times of 10 minutes or more are rounded to the nearest second."""
    if not semantics.is_complete(centiseconds):
        return centiseconds
    return aggregation.round_over_10_minutes(centiseconds, settings)


def autocomplete_attempt_result(
    attempt_result: AttemptResult,
    event_id: str,
    lookup: Optional[FormatLookup] = None,
    settings: Optional[ScoringSettings] = None,
) -> AttemptResult:
    """Apply the event's autocompletion to a single entered attempt result."""
    fmt = resolve_format(event_id, lookup)
    if fmt is ResultFormat.MOVE_COUNT:
        return autocomplete_fm_attempt_result(attempt_result, settings)
    if fmt is ResultFormat.PACKED:
        decoded = mbld.decode_mbld_attempt_result(attempt_result)
        return mbld.encode_mbld_attempt_result(mbld.autocomplete_mbld_decoded_value(decoded, settings))
    return autocomplete_time_attempt_result(attempt_result, settings)


def meets_cutoff(
    attempt_results: Sequence[AttemptResult],
    cutoff: Optional[Cutoff],
    event_id: Optional[str] = None,
    lookup: Optional[FormatLookup] = None,
) -> bool:
    fmt = resolve_format(event_id, lookup) if event_id else ResultFormat.DURATION
    return qualification.meets_cutoff(attempt_results, cutoff, fmt)


def apply_cutoff(
    attempt_results: Sequence[AttemptResult],
    cutoff: Optional[Cutoff],
    event_id: Optional[str] = None,
    lookup: Optional[FormatLookup] = None,
) -> list[AttemptResult]:
    fmt = resolve_format(event_id, lookup) if event_id else ResultFormat.DURATION
    return qualification.apply_cutoff(attempt_results, cutoff, fmt)


def apply_time_limit(
    attempt_results: Sequence[AttemptResult],
    time_limit: Optional[TimeLimit],
    event_id: Optional[str] = None,
    lookup: Optional[FormatLookup] = None,
) -> list[AttemptResult]:
    fmt = resolve_format(event_id, lookup) if event_id else ResultFormat.DURATION
    return qualification.apply_time_limit(attempt_results, time_limit, fmt)


def attempt_results_warning(
    attempt_results: Sequence[AttemptResult],
    event_id: str,
    lookup: Optional[FormatLookup] = None,
    settings: Optional[ScoringSettings] = None,
) -> Optional[str]:
    """Warning for attempt results that look mistyped, or None."""
    return anomalies.detect_anomaly(attempt_results, resolve_format(event_id, lookup), settings)


def score_round(
    attempt_results: Sequence[AttemptResult],
    event_id: str,
    cutoff: Optional[Cutoff] = None,
    time_limit: Optional[TimeLimit] = None,
    lookup: Optional[FormatLookup] = None,
    settings: Optional[ScoringSettings] = None,
) -> RoundResult:
    """Enforce the round's rules on raw attempt results and compute the outcome.

    The time limit is applied before the cutoff, so an attempt over the limit
    cannot make the cutoff. The average is only computed for 3 or 5 attempts.
    """
    fmt = resolve_format(event_id, lookup)

    limited = qualification.apply_time_limit(attempt_results, time_limit, fmt)
    made_cutoff = qualification.meets_cutoff(limited, cutoff, fmt)
    enforced = qualification.apply_cutoff(limited, cutoff, fmt)

    best_result = semantics.best(enforced, fmt)
    average_result = None
    if len(enforced) in aggregation.AVERAGE_LENGTHS:
        average_result = aggregation.compute_average(enforced, fmt, settings)

    logger.debug("Scored %s round: best=%d average=%s", event_id, best_result, average_result)
    return RoundResult(
        event_id=event_id,
        format=fmt,
        attempt_results=enforced,
        meets_cutoff=made_cutoff,
        best=best_result,
        average=average_result,
        best_formatted=formatting.format_value(best_result, fmt),
        average_formatted=(
            formatting.format_value(average_result, fmt, is_average=True) if average_result is not None else None
        ),
        warning=anomalies.detect_anomaly(enforced, fmt, settings),
    )

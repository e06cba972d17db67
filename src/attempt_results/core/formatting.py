"""Human-readable rendering of attempt results."""

from __future__ import annotations

import re
from typing import Callable

from .mbld import decode_mbld_attempt_result
from .models import DNF_VALUE, DNS_VALUE, SKIPPED_VALUE, AttemptResult, ResultFormat

_SENTINEL_LABELS = {SKIPPED_VALUE: "", DNF_VALUE: "DNF", DNS_VALUE: "DNS"}

# Leading zeros and colons, keeping the digit right before the decimal point
_LEADING_ZEROS = re.compile(r"^[0:]*(?!\.)")


def centiseconds_to_clock_format(centiseconds: int) -> str:
    """Render centiseconds as `H:MM:SS.cc`, dropping leading zero units.

    >>> centiseconds_to_clock_format(6000)
    '1:00.00'
    >>> centiseconds_to_clock_format(15)
    '0.15'
    """
    total_seconds, hundredths = divmod(centiseconds, 100)
    total_minutes, seconds = divmod(total_seconds, 60)
    hours, minutes = divmod(total_minutes, 60)
    clock = f"{hours:02d}:{minutes:02d}:{seconds:02d}.{hundredths:02d}"
    return _LEADING_ZEROS.sub("", clock, count=1)


def _format_duration(attempt_result: AttemptResult, is_average: bool) -> str:
    return centiseconds_to_clock_format(attempt_result)


def _format_move_count(attempt_result: AttemptResult, is_average: bool) -> str:
    if is_average:
        whole, hundredths = divmod(attempt_result, 100)
        return f"{whole}.{hundredths:02d}"
    return str(attempt_result)


def _format_mbld(attempt_result: AttemptResult, is_average: bool) -> str:
    decoded = decode_mbld_attempt_result(attempt_result)
    clock = centiseconds_to_clock_format(decoded.centiseconds)
    short_clock = clock.removesuffix(".00")
    return f"{decoded.solved}/{decoded.attempted} {short_clock}"


_RENDERERS: dict[ResultFormat, Callable[[AttemptResult, bool], str]] = {
    ResultFormat.DURATION: _format_duration,
    ResultFormat.MOVE_COUNT: _format_move_count,
    ResultFormat.PACKED: _format_mbld,
}


def format_value(attempt_result: AttemptResult, fmt: ResultFormat, is_average: bool = False) -> str:
    """Render a single attempt result or an average for display."""
    if attempt_result <= 0:
        return _SENTINEL_LABELS.get(attempt_result, "DNF")
    return _RENDERERS[fmt](attempt_result, is_average)

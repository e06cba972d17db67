"""Attempt result value semantics — sentinels and the "better than" ordering."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Callable

from .mbld import mbld_sort_key
from .models import DNF_VALUE, DNS_VALUE, SKIPPED_VALUE, AttemptResult, ResultFormat

# Ranks of non-successful values, after every successful one
_INCOMPLETE_RANK = {SKIPPED_VALUE: 1, DNS_VALUE: 2, DNF_VALUE: 3}

_SUCCESS_KEYS: dict[ResultFormat, Callable[[AttemptResult], tuple]] = {
    ResultFormat.DURATION: lambda value: (value,),
    ResultFormat.MOVE_COUNT: lambda value: (value,),
    ResultFormat.PACKED: mbld_sort_key,
}


def is_complete(attempt_result: AttemptResult) -> bool:
    return attempt_result > 0


def is_skipped(attempt_result: AttemptResult) -> bool:
    return attempt_result == SKIPPED_VALUE


def sort_key(attempt_result: AttemptResult, fmt: ResultFormat) -> tuple:
    """Key ordering attempt results from best to worst.

    Successes come first, ordered by the format's own rule, followed by
    skipped, DNS and DNF in that order.
    """
    if is_complete(attempt_result):
        return (0, _SUCCESS_KEYS[fmt](attempt_result))
    return (_INCOMPLETE_RANK.get(attempt_result, _INCOMPLETE_RANK[DNF_VALUE]), ())


def compare_attempt_results(a: AttemptResult, b: AttemptResult, fmt: ResultFormat) -> int:
    """Return a negative number when `a` is better than `b`, positive when worse, 0 when equal."""
    key_a, key_b = sort_key(a, fmt), sort_key(b, fmt)
    if key_a < key_b:
        return -1
    if key_a > key_b:
        return 1
    return 0


def is_better(a: AttemptResult, b: AttemptResult, fmt: ResultFormat) -> bool:
    return compare_attempt_results(a, b, fmt) < 0


def best(attempt_results: Iterable[AttemptResult], fmt: ResultFormat = ResultFormat.DURATION) -> AttemptResult:
    """Best attempt result of a sequence.

    Skipped only (or empty) gives skipped, no success gives DNF when any DNF
    is present and DNS otherwise.
    """
    non_skipped = [a for a in attempt_results if not is_skipped(a)]
    if not non_skipped:
        return SKIPPED_VALUE

    complete = [a for a in non_skipped if is_complete(a)]
    if not complete:
        return DNF_VALUE if DNF_VALUE in non_skipped else DNS_VALUE

    return min(complete, key=lambda a: sort_key(a, fmt))

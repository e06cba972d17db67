"""Attempt Results MCP Server.

Compute, validate and format competition attempt results — best, average,
cutoffs, time limits, multi-blind encoding and data-entry warnings.
"""

__version__ = "0.1.0"

from .core.attempt_result import (
    apply_cutoff,
    apply_time_limit,
    attempt_results_warning,
    autocomplete_attempt_result,
    autocomplete_fm_attempt_result,
    autocomplete_mbld_decoded_value,
    autocomplete_time_attempt_result,
    average,
    best,
    decode_mbld_attempt_result,
    encode_mbld_attempt_result,
    format_attempt_result,
    meets_cutoff,
    score_round,
)
from .core.models import Cutoff, DecodedMbld, ResultFormat, RoundResult, TimeLimit

__all__ = [
    "Cutoff",
    "DecodedMbld",
    "ResultFormat",
    "RoundResult",
    "TimeLimit",
    "apply_cutoff",
    "apply_time_limit",
    "attempt_results_warning",
    "autocomplete_attempt_result",
    "autocomplete_fm_attempt_result",
    "autocomplete_mbld_decoded_value",
    "autocomplete_time_attempt_result",
    "average",
    "best",
    "decode_mbld_attempt_result",
    "encode_mbld_attempt_result",
    "format_attempt_result",
    "meets_cutoff",
    "score_round",
]

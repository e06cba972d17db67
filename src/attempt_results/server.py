"""Attempt Results MCP Server.

FastMCP server exposing attempt result scoring as read-only tools.
Run: attempt-results-mcp
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from mcp.server.fastmcp import FastMCP
from mcp.types import ToolAnnotations

from .core import attempt_result
from .core.config import ScoringSettings
from .core.events import list_events
from .core.models import Cutoff, DecodedMbld, TimeLimit

logger = logging.getLogger(__name__)

READ_ONLY = ToolAnnotations(readOnlyHint=True, destructiveHint=False, idempotentHint=True, openWorldHint=False)

settings = ScoringSettings.from_env()


@asynccontextmanager
async def lifespan(server: FastMCP) -> AsyncIterator[None]:
    """Configure logging and report the active scoring settings."""
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")
    logger.info("Scoring settings: %s", settings.model_dump())
    yield


mcp = FastMCP(
    "Attempt Results",
    instructions="Compute best and average results, apply cutoffs and time limits, encode multi-blind results and check entered attempts for typos.",
    lifespan=lifespan,
)


def _formatted(values: list[int], event_id: str) -> list[str]:
    return [attempt_result.format_attempt_result(v, event_id) for v in values]


# ─── Tool 1: Best ────────────────────────────────────────────────────────────


@mcp.tool(annotations=READ_ONLY)
async def results_best(attempt_results: list[int], event_id: str = "") -> dict:
    """Best attempt result of a round.

    Args:
        attempt_results: Attempt results as integers (0 skipped, -1 DNF, -2 DNS).
        event_id: Optional event id, e.g. '333' or '333mbf'.
    """
    value = attempt_result.best(attempt_results, event_id or None)
    formatted = attempt_result.format_attempt_result(value, event_id or "333")
    return {
        "best": value,
        "formatted": formatted,
        "summary": f"Best result: {formatted or 'none'}",
    }


# ─── Tool 2: Average ─────────────────────────────────────────────────────────


@mcp.tool(annotations=READ_ONLY)
async def results_average(attempt_results: list[int], event_id: str) -> dict:
    """Average of 3 or 5 attempt results, trimming best and worst of 5.

    Args:
        attempt_results: Exactly 3 or 5 attempt results.
        event_id: Event id, e.g. '333', '333fm'.
    """
    value = attempt_result.average(attempt_results, event_id, settings=settings)
    formatted = attempt_result.format_attempt_result(value, event_id, is_average=True)
    return {
        "event_id": event_id,
        "average": value,
        "formatted": formatted,
        "summary": f"Average for {event_id}: {formatted or 'none'}",
    }


# ─── Tool 3: Format ──────────────────────────────────────────────────────────


@mcp.tool(annotations=READ_ONLY)
async def results_format(attempt_result_value: int, event_id: str, is_average: bool = False) -> dict:
    """Render an attempt result or average for display.

    Args:
        attempt_result_value: The attempt result integer.
        event_id: Event id deciding how the value is read.
        is_average: Whether the value is an average (matters for fewest moves).
    """
    formatted = attempt_result.format_attempt_result(attempt_result_value, event_id, is_average)
    return {"formatted": formatted, "summary": formatted}


# ─── Tool 4-5: Multi-Blind Codec ─────────────────────────────────────────────


@mcp.tool(annotations=READ_ONLY)
async def mbld_decode(attempt_result_value: int) -> dict:
    """Decode a multi-blind attempt result into solved, attempted and centiseconds.

    Args:
        attempt_result_value: Encoded multi-blind attempt result.
    """
    decoded = attempt_result.decode_mbld_attempt_result(attempt_result_value)
    return {
        "decoded": decoded.model_dump(),
        "summary": attempt_result.format_attempt_result(attempt_result_value, "333mbf"),
    }


@mcp.tool(annotations=READ_ONLY)
async def mbld_encode(solved: int, attempted: int, centiseconds: int, autocomplete: bool = True) -> dict:
    """Encode a multi-blind result, optionally correcting it first.

    Args:
        solved: Cubes solved.
        attempted: Cubes attempted (0 means same as solved).
        centiseconds: Attempt duration in centiseconds.
        autocomplete: Apply attempted-count correction and DNF rules first. Default True.
    """
    decoded = DecodedMbld(solved=solved, attempted=attempted, centiseconds=centiseconds)
    if autocomplete:
        decoded = attempt_result.autocomplete_mbld_decoded_value(decoded, settings)
    value = attempt_result.encode_mbld_attempt_result(decoded)
    return {
        "attempt_result": value,
        "decoded": decoded.model_dump(),
        "summary": attempt_result.format_attempt_result(value, "333mbf"),
    }


# ─── Tool 6: Autocomplete ────────────────────────────────────────────────────


@mcp.tool(annotations=READ_ONLY)
async def results_autocomplete(attempt_result_value: int, event_id: str) -> dict:
    """Apply data-entry corrections to a single attempt result.

    Times of 10 minutes or more are rounded to seconds, fewest moves over the
    move cap become DNF, multi-blind results are checked against the rules.

    Args:
        attempt_result_value: The entered attempt result.
        event_id: Event id.
    """
    value = attempt_result.autocomplete_attempt_result(attempt_result_value, event_id, settings=settings)
    changed = value != attempt_result_value
    formatted = attempt_result.format_attempt_result(value, event_id)
    return {
        "attempt_result": value,
        "changed": changed,
        "formatted": formatted,
        "summary": f"Corrected to {formatted}" if changed else f"{formatted} needs no correction",
    }


# ─── Tool 7: Cutoff ──────────────────────────────────────────────────────────


@mcp.tool(annotations=READ_ONLY)
async def results_cutoff(
    attempt_results: list[int],
    number_of_attempts: int,
    cutoff_attempt_result: int,
    event_id: str = "333",
) -> dict:
    """Check a cutoff and skip the attempts after it when it is not met.

    Args:
        attempt_results: Attempt results of the round.
        number_of_attempts: Attempts in which the cutoff must be beaten.
        cutoff_attempt_result: Cutoff value, which must be strictly beaten.
        event_id: Event id. Default '333'.
    """
    cutoff = Cutoff(number_of_attempts=number_of_attempts, attempt_result=cutoff_attempt_result)
    met = attempt_result.meets_cutoff(attempt_results, cutoff, event_id)
    formatted_cutoff = attempt_result.format_attempt_result(cutoff_attempt_result, event_id)
    return {
        "meets_cutoff": met,
        "attempt_results": attempt_result.apply_cutoff(attempt_results, cutoff, event_id),
        "summary": f"Cutoff of {formatted_cutoff} in {number_of_attempts} attempt(s) "
        + ("met." if met else "not met, further attempts skipped."),
    }


# ─── Tool 8: Time Limit ──────────────────────────────────────────────────────


@mcp.tool(annotations=READ_ONLY)
async def results_time_limit(
    attempt_results: list[int],
    centiseconds: int,
    cumulative_round_ids: Optional[list[str]] = None,
    event_id: str = "333",
) -> dict:
    """Turn attempts reaching the time limit into DNF.

    Args:
        attempt_results: Attempt results of the round.
        centiseconds: Time limit in centiseconds.
        cumulative_round_ids: Rounds sharing a cumulative limit. Empty for a per-attempt limit.
        event_id: Event id. Multi-blind attempts are checked on their decoded time. Default '333'.
    """
    time_limit = TimeLimit(centiseconds=centiseconds, cumulative_round_ids=tuple(cumulative_round_ids or ()))
    updated = attempt_result.apply_time_limit(attempt_results, time_limit, event_id)
    dnf_count = sum(1 for before, after in zip(attempt_results, updated) if before != after)
    return {
        "attempt_results": updated,
        "changed_attempts": dnf_count,
        "summary": f"{dnf_count} attempt(s) over the "
        + ("cumulative " if time_limit.is_cumulative else "")
        + "time limit set to DNF.",
    }


# ─── Tool 9: Warning ─────────────────────────────────────────────────────────


@mcp.tool(annotations=READ_ONLY)
async def results_warning(attempt_results: list[int], event_id: str) -> dict:
    """Check entered attempt results for likely typos.

    Args:
        attempt_results: Attempt results of the round.
        event_id: Event id.
    """
    warning = attempt_result.attempt_results_warning(attempt_results, event_id, settings=settings)
    return {
        "warning": warning,
        "summary": warning or "Attempt results look fine.",
    }


# ─── Tool 10: Score Round ────────────────────────────────────────────────────


@mcp.tool(annotations=READ_ONLY)
async def results_score_round(
    attempt_results: list[int],
    event_id: str,
    cutoff_number_of_attempts: int = 0,
    cutoff_attempt_result: int = 0,
    time_limit_centiseconds: int = 0,
    cumulative_round_ids: Optional[list[str]] = None,
) -> dict:
    """Apply time limit and cutoff, then compute best, average and warnings for a round.

    Args:
        attempt_results: Raw attempt results of the round.
        event_id: Event id.
        cutoff_number_of_attempts: Cutoff window. 0 for no cutoff.
        cutoff_attempt_result: Cutoff value. 0 for no cutoff.
        time_limit_centiseconds: Time limit. 0 for no time limit.
        cumulative_round_ids: Rounds sharing a cumulative time limit.
    """
    cutoff = None
    if cutoff_number_of_attempts and cutoff_attempt_result:
        cutoff = Cutoff(number_of_attempts=cutoff_number_of_attempts, attempt_result=cutoff_attempt_result)
    time_limit = None
    if time_limit_centiseconds:
        time_limit = TimeLimit(
            centiseconds=time_limit_centiseconds,
            cumulative_round_ids=tuple(cumulative_round_ids or ()),
        )

    result = attempt_result.score_round(attempt_results, event_id, cutoff, time_limit, settings=settings)
    summary = f"Best {result.best_formatted or 'none'}"
    if result.average_formatted is not None:
        summary += f", average {result.average_formatted or 'none'}"
    if result.warning:
        summary += f". Warning: {result.warning}"
    return {
        "round": result.model_dump(mode="json"),
        "formatted_attempts": _formatted(result.attempt_results, event_id),
        "summary": summary,
    }


# ─── Tool 11: Events ─────────────────────────────────────────────────────────


@mcp.tool(annotations=READ_ONLY)
async def results_events() -> dict:
    """List the known events and the result format each one uses."""
    events = list_events()
    return {
        "events": [e.model_dump(mode="json") for e in events],
        "count": len(events),
        "summary": f"{len(events)} events: " + ", ".join(e.event_id for e in events),
    }


def main():
    """Entry point for the CLI command."""
    mcp.run()


if __name__ == "__main__":
    main()

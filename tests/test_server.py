"""Tests for the MCP tools, called directly."""

from __future__ import annotations

import asyncio

import pytest

from attempt_results import server


def test_results_average_tool() -> None:
    result = asyncio.run(server.results_average([900, 800, 700, 4000, 600], "333"))
    assert result["average"] == 800
    assert result["formatted"] == "8.00"


def test_results_average_tool_propagates_invalid_arguments() -> None:
    with pytest.raises(ValueError):
        asyncio.run(server.results_average([900, 800], "333"))


def test_results_best_tool() -> None:
    result = asyncio.run(server.results_best([-1, -2, 0]))
    assert result["best"] == -1
    assert result["formatted"] == "DNF"


def test_mbld_tools() -> None:
    decoded = asyncio.run(server.mbld_decode(900348002))
    assert decoded["decoded"] == {"solved": 11, "attempted": 13, "centiseconds": 348000}
    assert decoded["summary"] == "11/13 58:00"

    encoded = asyncio.run(server.mbld_encode(solved=11, attempted=13, centiseconds=348000))
    assert encoded["attempt_result"] == 900348002

    dnf = asyncio.run(server.mbld_encode(solved=1, attempted=2, centiseconds=6000))
    assert dnf["attempt_result"] == -1


def test_results_autocomplete_tool() -> None:
    result = asyncio.run(server.results_autocomplete(60051, "333"))
    assert result["attempt_result"] == 60100
    assert result["changed"] is True


def test_results_cutoff_tool() -> None:
    result = asyncio.run(server.results_cutoff([1000, 800, 1200, 0, 0], 2, 800))
    assert result["meets_cutoff"] is False
    assert result["attempt_results"] == [1000, 800, 0, 0, 0]


def test_results_time_limit_tool() -> None:
    result = asyncio.run(server.results_time_limit([3000, 12000, 5000], 20000, ["333bf-r1"]))
    assert result["attempt_results"] == [3000, 12000, -1]
    assert result["changed_attempts"] == 1


def test_results_warning_tool() -> None:
    result = asyncio.run(server.results_warning([900, 1000, 800], "333"))
    assert result["warning"] is None


def test_results_score_round_tool() -> None:
    result = asyncio.run(
        server.results_score_round(
            [1000, 800, 1200, 1100, 900],
            "333",
            cutoff_number_of_attempts=2,
            cutoff_attempt_result=800,
        )
    )
    assert result["round"]["attempt_results"] == [1000, 800, 0, 0, 0]
    assert result["round"]["average"] == 0
    assert result["formatted_attempts"] == ["10.00", "8.00", "", "", ""]
    assert result["summary"].startswith("Best 8.00")


def test_results_events_tool() -> None:
    result = asyncio.run(server.results_events())
    assert result["count"] == len(result["events"])
    assert {"event_id": "333fm", "name": "3x3x3 Fewest Moves", "format": "move_count", "rank": 80} in result["events"]


def test_results_time_limit_tool_multi_blind() -> None:
    result = asyncio.run(server.results_time_limit([900348002], 360000, event_id="333mbf"))
    assert result["attempt_results"] == [900348002]
    assert result["changed_attempts"] == 0


def test_mbld_encode_tool_rejects_time_without_cubes() -> None:
    result = asyncio.run(server.mbld_encode(solved=0, attempted=0, centiseconds=1000))
    assert result["attempt_result"] == -1
    assert result["summary"] == "DNF"

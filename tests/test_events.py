"""Tests for the event catalog."""

from __future__ import annotations

import pytest

from attempt_results.core.events import get_event_format, list_events, resolve_format
from attempt_results.core.models import ResultFormat


def test_event_formats() -> None:
    assert get_event_format("333") is ResultFormat.DURATION
    assert get_event_format("333fm") is ResultFormat.MOVE_COUNT
    assert get_event_format("333mbf") is ResultFormat.PACKED


def test_unknown_event() -> None:
    with pytest.raises(ValueError, match="Unknown event id"):
        get_event_format("333ft")


@pytest.mark.parametrize("event_id", ["", None])
def test_resolve_format_requires_event_id(event_id: str | None) -> None:
    with pytest.raises(ValueError, match="Missing argument: eventId"):
        resolve_format(event_id)


def test_list_events_in_rank_order() -> None:
    events = list_events()
    assert events[0].event_id == "333"
    assert events[-1].event_id == "333mbf"
    assert [e.rank for e in events] == sorted(e.rank for e in events)

"""Event catalog — maps event ids to their result format.

Only the format matters to scoring; names and ranks are carried for display.
Callers with their own event table can pass a lookup callable to the
facade functions instead.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from .models import EventInfo, ResultFormat

logger = logging.getLogger(__name__)

FormatLookup = Callable[[str], ResultFormat]

# Standard events mapped to formats
EVENT_CATALOG: dict[str, dict] = {
    "333": {"name": "3x3x3 Cube", "format": ResultFormat.DURATION, "rank": 10},
    "222": {"name": "2x2x2 Cube", "format": ResultFormat.DURATION, "rank": 20},
    "444": {"name": "4x4x4 Cube", "format": ResultFormat.DURATION, "rank": 30},
    "555": {"name": "5x5x5 Cube", "format": ResultFormat.DURATION, "rank": 40},
    "666": {"name": "6x6x6 Cube", "format": ResultFormat.DURATION, "rank": 50},
    "777": {"name": "7x7x7 Cube", "format": ResultFormat.DURATION, "rank": 60},
    "333bf": {"name": "3x3x3 Blindfolded", "format": ResultFormat.DURATION, "rank": 70},
    "333fm": {"name": "3x3x3 Fewest Moves", "format": ResultFormat.MOVE_COUNT, "rank": 80},
    "333oh": {"name": "3x3x3 One-Handed", "format": ResultFormat.DURATION, "rank": 90},
    "clock": {"name": "Clock", "format": ResultFormat.DURATION, "rank": 110},
    "minx": {"name": "Megaminx", "format": ResultFormat.DURATION, "rank": 120},
    "pyram": {"name": "Pyraminx", "format": ResultFormat.DURATION, "rank": 130},
    "skewb": {"name": "Skewb", "format": ResultFormat.DURATION, "rank": 140},
    "sq1": {"name": "Square-1", "format": ResultFormat.DURATION, "rank": 150},
    "444bf": {"name": "4x4x4 Blindfolded", "format": ResultFormat.DURATION, "rank": 160},
    "555bf": {"name": "5x5x5 Blindfolded", "format": ResultFormat.DURATION, "rank": 170},
    "333mbf": {"name": "3x3x3 Multi-Blind", "format": ResultFormat.PACKED, "rank": 180},
}


def get_event_format(event_id: str) -> ResultFormat:
    """Return the result format for a catalog event id."""
    entry = EVENT_CATALOG.get(event_id)
    if entry is None:
        raise ValueError(f"Unknown event id: {event_id!r}")
    return entry["format"]


def list_events() -> list[EventInfo]:
    """All catalog events in display order."""
    events = [EventInfo(event_id=event_id, **entry) for event_id, entry in EVENT_CATALOG.items()]
    return sorted(events, key=lambda e: e.rank)


def resolve_format(event_id: str, lookup: Optional[FormatLookup] = None) -> ResultFormat:
    """Resolve an event id to its format, using `lookup` when given."""
    if not event_id:
        raise ValueError("Missing argument: eventId")
    fmt = (lookup or get_event_format)(event_id)
    logger.debug("Resolved event %s to %s format", event_id, fmt.value)
    return fmt

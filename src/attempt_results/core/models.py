"""Pydantic data models — the shared value objects.

Both the scoring functions and the MCP server use these models as the
common interface. Attempt results themselves stay plain integers.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

AttemptResult = int

SKIPPED_VALUE: AttemptResult = 0
DNF_VALUE: AttemptResult = -1
DNS_VALUE: AttemptResult = -2


class ResultFormat(str, Enum):
    """How a positive attempt result is interpreted."""

    DURATION = "duration"
    MOVE_COUNT = "move_count"
    PACKED = "packed"


class EventInfo(BaseModel):
    """A competition event and the result format it is scored in."""

    model_config = ConfigDict(frozen=True)

    event_id: str
    name: str
    format: ResultFormat
    rank: int = Field(description="Display order among events")


class DecodedMbld(BaseModel):
    """A multi-blind attempt result split into its components.

    Sentinel attempt results decode to zero cubes with the sentinel
    stored in `centiseconds`.
    """

    model_config = ConfigDict(frozen=True)

    solved: int = Field(0, ge=0, description="Number of cubes solved")
    attempted: int = Field(0, ge=0, description="Number of cubes attempted")
    centiseconds: int = Field(description="Attempt duration, or the sentinel value")

    @property
    def missed(self) -> int:
        return self.attempted - self.solved

    @property
    def points(self) -> int:
        return self.solved - self.missed


class Cutoff(BaseModel):
    """Qualification rule for the first attempts of a round.

    At least one of the first `number_of_attempts` attempt results must be
    strictly better than `attempt_result` for the remaining attempts to happen.
    """

    model_config = ConfigDict(frozen=True)

    number_of_attempts: int = Field(gt=0)
    attempt_result: AttemptResult = Field(gt=0)


class TimeLimit(BaseModel):
    """Time limit for a round, either per attempt or cumulative."""

    model_config = ConfigDict(frozen=True)

    centiseconds: int = Field(gt=0)
    cumulative_round_ids: tuple[str, ...] = Field(
        default=(),
        description="Rounds sharing a cumulative limit; empty for a per-attempt limit",
    )

    @property
    def is_cumulative(self) -> bool:
        return len(self.cumulative_round_ids) > 0


class RoundResult(BaseModel):
    """Best, average and warning computed for one competitor's round."""

    event_id: str
    format: ResultFormat
    attempt_results: list[AttemptResult] = Field(description="Attempt results after cutoff and time limit")
    meets_cutoff: bool
    best: AttemptResult
    average: Optional[AttemptResult] = Field(None, description="None when the round has no average")
    best_formatted: str
    average_formatted: Optional[str] = None
    warning: Optional[str] = None

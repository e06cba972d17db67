"""Calibrated scoring constants.

Defaults follow the competition regulations and the heuristics used at the
scoretaking table. The server may override them through environment
variables; core functions only ever receive a settings object.
"""

from __future__ import annotations

import os
from typing import Optional

from pydantic import BaseModel, Field

ENV_PREFIX = "ATTEMPT_RESULTS_"


class ScoringSettings(BaseModel):
    """Tunable thresholds for autocompletion and anomaly detection."""

    fm_max_moves: int = Field(80, gt=0, description="Fewest moves attempts above this are DNF")
    clock_rounding_threshold: int = Field(
        60000, gt=0, description="Times from here on are rounded to whole seconds (centiseconds)"
    )
    mbld_seconds_per_cube: int = Field(600, gt=0, description="Multi-blind time allowance per cube")
    mbld_max_timed_cubes: int = Field(6, gt=0, description="Cubes beyond this add no extra time")
    mbld_grace_seconds: int = Field(30, ge=0, description="Extra time tolerated over the multi-blind limit")
    mbld_min_seconds_per_cube: int = Field(30, gt=0, description="Faster multi-blind pace triggers a warning")
    spread_factor: float = Field(4.0, gt=1.0, description="Worst/best ratio that triggers a warning")

    def mbld_time_limit(self, attempted: int) -> int:
        """Return the multi-blind time allowance in centiseconds, grace included."""
        timed_cubes = min(self.mbld_max_timed_cubes, attempted)
        return (self.mbld_seconds_per_cube * timed_cubes + self.mbld_grace_seconds) * 100

    @classmethod
    def from_env(cls, environ: Optional[dict[str, str]] = None) -> "ScoringSettings":
        """Build settings from `ATTEMPT_RESULTS_*` environment variables.

        Unset variables keep their defaults, e.g. `ATTEMPT_RESULTS_SPREAD_FACTOR=5`.
        """
        environ = os.environ if environ is None else environ
        overrides = {}
        for name in cls.model_fields:
            value = environ.get(f"{ENV_PREFIX}{name.upper()}")
            if value:
                overrides[name] = value
        return cls(**overrides)


DEFAULT_SETTINGS = ScoringSettings()

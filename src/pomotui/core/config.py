"""Launch-time configuration for the timer engine."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Optional

ALERT_SCRIPT_ENV = "POMOTUI_ALERT_SCRIPT"

DEFAULT_MIN_START_PROGRESS = 0.02
DEFAULT_MAX_BEFORE_FINISH_PROGRESS = 0.95


@dataclass(frozen=True)
class TimerConfig:
    """Immutable settings handed to ``TimerEngine`` at construction.

    ``min_start_progress`` keeps the bar from looking empty after the first
    tick; ``max_before_finish_progress`` keeps it from looking full before
    the finish edge (``None`` disables that cap).
    """

    min_start_progress: float = DEFAULT_MIN_START_PROGRESS
    max_before_finish_progress: Optional[float] = DEFAULT_MAX_BEFORE_FINISH_PROGRESS
    alert_script: Optional[str] = None

    def __post_init__(self) -> None:
        if not (0.0 <= self.min_start_progress <= 1.0):
            raise ValueError(
                f"min_start_progress must be between 0 and 1, got {self.min_start_progress}"
            )
        cap = self.max_before_finish_progress
        if cap is not None:
            if not (0.0 <= cap <= 1.0):
                raise ValueError(f"max_before_finish_progress must be between 0 and 1, got {cap}")
            if self.min_start_progress > cap:
                raise ValueError(
                    "min_start_progress must not exceed max_before_finish_progress "
                    f"({self.min_start_progress} > {cap})"
                )

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None, **overrides) -> TimerConfig:
        """Build a config, reading the alert script from the environment once."""
        env = os.environ if environ is None else environ
        script = (env.get(ALERT_SCRIPT_ENV) or "").strip() or None
        overrides.setdefault("alert_script", script)
        return cls(**overrides)

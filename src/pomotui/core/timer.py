"""Timer engine — tick-driven elapsed time, progress, and finish detection."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from pomotui.core.config import TimerConfig
from pomotui.core.phase import MAX_POMODORO_CYCLE, Phase, next_phase, visual_style


class HintVerbosity(Enum):
    """How much of the key-binding hint line to show."""

    FULL = "full"
    MINIMAL = "minimal"


class InvalidStateError(Exception):
    """Raised when a command is issued in a state that cannot accept it."""


@dataclass
class TimerState:
    """The single mutable state of the engine, in its created-state defaults."""

    phase: Phase = Phase.FOCUS
    cycle: int = 1
    elapsed_seconds: float = 0.0
    running: bool = False
    paused: bool = False
    finished: bool = False
    hint_verbosity: HintVerbosity = HintVerbosity.FULL


@dataclass(frozen=True)
class TimerSnapshot:
    """Read-only view of the engine handed to the renderer."""

    phase: Phase
    cycle: int
    elapsed_seconds: float
    target_seconds: int
    progress: float
    running: bool
    paused: bool
    finished: bool
    hint_verbosity: HintVerbosity
    spinner_style: str

    @property
    def phase_label(self) -> str:
        return self.phase.label

    @property
    def elapsed_minutes(self) -> int:
        return int(self.elapsed_seconds // 60)

    @property
    def target_minutes(self) -> int:
        return self.target_seconds // 60

    @property
    def remaining_minutes(self) -> int:
        return math.ceil((self.target_seconds - self.elapsed_seconds) / 60)

    @property
    def title(self) -> str:
        if self.phase is Phase.LONG_BREAK:
            return self.phase.label
        return f"{self.phase.label} ({self.cycle}/{MAX_POMODORO_CYCLE})"

    @property
    def status(self) -> str:
        if self.paused:
            return "paused"
        if self.finished:
            return "done"
        return f"{self.remaining_minutes}m"


FinishCallback = Callable[[Phase], None]


class TimerEngine:
    """Owns the ``TimerState`` and applies commands and ticks to it.

    The engine never blocks and never reads the clock: time only moves
    when the host calls :meth:`on_tick`, once per elapsed second.  Phase
    changes happen only through :meth:`advance` or :meth:`hard_reset`.
    """

    def __init__(
        self,
        config: Optional[TimerConfig] = None,
        *,
        on_finish: Optional[FinishCallback] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._config = config if config is not None else TimerConfig()
        self._on_finish = on_finish
        self._logger = logger or logging.getLogger("pomotui.timer")
        self._state = TimerState()

    # -- public interface ----------------------------------------------------

    @property
    def state(self) -> TimerState:
        return self._state

    @property
    def config(self) -> TimerConfig:
        return self._config

    def start(self) -> None:
        """Start accumulating time.  Valid only while stopped."""
        self._require_running("start", False)
        self._state.running = True
        self._state.paused = False
        self._logger.info("Timer started: %s", self._describe())

    def toggle_pause(self) -> None:
        """Pause or resume.  Valid only while running."""
        self._require_running("toggle_pause", True)
        self._state.paused = not self._state.paused
        self._logger.info(
            "Timer %s: %s", "paused" if self._state.paused else "resumed", self._describe()
        )

    def reset(self) -> None:
        """Stop and rewind the current phase, keeping phase and cycle."""
        self._rewind()
        self._state.running = False
        self._state.paused = False
        self._logger.info("Timer reset: %s", self._describe())

    def hard_reset(self) -> None:
        """Reinitialize everything back to the first Focus cycle."""
        state = self._state
        state.phase = Phase.FOCUS
        state.cycle = 1
        self._rewind()
        state.running = False
        state.paused = False
        self._logger.info("Timer hard reset: %s", self._describe())

    def advance(self) -> None:
        """Move to the next phase, whatever the running/paused/finished status.

        A paused timer resumes in the new phase; a stopped one stays stopped.
        """
        state = self._state
        state.phase, state.cycle = next_phase(state.phase, state.cycle)
        self._rewind()
        state.paused = False
        self._logger.info("Advanced to %s", self._describe())

    def toggle_hint_verbosity(self) -> None:
        if self._state.hint_verbosity is HintVerbosity.FULL:
            self._state.hint_verbosity = HintVerbosity.MINIMAL
        else:
            self._state.hint_verbosity = HintVerbosity.FULL

    def on_tick(self) -> Optional[float]:
        """Account for one elapsed second and return the progress to display.

        Returns ``None`` without touching the state while stopped or paused.
        The finish callback fires on the tick that first reaches the target
        and never again for the same phase activation.
        """
        state = self._state
        if not state.running or state.paused:
            return None

        target = state.phase.target_seconds
        state.elapsed_seconds = min(state.elapsed_seconds + 1, target)

        if state.elapsed_seconds == target and not state.finished:
            state.finished = True
            self._logger.info("Timer finished: %s", self._describe())
            self._notify_finish(state.phase)

        return self.progress()

    def progress(self) -> float:
        """Return the display progress ratio for the current state."""
        state = self._state
        if state.finished:
            return 1.0
        if state.elapsed_seconds <= 0:
            return 0.0

        raw = state.elapsed_seconds / state.phase.target_seconds
        clamped = max(raw, self._config.min_start_progress)
        cap = self._config.max_before_finish_progress
        if cap is not None:
            clamped = min(clamped, cap)
        return clamped

    def snapshot(self) -> TimerSnapshot:
        state = self._state
        return TimerSnapshot(
            phase=state.phase,
            cycle=state.cycle,
            elapsed_seconds=state.elapsed_seconds,
            target_seconds=state.phase.target_seconds,
            progress=self.progress(),
            running=state.running,
            paused=state.paused,
            finished=state.finished,
            hint_verbosity=state.hint_verbosity,
            spinner_style=visual_style(state.phase),
        )

    # -- private helpers -----------------------------------------------------

    def _require_running(self, method: str, running: bool) -> None:
        """Raise ``InvalidStateError`` unless the running flag equals *running*."""
        if self._state.running != running:
            current = "running" if self._state.running else "stopped"
            raise InvalidStateError(f"{method}() is not valid while the timer is {current}")

    def _rewind(self) -> None:
        self._state.elapsed_seconds = 0.0
        self._state.finished = False

    def _notify_finish(self, phase: Phase) -> None:
        if self._on_finish is None:
            return
        # The alert is fire-and-forget; a failing collaborator must not undo the finish.
        try:
            self._on_finish(phase)
        except Exception:
            self._logger.exception("Finish notification failed for %s", phase.label)

    def _describe(self) -> str:
        state = self._state
        return (
            f"phase={state.phase.label} cycle={state.cycle} "
            f"elapsed={state.elapsed_seconds:.0f}s/{state.phase.target_seconds}s"
        )

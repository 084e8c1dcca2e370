"""Phase cycle — the pure Focus/Break/Long Break state machine."""

from __future__ import annotations

from enum import Enum

MAX_POMODORO_CYCLE = 4

SPINNER_FPS = 2

SPINNER_FRAMES: dict[str, tuple[str, ...]] = {
    "hamburger": ("☱", "☲", "☴", "☲"),
    "line": ("|", "/", "-", "\\"),
}


class Phase(Enum):
    """The three timer roles, each with a fixed duration."""

    FOCUS = ("Focus", 25)
    BREAK = ("Break", 5)
    LONG_BREAK = ("Long Break", 30)

    def __init__(self, label: str, duration_minutes: int) -> None:
        self.label = label
        self.duration_minutes = duration_minutes

    @property
    def target_seconds(self) -> int:
        return self.duration_minutes * 60

    def __str__(self) -> str:
        return self.label


def next_phase(phase: Phase, cycle: int) -> tuple[Phase, int]:
    """Return the ``(phase, cycle)`` pair that follows *phase* at *cycle*.

    Focus moves to Break, or to Long Break once the set of
    ``MAX_POMODORO_CYCLE`` cycles is used up; the cycle is left alone.
    Break starts the next cycle's Focus, Long Break starts a new set.
    """
    if not (1 <= cycle <= MAX_POMODORO_CYCLE):
        raise ValueError(f"cycle must be between 1 and {MAX_POMODORO_CYCLE}, got {cycle}")

    if phase is Phase.FOCUS:
        if cycle + 1 > MAX_POMODORO_CYCLE:
            return Phase.LONG_BREAK, cycle
        return Phase.BREAK, cycle
    if phase is Phase.BREAK:
        return Phase.FOCUS, cycle + 1
    return Phase.FOCUS, 1


def visual_style(phase: Phase) -> str:
    """Return the spinner style id used while *phase* is active."""
    if phase is Phase.FOCUS:
        return "hamburger"
    return "line"

"""Tests for the Focus/Break/Long Break phase cycle."""

import pytest

from pomotui.core.phase import (
    MAX_POMODORO_CYCLE,
    SPINNER_FRAMES,
    Phase,
    next_phase,
    visual_style,
)

# ---------------------------------------------------------------------------
# Phase constants
# ---------------------------------------------------------------------------


class TestPhaseConstants:
    """Each phase has a fixed label and duration."""

    def test_focus_is_25_minutes(self) -> None:
        assert Phase.FOCUS.duration_minutes == 25
        assert Phase.FOCUS.target_seconds == 1500

    def test_break_is_5_minutes(self) -> None:
        assert Phase.BREAK.duration_minutes == 5
        assert Phase.BREAK.target_seconds == 300

    def test_long_break_is_30_minutes(self) -> None:
        assert Phase.LONG_BREAK.duration_minutes == 30
        assert Phase.LONG_BREAK.target_seconds == 1800

    def test_labels(self) -> None:
        assert Phase.FOCUS.label == "Focus"
        assert Phase.BREAK.label == "Break"
        assert str(Phase.LONG_BREAK) == "Long Break"

    def test_four_cycles_per_set(self) -> None:
        assert MAX_POMODORO_CYCLE == 4


# ---------------------------------------------------------------------------
# next_phase()
# ---------------------------------------------------------------------------


class TestNextPhase:
    """next_phase() follows the Pomodoro transition table."""

    @pytest.mark.parametrize("cycle", [1, 2, 3])
    def test_focus_goes_to_break_keeping_cycle(self, cycle: int) -> None:
        assert next_phase(Phase.FOCUS, cycle) == (Phase.BREAK, cycle)

    def test_focus_on_last_cycle_goes_to_long_break(self) -> None:
        assert next_phase(Phase.FOCUS, 4) == (Phase.LONG_BREAK, 4)

    @pytest.mark.parametrize("cycle", [1, 2, 3])
    def test_break_starts_next_cycle(self, cycle: int) -> None:
        assert next_phase(Phase.BREAK, cycle) == (Phase.FOCUS, cycle + 1)

    @pytest.mark.parametrize("cycle", [1, 4])
    def test_long_break_starts_new_set(self, cycle: int) -> None:
        assert next_phase(Phase.LONG_BREAK, cycle) == (Phase.FOCUS, 1)

    def test_full_set_walks_cycles_one_to_four(self) -> None:
        phase, cycle = Phase.FOCUS, 1
        seen = []
        for _ in range(7):
            seen.append((phase, cycle))
            phase, cycle = next_phase(phase, cycle)
        assert seen == [
            (Phase.FOCUS, 1),
            (Phase.BREAK, 1),
            (Phase.FOCUS, 2),
            (Phase.BREAK, 2),
            (Phase.FOCUS, 3),
            (Phase.BREAK, 3),
            (Phase.FOCUS, 4),
        ]
        assert (phase, cycle) == (Phase.LONG_BREAK, 4)
        assert next_phase(phase, cycle) == (Phase.FOCUS, 1)

    @pytest.mark.parametrize("cycle", [0, 5, -1])
    def test_out_of_range_cycle_raises_value_error(self, cycle: int) -> None:
        with pytest.raises(ValueError):
            next_phase(Phase.FOCUS, cycle)


# ---------------------------------------------------------------------------
# visual_style()
# ---------------------------------------------------------------------------


class TestVisualStyle:
    """Focus uses its own spinner; both breaks share one."""

    def test_focus_uses_hamburger(self) -> None:
        assert visual_style(Phase.FOCUS) == "hamburger"

    def test_breaks_use_line(self) -> None:
        assert visual_style(Phase.BREAK) == "line"
        assert visual_style(Phase.LONG_BREAK) == "line"

    def test_every_style_has_frames(self) -> None:
        for phase in Phase:
            assert SPINNER_FRAMES[visual_style(phase)]

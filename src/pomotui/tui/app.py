"""Textual front end: draws the timer and turns keys and clock ticks into events."""

from __future__ import annotations

import time
from typing import Optional

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.widgets import ProgressBar, Static

from pomotui.core.alert import AlertRunner
from pomotui.core.config import TimerConfig
from pomotui.core.events import Command, Event, Tick, TimerController
from pomotui.core.phase import SPINNER_FPS, SPINNER_FRAMES
from pomotui.core.timer import HintVerbosity, TimerEngine, TimerSnapshot

FULL_HINT = "s · start/pause | r · reset | b · next | h · hints | q · quit"


def hint_text(snapshot: TimerSnapshot) -> str:
    """Return the key hint line for *snapshot*'s verbosity and state."""
    if snapshot.hint_verbosity is HintVerbosity.FULL:
        return FULL_HINT
    if not snapshot.running:
        return "s · start"
    if snapshot.paused:
        return "s · resume"
    return "s · pause"


class PomodoroApp(App):
    """Single-screen Pomodoro timer."""

    CSS = """
    Screen {
        align: center middle;
    }

    #panel {
        width: 100%;
        max-width: 84;
        height: auto;
        padding: 0 2;
    }

    #top {
        height: 1;
    }

    #spinner {
        width: 2;
    }

    #title {
        width: 1fr;
        color: #ffffff;
    }

    #status {
        width: auto;
        color: #ffffff;
    }

    #status.stopped {
        color: #626262;
    }

    #bar {
        width: 100%;
    }

    #bar Bar {
        width: 1fr;
    }

    #hint {
        width: 100%;
        text-align: right;
        color: #626262;
    }
    """

    BINDINGS = [
        Binding("s,space", "start_pause", "start/pause"),
        Binding("r", "reset", "reset"),
        Binding("R,shift+r", "hard_reset", "hard reset"),
        Binding("b", "advance", "next"),
        Binding("h", "toggle_hint", "hints"),
        Binding("q,ctrl+c", "quit_timer", "quit", priority=True),
    ]

    def __init__(
        self,
        config: Optional[TimerConfig] = None,
        *,
        alert: Optional[AlertRunner] = None,
    ) -> None:
        super().__init__()
        config = config if config is not None else TimerConfig()
        self._alert = alert if alert is not None else AlertRunner(config.alert_script)
        self._engine = TimerEngine(
            config, on_finish=self._alert if self._alert.enabled else None
        )
        self._controller = TimerController(
            self._engine,
            on_update=self._render_snapshot,
            on_quit=self.exit,
        )
        self._spinner_style: Optional[str] = None
        self._spinner_frame = 0

    @property
    def controller(self) -> TimerController:
        return self._controller

    @property
    def spinner_glyph(self) -> str:
        """The spinner frame currently on screen."""
        frames = SPINNER_FRAMES[self._spinner_style or "line"]
        return frames[self._spinner_frame % len(frames)]

    def compose(self) -> ComposeResult:
        with Vertical(id="panel"):
            with Horizontal(id="top"):
                yield Static(id="spinner")
                yield Static(id="title")
                yield Static(id="status")
            yield ProgressBar(total=1.0, show_percentage=False, show_eta=False, id="bar")
            yield Static(id="hint")

    def on_mount(self) -> None:
        self._render_snapshot(self._engine.snapshot())
        self._clock = self.set_interval(1, self._on_clock_tick)
        self._spinner_timer = self.set_interval(1 / SPINNER_FPS, self._animate_spinner)

    # -- actions -------------------------------------------------------------

    def action_start_pause(self) -> None:
        self._send(Command.START_PAUSE)

    def action_reset(self) -> None:
        self._send(Command.RESET)

    def action_hard_reset(self) -> None:
        self._send(Command.HARD_RESET)

    def action_advance(self) -> None:
        self._send(Command.ADVANCE)

    def action_toggle_hint(self) -> None:
        self._send(Command.TOGGLE_HINT)

    def action_quit_timer(self) -> None:
        self._send(Command.QUIT)

    # -- private helpers -----------------------------------------------------

    def _send(self, event: Event) -> None:
        self._controller.submit(event)
        self._controller.drain()

    def _on_clock_tick(self) -> None:
        self._send(Tick(time.monotonic()))

    def _animate_spinner(self) -> None:
        state = self._engine.state
        if state.running and not state.paused:
            self._spinner_frame += 1
            self._draw_spinner()

    def _draw_spinner(self) -> None:
        self.query_one("#spinner", Static).update(self.spinner_glyph)

    def _render_snapshot(self, snapshot: TimerSnapshot) -> None:
        if snapshot.spinner_style != self._spinner_style:
            self._spinner_style = snapshot.spinner_style
            self._spinner_frame = 0
        self._draw_spinner()

        self.query_one("#title", Static).update(snapshot.title)
        status = self.query_one("#status", Static)
        status.update(snapshot.status)
        status.set_class(not snapshot.running, "stopped")
        self.query_one("#bar", ProgressBar).update(progress=snapshot.progress)
        self.query_one("#hint", Static).update(hint_text(snapshot))

"""Event routing — serializes commands and ticks into the timer engine.

Every operator command and every clock tick is placed on one FIFO queue
and applied by :meth:`TimerController.drain`, which is the engine's only
consumer.  Events are handled strictly in arrival order, so a pause that
arrives before a tick keeps that tick from accumulating time.
"""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Union

from pomotui.core.timer import TimerEngine, TimerSnapshot


class Command(Enum):
    """Operator commands accepted from the host's input mechanism."""

    START_PAUSE = "start_pause"
    RESET = "reset"
    HARD_RESET = "hard_reset"
    ADVANCE = "advance"
    TOGGLE_HINT = "toggle_hint"
    QUIT = "quit"


@dataclass(frozen=True)
class Tick:
    """One elapsed second reported by the clock source."""

    timestamp: float


Event = Union[Command, Tick]


class TimerController:
    """Queue owner and single consumer for a :class:`TimerEngine`."""

    def __init__(
        self,
        engine: TimerEngine,
        *,
        on_update: Optional[Callable[[TimerSnapshot], None]] = None,
        on_quit: Optional[Callable[[], None]] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._engine = engine
        self._on_update = on_update
        self._on_quit = on_quit
        self._logger = logger or logging.getLogger("pomotui.events")
        self._queue: deque[Event] = deque()

    @property
    def engine(self) -> TimerEngine:
        return self._engine

    @property
    def pending(self) -> int:
        return len(self._queue)

    def submit(self, event: Event) -> None:
        self._queue.append(event)

    def drain(self) -> int:
        """Apply every queued event in order and return how many were handled."""
        handled = 0
        while self._queue:
            event = self._queue.popleft()
            handled += 1
            if event is Command.QUIT:
                dropped = len(self._queue)
                self._queue.clear()
                self._logger.info("Quit requested, dropping %d pending event(s)", dropped)
                if self._on_quit is not None:
                    self._on_quit()
                break
            self._dispatch(event)
            if self._on_update is not None:
                self._on_update(self._engine.snapshot())
        return handled

    # -- private helpers -----------------------------------------------------

    def _dispatch(self, event: Event) -> None:
        engine = self._engine
        state = engine.state

        if isinstance(event, Tick):
            if state.running and not state.paused:
                engine.on_tick()
            return

        if event is Command.START_PAUSE:
            if state.running:
                engine.toggle_pause()
            else:
                engine.start()
        elif event is Command.RESET:
            engine.reset()
        elif event is Command.HARD_RESET:
            engine.hard_reset()
        elif event is Command.ADVANCE:
            engine.advance()
        elif event is Command.TOGGLE_HINT:
            engine.toggle_hint_verbosity()

"""Alert runner — fires the user's end-of-interval script."""

from __future__ import annotations

import logging
import subprocess
from typing import Optional

from pomotui.core.phase import Phase


class AlertRunner:
    """Spawns ``<script> <phase label>`` when a phase finishes.

    The process is started detached and never waited on.  With no script
    configured the runner does nothing.
    """

    def __init__(self, script: Optional[str], *, logger: Optional[logging.Logger] = None) -> None:
        self._script = script
        self._logger = logger or logging.getLogger("pomotui.alert")

    @property
    def enabled(self) -> bool:
        return bool(self._script)

    def __call__(self, phase: Phase) -> None:
        if not self._script:
            return

        try:
            subprocess.Popen(
                [self._script, phase.label],
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                start_new_session=True,
            )
        except OSError as error:
            self._logger.error("Alert script %s failed to start: %s", self._script, error)
            return

        self._logger.info("Alert script %s started for %s", self._script, phase.label)

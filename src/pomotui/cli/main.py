"""CLI entry point for pomotui.

Uses Click to resolve launch-time settings, then hands the terminal over
to the Textual timer app.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import click

import pomotui
from pomotui.core.config import ALERT_SCRIPT_ENV, TimerConfig
from pomotui.logging_setup import configure_logging
from pomotui.tui.app import PomodoroApp


@click.command()
@click.version_option(version=pomotui.__version__, prog_name="pomotui")
@click.option(
    "--alert-script",
    envvar=ALERT_SCRIPT_ENV,
    type=click.Path(dir_okay=False),
    default=None,
    help="Executable run with the phase name whenever a phase finishes.",
)
@click.option(
    "--finish-cap/--no-finish-cap",
    default=True,
    show_default=True,
    help="Hold the progress bar just short of full until the phase finishes.",
)
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Where to write the log (defaults to ~/.local/state/pomotui/pomotui.log).",
)
@click.option("--verbose", is_flag=True, help="Log debug messages too.")
def cli(
    alert_script: Optional[str],
    finish_cap: bool,
    log_file: Optional[Path],
    verbose: bool,
) -> None:
    """pomotui: a Pomodoro timer for the terminal."""
    overrides = {}
    if alert_script is not None:
        overrides["alert_script"] = alert_script.strip() or None
    if not finish_cap:
        overrides["max_before_finish_progress"] = None

    config = TimerConfig.from_env(**overrides)
    configure_logging(log_file, logging.DEBUG if verbose else logging.INFO)
    PomodoroApp(config).run()

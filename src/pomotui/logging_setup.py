"""Logging configuration.

The full-screen UI owns the terminal, so log records go to a rotating file
instead of stderr.
"""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

DEFAULT_LOG_FILE = Path.home() / ".local" / "state" / "pomotui" / "pomotui.log"

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(log_file: Optional[Path] = None, level: int = logging.INFO) -> Path:
    """Route the ``pomotui`` loggers to *log_file* and return its path."""
    path = log_file if log_file is not None else DEFAULT_LOG_FILE
    path.parent.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger("pomotui")
    logger.setLevel(level)
    logger.propagate = False
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    handler = RotatingFileHandler(path, maxBytes=256_000, backupCount=3, encoding="utf-8")
    handler.setFormatter(logging.Formatter(_LOG_FORMAT))
    logger.addHandler(handler)
    logger.info("logging initialised")
    return path

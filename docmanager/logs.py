"""Diagnostic logging for the TUI process.

The terminal belongs to the renderer, so records go to a per-user log file
instead of a stream handler. User-facing messages live in ``AppState.log_lines``.
"""

from __future__ import annotations

import logging
from pathlib import Path

from platformdirs import user_log_dir

from .config import APP_NAME

LOG_FILENAME = f"{APP_NAME}.log"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"


def default_log_path() -> Path:
    """Return the log file location inside the platform user log directory."""
    return Path(user_log_dir(APP_NAME, appauthor=False)) / LOG_FILENAME


def setup_logging(log_path: Path | None = None, level: int = logging.INFO) -> Path | None:
    """Attach one file handler to the package logger.

    Returns the log file path, or ``None`` when the file cannot be opened; in
    that case a ``NullHandler`` keeps records from leaking onto the screen.
    Calling this twice does not add a second handler.
    """
    logger = logging.getLogger(APP_NAME)
    existing = getattr(logger, "_docmanager_log_path", None)
    if logger.handlers:
        return existing

    logger.setLevel(level)
    logger.propagate = False
    target = log_path if log_path is not None else default_log_path()
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(target, encoding="utf-8")
    except OSError:
        logger.addHandler(logging.NullHandler())
        return None

    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
    logger.addHandler(handler)
    logger._docmanager_log_path = target  # type: ignore[attr-defined]
    return target

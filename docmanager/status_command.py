"""Version-control status command runner for the console pane."""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Sequence
from pathlib import Path

from .config import STATUS_COMMAND, STATUS_COMMAND_TIMEOUT_SECONDS

STATUS_HEADER = "-- Status --"

logger = logging.getLogger(__name__)


def run_status_command(
    cwd: Path,
    command: Sequence[str] = STATUS_COMMAND,
    timeout_seconds: float | None = STATUS_COMMAND_TIMEOUT_SECONDS,
) -> list[str]:
    """Run ``command`` in ``cwd`` and return its stdout lines in order.

    stderr and the exit status are ignored. A command that cannot be started
    or that exceeds ``timeout_seconds`` yields ``[]``.
    """
    try:
        proc = subprocess.run(
            list(command),
            cwd=str(cwd),
            stdin=subprocess.DEVNULL,
            stdout=subprocess.PIPE,
            stderr=subprocess.DEVNULL,
            text=True,
            encoding="utf-8",
            errors="replace",
            check=False,
            timeout=timeout_seconds,
        )
    except subprocess.TimeoutExpired:
        logger.warning("status command timed out after %ss: %s", timeout_seconds, " ".join(command))
        return []
    except OSError as exc:
        logger.warning("status command could not start: %s", exc)
        return []

    return proc.stdout.splitlines()

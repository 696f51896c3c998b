"""Fixed runtime settings.

Nothing here is read from disk or the environment; values are grouped into
small frozen dataclasses so the runtime and tests can inject alternatives.
"""

from __future__ import annotations

from dataclasses import dataclass

APP_NAME = "docmanager"
APP_TITLE = "Docusaurus Manager"

ALLOWED_EXTENSIONS: tuple[str, ...] = ("md", "mdx")
MAX_SCAN_DEPTH = 3

STATUS_COMMAND: tuple[str, ...] = ("git", "status", "--short")
STATUS_COMMAND_TIMEOUT_SECONDS = 5.0

POLL_INTERVAL_MS = 100
LOG_VIEW_ROWS = 10
FILE_PANE_PERCENT = 30

HEADER_ROWS = 3
LOG_PANE_ROWS = 8
HELP_ROWS = 1

EDITOR_STYLE = "monokai"


@dataclass(frozen=True)
class ScanSettings:
    """Traversal limits for the documentation file index."""

    max_depth: int = MAX_SCAN_DEPTH
    allowed_extensions: tuple[str, ...] = ALLOWED_EXTENSIONS


@dataclass(frozen=True)
class StatusCommandSettings:
    """External status command and its wall-clock limit."""

    command: tuple[str, ...] = STATUS_COMMAND
    timeout_seconds: float | None = STATUS_COMMAND_TIMEOUT_SECONDS


@dataclass(frozen=True)
class RuntimeLoopTiming:
    """Timing constants controlling interactive loop behavior."""

    poll_interval_ms: int = POLL_INTERVAL_MS

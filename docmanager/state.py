"""Mutable application state shared by the key router, renderer, and loop."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from pathlib import Path

STARTUP_LOG_LINE = "[System] Manager started."


class Focus(enum.Enum):
    """Pane that receives scoped key events, cycled with Tab."""

    FILE_LIST = 0
    EDITOR = 1
    LOG = 2

    def next(self) -> Focus:
        members = list(Focus)
        return members[(members.index(self) + 1) % len(members)]


class StatusFlag(enum.Enum):
    OFFLINE = "OFFLINE"
    RUNNING = "RUNNING"


@dataclass
class AppState:
    root_path: Path
    status_flag: StatusFlag = StatusFlag.OFFLINE
    log_lines: list[str] = field(default_factory=list)
    file_entries: list[Path] = field(default_factory=list)
    selected_index: int | None = None
    editor_buffer: str = ""
    loaded_path: Path | None = None
    focus: Focus = Focus.FILE_LIST
    should_quit: bool = False
    file_list_offset: int = 0

    def append_log(self, line: str) -> None:
        self.log_lines.append(line)

    def selected_path(self) -> Path | None:
        """Return the file under the list cursor, or ``None`` for an empty list."""
        if self.selected_index is None:
            return None
        return self.file_entries[self.selected_index]

    def set_editor_buffer(self, text: str) -> None:
        """Replace the buffer contents; the next save writes ``text``."""
        self.editor_buffer = text

    def replace_file_entries(self, entries: list[Path]) -> None:
        """Swap in a fresh listing and clamp the selection to it.

        An existing selection is kept when still in range, pulled back to
        the last entry when the list shrank, and cleared for an empty list.
        A list that becomes non-empty starts at the first entry.
        """
        self.file_entries = list(entries)
        if not self.file_entries:
            self.selected_index = None
            self.file_list_offset = 0
            return
        if self.selected_index is None:
            self.selected_index = 0
            return
        self.selected_index = max(0, min(self.selected_index, len(self.file_entries) - 1))


def new_app_state(root_path: Path, entries: list[Path]) -> AppState:
    """Build startup state for ``root_path`` with an initial file listing."""
    state = AppState(root_path=root_path)
    state.append_log(STARTUP_LOG_LINE)
    state.replace_file_entries(entries)
    return state

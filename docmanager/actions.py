"""State transitions triggered by key bindings.

Each function mutates ``AppState`` in place and talks to the filesystem or the
status command only through an injected ``Collaborators`` bundle, so tests can
drive transitions without touching a terminal.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

from . import content_store, file_index, status_command
from .config import ScanSettings, StatusCommandSettings
from .content_store import ContentStoreError
from .state import AppState, StatusFlag
from .status_command import STATUS_HEADER

RUN_LOG_LINE = "[Docker] Container started on port 3000"

logger = logging.getLogger(__name__)


def _default_scan(root: Path, settings: ScanSettings) -> list[Path]:
    return file_index.scan(root, settings.max_depth, settings.allowed_extensions)


def _default_run_status(root: Path, settings: StatusCommandSettings) -> list[str]:
    return status_command.run_status_command(root, settings.command, settings.timeout_seconds)


@dataclass(frozen=True)
class Collaborators:
    """External I/O used by transitions; defaults hit the real filesystem."""

    scan: Callable[[Path, ScanSettings], list[Path]] = _default_scan
    load: Callable[[Path], str] = content_store.load
    save: Callable[[Path, str], None] = content_store.save
    run_status: Callable[[Path, StatusCommandSettings], list[str]] = _default_run_status
    scan_settings: ScanSettings = field(default_factory=ScanSettings)
    status_settings: StatusCommandSettings = field(default_factory=StatusCommandSettings)


def rescan_files(state: AppState, collaborators: Collaborators) -> None:
    """Rebuild ``file_entries`` from disk and clamp the selection."""
    entries = collaborators.scan(state.root_path, collaborators.scan_settings)
    state.replace_file_entries(entries)
    logger.debug("rescan found %d files under %s", len(entries), state.root_path)


def refresh_files(state: AppState, collaborators: Collaborators) -> None:
    rescan_files(state, collaborators)
    state.append_log(f"[System] Rescanned: {len(state.file_entries)} files")


def load_selected_file(state: AppState, collaborators: Collaborators) -> bool:
    """Read the selected file into the editor buffer.

    On failure the buffer is left as it was and one message is logged.
    """
    path = state.selected_path()
    if path is None:
        return False
    try:
        text = collaborators.load(path)
    except ContentStoreError as exc:
        state.append_log(f"[File] Could not load {path}: {exc.reason}")
        return False
    state.editor_buffer = text
    state.loaded_path = path
    state.append_log(f"[File] Loaded {path}")
    return True


def save_current_file(state: AppState, collaborators: Collaborators) -> bool:
    """Write the editor buffer to the selected file; only success is reported as saved.

    The buffer is only written back to the file it was loaded from. When the
    selection points elsewhere (nothing loaded yet, failed load, rescan) the
    save is refused so another file's text never lands on disk.
    """
    path = state.selected_path()
    if path is None:
        return False
    if state.loaded_path != path:
        state.append_log(f"[File] Save skipped for {path}: file is not loaded")
        return False
    try:
        collaborators.save(path, state.editor_buffer)
    except ContentStoreError as exc:
        state.append_log(f"[File] Save failed for {path}: {exc.reason}")
        return False
    state.append_log(f"[File] Saved {path}")
    return True


def move_selection(state: AppState, direction: int, collaborators: Collaborators) -> bool:
    """Step the list cursor by ``direction`` and reload the newly selected file.

    The cursor is clamped to the listing; an empty listing is left alone.
    """
    if state.selected_index is None or not state.file_entries:
        return False
    last = len(state.file_entries) - 1
    state.selected_index = max(0, min(last, state.selected_index + direction))
    load_selected_file(state, collaborators)
    return True


def show_status(state: AppState, collaborators: Collaborators) -> None:
    lines = collaborators.run_status(state.root_path, collaborators.status_settings)
    state.append_log(STATUS_HEADER)
    state.log_lines.extend(lines)


def start_run(state: AppState) -> None:
    state.status_flag = StatusFlag.RUNNING
    state.append_log(RUN_LOG_LINE)


def cycle_focus(state: AppState) -> None:
    state.focus = state.focus.next()


def request_quit(state: AppState) -> None:
    state.should_quit = True

"""Row builders for the individual bordered panes.

Every function returns exactly ``rect.height`` rows of exactly ``rect.width``
display columns, so rows of side-by-side panes can be concatenated.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from ..config import APP_TITLE, LOG_VIEW_ROWS
from ..state import AppState, Focus
from ..ui_theme import UITheme
from .ansi import clip_ansi_line, display_width, fit_ansi_line, styled
from .highlight import editor_display_lines, sanitize_terminal_text
from .layout import Rect

FILE_LIST_TITLE = " Files (Up/Down) "
EDITOR_TITLE = " Editor "
EDITOR_FOCUSED_TITLE = " Editor (Editing Mode) "
LOG_TITLE = " Console Output "
FILE_ICON = "📄"
HIGHLIGHT_SYMBOL = ">> "


def bordered_box(rect: Rect, title: str, body: Sequence[str], border_sgr: str = "") -> list[str]:
    """Draw a single-line box with ``title`` in the top border around ``body`` rows.

    Boxes too small for a border fall back to blank rows.
    """
    width, height = rect.width, rect.height
    if height <= 0:
        return []
    if width < 2 or height < 2:
        return [" " * max(0, width) for _ in range(height)]

    inner = width - 2
    title_text = clip_ansi_line(title, inner)
    top = "┌" + title_text + "─" * (inner - display_width(title_text)) + "┐"
    rows = [styled(top, border_sgr)]
    side = styled("│", border_sgr)
    for idx in range(height - 2):
        line = body[idx] if idx < len(body) else ""
        rows.append(side + fit_ansi_line(line, inner) + side)
    rows.append(styled("└" + "─" * inner + "┘", border_sgr))
    return rows


def header_rows(state: AppState, rect: Rect, theme: UITheme) -> list[str]:
    root = sanitize_terminal_text(str(state.root_path), keep_newlines=False)
    text = f" {APP_TITLE} | Status: {state.status_flag.value} | Path: {root}"
    return bordered_box(rect, "", [styled(text, theme.header_text)], theme.status_border(state.status_flag))


def sync_file_list_offset(state: AppState, visible_rows: int) -> int:
    """Scroll the list window so the selected entry stays visible.

    This is the only state the renderer writes.
    """
    total = len(state.file_entries)
    if visible_rows <= 0 or total == 0 or state.selected_index is None:
        state.file_list_offset = 0
        return 0
    offset = state.file_list_offset
    selected = state.selected_index
    if selected < offset:
        offset = selected
    elif selected >= offset + visible_rows:
        offset = selected - visible_rows + 1
    offset = max(0, min(offset, max(0, total - visible_rows)))
    state.file_list_offset = offset
    return offset


def _file_label(path: Path) -> str:
    return sanitize_terminal_text(f" {FILE_ICON} {path.name}", keep_newlines=False)


def file_list_rows(state: AppState, rect: Rect, theme: UITheme) -> list[str]:
    inner_rows = max(0, rect.height - 2)
    inner_cols = max(0, rect.width - 2)
    offset = sync_file_list_offset(state, inner_rows)
    body: list[str] = []
    has_selection = state.selected_index is not None
    for index in range(offset, min(len(state.file_entries), offset + inner_rows)):
        label = _file_label(state.file_entries[index])
        if index == state.selected_index:
            row = fit_ansi_line(HIGHLIGHT_SYMBOL + label, inner_cols)
            body.append(styled(row, theme.list_selected) if theme.list_selected else row)
        elif has_selection:
            body.append(" " * len(HIGHLIGHT_SYMBOL) + label)
        else:
            body.append(label)
    return bordered_box(rect, FILE_LIST_TITLE, body, theme.pane_border(Focus.FILE_LIST, state.focus))


def editor_rows(state: AppState, rect: Rect, theme: UITheme) -> list[str]:
    focused = state.focus is Focus.EDITOR
    title = EDITOR_FOCUSED_TITLE if focused else EDITOR_TITLE
    inner_rows = max(0, rect.height - 2)
    filename = state.loaded_path.name if state.loaded_path is not None else ""
    lines = editor_display_lines(state.editor_buffer, filename, color=theme.color_editor_text)
    return bordered_box(rect, title, lines[:inner_rows], theme.pane_border(Focus.EDITOR, state.focus))


def recent_log_lines(log_lines: Sequence[str], limit: int = LOG_VIEW_ROWS) -> list[str]:
    """Return up to ``limit`` newest log lines, newest first."""
    if limit <= 0:
        return []
    return [sanitize_terminal_text(line, keep_newlines=False) for line in reversed(log_lines[-limit:])]


def log_rows(state: AppState, rect: Rect, theme: UITheme) -> list[str]:
    return bordered_box(rect, LOG_TITLE, recent_log_lines(state.log_lines), theme.pane_border(Focus.LOG, state.focus))

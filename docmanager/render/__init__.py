"""Rendering engine for the manager screen.

``build_frame`` derives every row from ``AppState``; ``write_frame`` pushes a
composed frame to the terminal in one write.
"""

from __future__ import annotations

import os

from ..state import AppState
from ..ui_theme import DEFAULT_THEME, UITheme
from .help import help_rows
from .layout import FrameLayout, Rect, compute_layout
from .panes import editor_rows, file_list_rows, header_rows, log_rows


def build_frame(state: AppState, width: int, height: int, theme: UITheme = DEFAULT_THEME) -> list[str]:
    """Return exactly ``height`` rows describing the screen for ``state``.

    Reads ``state`` only, apart from the file-list scroll offset.
    """
    layout = compute_layout(width, height)
    rows: list[str] = []
    rows.extend(header_rows(state, layout.header, theme))
    left = file_list_rows(state, layout.file_list, theme)
    right = editor_rows(state, layout.editor, theme)
    rows.extend(f"{left_row}{right_row}" for left_row, right_row in zip(left, right))
    rows.extend(log_rows(state, layout.log, theme))
    rows.extend(help_rows(layout.help, theme))
    return rows


def compose_frame(rows: list[str]) -> str:
    """Join rows into one repaint payload starting at the home position."""
    return "\033[H" + "\r\n".join(f"{row}\033[0m\033[K" for row in rows)


def write_frame(fd: int, rows: list[str]) -> None:
    os.write(fd, compose_frame(rows).encode("utf-8", errors="replace"))


__all__ = [
    "FrameLayout",
    "Rect",
    "build_frame",
    "compose_frame",
    "compute_layout",
    "write_frame",
]

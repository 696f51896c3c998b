"""Pane geometry for the fixed vertical layout.

Rows from top to bottom: header band, file list beside the editor, console
log, one-line help legend. Heights shrink gracefully on small terminals.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..config import FILE_PANE_PERCENT, HEADER_ROWS, HELP_ROWS, LOG_PANE_ROWS

MIN_MIDDLE_ROWS = 3


@dataclass(frozen=True)
class Rect:
    row: int
    col: int
    width: int
    height: int


@dataclass(frozen=True)
class FrameLayout:
    width: int
    height: int
    header: Rect
    file_list: Rect
    editor: Rect
    log: Rect
    help: Rect


def split_width(width: int, left_percent: int = FILE_PANE_PERCENT) -> tuple[int, int]:
    """Split ``width`` into file-list and editor widths."""
    width = max(0, width)
    left = (width * max(0, min(100, left_percent))) // 100
    return left, width - left


def compute_layout(width: int, height: int, left_percent: int = FILE_PANE_PERCENT) -> FrameLayout:
    """Return pane rectangles covering exactly ``width`` x ``height`` cells."""
    width = max(0, width)
    height = max(0, height)

    help_rows = min(HELP_ROWS, height)
    remaining = height - help_rows
    header_rows = min(HEADER_ROWS, remaining)
    remaining -= header_rows
    log_rows = min(LOG_PANE_ROWS, max(0, remaining - MIN_MIDDLE_ROWS))
    middle_rows = remaining - log_rows

    left_width, right_width = split_width(width, left_percent)
    middle_top = header_rows
    log_top = middle_top + middle_rows
    return FrameLayout(
        width=width,
        height=height,
        header=Rect(0, 0, width, header_rows),
        file_list=Rect(middle_top, 0, left_width, middle_rows),
        editor=Rect(middle_top, left_width, right_width, middle_rows),
        log=Rect(log_top, 0, width, log_rows),
        help=Rect(log_top + log_rows, 0, width, help_rows),
    )

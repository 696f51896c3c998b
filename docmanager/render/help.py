"""Help legend shown on the last screen row."""

from __future__ import annotations

from ..ui_theme import UITheme
from .ansi import fit_ansi_line, styled
from .layout import Rect

HELP_BINDINGS: tuple[tuple[str, str], ...] = (
    ("q", "Quit"),
    ("Tab", "Switch Focus"),
    ("r", "Run Docker"),
    ("g", "Git Status"),
    ("Ctrl+s", "Save"),
    ("F5", "Rescan"),
)


def help_legend_text() -> str:
    return " " + " | ".join(f"[{key}]{label}" for key, label in HELP_BINDINGS) + " "


def help_rows(rect: Rect, theme: UITheme) -> list[str]:
    if rect.height <= 0:
        return []
    legend = fit_ansi_line(help_legend_text(), rect.width)
    rows = [styled(legend, theme.help_text)]
    rows.extend(" " * rect.width for _ in range(rect.height - 1))
    return rows

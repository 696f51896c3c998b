"""UI theme definitions.

Themes are UI-only ANSI palettes for pane chrome. Token coloring of the editor
buffer is a separate Pygments style setting.
"""

from __future__ import annotations

from dataclasses import dataclass

from .state import Focus, StatusFlag


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by renderers."""

    border: str
    border_focused: str
    status_running: str
    status_offline: str
    header_text: str
    list_selected: str
    help_text: str
    color_editor_text: bool

    def status_border(self, status_flag: StatusFlag) -> str:
        if status_flag is StatusFlag.RUNNING:
            return self.status_running
        return self.status_offline

    def pane_border(self, pane: Focus, focus: Focus) -> str:
        """Border style for ``pane``; only the editor reacts to focus."""
        if pane is Focus.EDITOR and focus is Focus.EDITOR:
            return self.border_focused
        return self.border


DEFAULT_THEME = UITheme(
    border="",
    border_focused="\033[36m",
    status_running="\033[32m",
    status_offline="\033[33m",
    header_text="\033[1;37m",
    list_selected="\033[44;37m",
    help_text="",
    color_editor_text=True,
)

PLAIN_THEME = UITheme(
    border="",
    border_focused="",
    status_running="",
    status_offline="",
    header_text="",
    list_selected="",
    help_text="",
    color_editor_text=False,
)


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "PLAIN_THEME",
]

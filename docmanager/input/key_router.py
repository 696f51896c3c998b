"""Route key tokens to state transitions based on the focused pane.

Global bindings apply in every focus; list bindings only while the file list
has focus. Keys without a binding for the current focus are ignored.
"""

from __future__ import annotations

from .. import actions
from ..actions import Collaborators
from ..state import AppState, Focus
from .key_registry import KeyComboBinding, KeyComboRegistry

QUIT_KEYS = ("q",)
FOCUS_CYCLE_KEYS = ("TAB",)
MOVE_UP_KEYS = ("UP", "k")
MOVE_DOWN_KEYS = ("DOWN", "j")
STATUS_KEYS = ("g",)
SAVE_KEYS = ("CTRL_S",)
RUN_KEYS = ("r",)
RESCAN_KEYS = ("F5",)


class KeyRouter:
    """Key dispatcher bound to one ``AppState`` and its collaborators."""

    def __init__(self, state: AppState, collaborators: Collaborators) -> None:
        self.state = state
        self.collaborators = collaborators
        self._global = KeyComboRegistry().register_bindings(
            KeyComboBinding(QUIT_KEYS, lambda: actions.request_quit(state)),
            KeyComboBinding(FOCUS_CYCLE_KEYS, lambda: actions.cycle_focus(state)),
            KeyComboBinding(STATUS_KEYS, lambda: actions.show_status(state, collaborators)),
            KeyComboBinding(SAVE_KEYS, lambda: actions.save_current_file(state, collaborators)),
            KeyComboBinding(RUN_KEYS, lambda: actions.start_run(state)),
            KeyComboBinding(RESCAN_KEYS, lambda: actions.refresh_files(state, collaborators)),
        )
        self._file_list = KeyComboRegistry().register_bindings(
            KeyComboBinding(MOVE_UP_KEYS, lambda: actions.move_selection(state, -1, collaborators)),
            KeyComboBinding(MOVE_DOWN_KEYS, lambda: actions.move_selection(state, 1, collaborators)),
        )

    def handle(self, key: str) -> bool:
        """Apply ``key`` and return whether any binding handled it."""
        if self.state.should_quit or not key:
            return False
        if self.state.focus is Focus.FILE_LIST and self._file_list.dispatch(key):
            return True
        return self._global.dispatch(key)


def handle_key(state: AppState, key: str, collaborators: Collaborators) -> bool:
    """One-shot form of ``KeyRouter.handle`` for callers without a router."""
    return KeyRouter(state, collaborators).handle(key)

"""Runtime bootstrap: build state and collaborators, then run the loop."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from ..actions import Collaborators, rescan_files
from ..config import RuntimeLoopTiming
from ..input import KeyRouter
from ..logs import setup_logging
from ..state import AppState, new_app_state
from ..ui_theme import DEFAULT_THEME
from .loop import run_main_loop
from .terminal import TerminalController

logger = logging.getLogger(__name__)


def build_app_state(root: Path, collaborators: Collaborators) -> AppState:
    """Create startup state for ``root`` with the first scan applied."""
    state = new_app_state(root.resolve(), [])
    rescan_files(state, collaborators)
    return state


def run_manager(root: Path, collaborators: Collaborators | None = None) -> AppState:
    """Run the interactive manager rooted at ``root`` and return the final state.

    Raises ``TerminalSetupError`` when the terminal cannot enter or leave TUI mode.
    """
    log_path = setup_logging()
    collaborators = collaborators if collaborators is not None else Collaborators()
    state = build_app_state(root, collaborators)
    logger.info(
        "starting in %s with %d files (log: %s)",
        state.root_path,
        len(state.file_entries),
        log_path,
    )

    terminal = TerminalController(sys.stdin.fileno(), sys.stdout.fileno())
    router = KeyRouter(state, collaborators)
    run_main_loop(state, terminal, router, RuntimeLoopTiming(), DEFAULT_THEME)
    logger.info("quit requested; %d log lines recorded", len(state.log_lines))
    return state

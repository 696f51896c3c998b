"""Main interactive event loop for the terminal UI.

Each tick re-reads the terminal size, redraws the whole frame from state,
then waits up to one poll interval for a key and routes it.
"""

from __future__ import annotations

import logging
import os
import shutil
from collections.abc import Callable

from ..config import RuntimeLoopTiming
from ..input import KeyRouter, read_key
from ..render import build_frame, write_frame
from ..state import AppState
from ..ui_theme import DEFAULT_THEME, UITheme
from .terminal import TerminalController

DEFAULT_TERMINAL_SIZE = (80, 24)

logger = logging.getLogger(__name__)


def _terminal_size() -> os.terminal_size:
    return shutil.get_terminal_size(DEFAULT_TERMINAL_SIZE)


def run_main_loop(
    state: AppState,
    terminal: TerminalController,
    router: KeyRouter,
    timing: RuntimeLoopTiming = RuntimeLoopTiming(),
    theme: UITheme = DEFAULT_THEME,
    terminal_size: Callable[[], os.terminal_size] = _terminal_size,
    key_reader: Callable[[int, int | None], str] = read_key,
) -> None:
    """Run the TUI until ``state.should_quit`` is set.

    Terminal mode is restored when the loop ends, including on exceptions.
    """
    last_size: tuple[int, int] | None = None
    with terminal.raw_mode():
        while not state.should_quit:
            term = terminal_size()
            size = (term.columns, term.lines)
            if last_size is not None and size != last_size:
                logger.debug("terminal resized to %sx%s", *size)
                terminal.clear_screen()
            last_size = size

            write_frame(terminal.stdout_fd, build_frame(state, term.columns, term.lines, theme))

            key = key_reader(terminal.stdin_fd, timing.poll_interval_ms)
            if key:
                router.handle(key)

"""Terminal control helpers for the TUI session.

Owns raw-mode lifecycle, alternate-screen switching, and mouse capture.
The saved tty attributes are restored on every exit path of ``raw_mode``.
"""

from __future__ import annotations

import contextlib
import logging
import os
import termios
import tty

ENTER_TUI_SEQUENCE = b"\x1b[?1049h\x1b[?25l\x1b[?1000h\x1b[?1002h\x1b[?1006h\x1b[2J"
EXIT_TUI_SEQUENCE = b"\x1b[?1000l\x1b[?1002l\x1b[?1006l\x1b[?25h\x1b[?1049l"

logger = logging.getLogger(__name__)


class TerminalSetupError(Exception):
    """The controlling terminal could not be switched into or out of TUI mode."""


class TerminalController:
    """Manage terminal mode transitions for one stdin/stdout pair."""

    def __init__(self, stdin_fd: int, stdout_fd: int) -> None:
        """Capture tty state and bind stdin/stdout file descriptors."""
        self.stdin_fd = stdin_fd
        self.stdout_fd = stdout_fd
        try:
            self._saved_tty_state = termios.tcgetattr(stdin_fd)
        except termios.error as exc:
            raise TerminalSetupError(f"cannot read terminal attributes: {exc}") from exc

    def enable_tui_mode(self) -> None:
        """Enter raw alternate-screen mode with mouse capture enabled."""
        try:
            tty.setraw(self.stdin_fd, termios.TCSAFLUSH)
            # Enter alternate screen, hide cursor, enable mouse reporting, clear.
            os.write(self.stdout_fd, ENTER_TUI_SEQUENCE)
        except (termios.error, OSError) as exc:
            raise TerminalSetupError(f"cannot enter raw mode: {exc}") from exc

    def disable_tui_mode(self) -> None:
        """Restore normal terminal state and disable mouse capture."""
        try:
            # Disable mouse reporting, show cursor, and restore the main screen buffer.
            os.write(self.stdout_fd, EXIT_TUI_SEQUENCE)
        except OSError as exc:
            logger.warning("could not write terminal reset sequence: %s", exc)
        try:
            termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, self._saved_tty_state)
        except termios.error as exc:
            raise TerminalSetupError(f"cannot restore terminal attributes: {exc}") from exc

    def clear_screen(self) -> None:
        os.write(self.stdout_fd, b"\x1b[2J")

    @contextlib.contextmanager
    def raw_mode(self):
        """Context manager that brackets code with TUI enter/exit calls.

        Exit runs even when entering fails half way.
        """
        try:
            self.enable_tui_mode()
            yield self
        finally:
            self.disable_tui_mode()

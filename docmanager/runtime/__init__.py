"""Runtime package: terminal lifecycle, event loop, and bootstrap."""

from .app import build_app_state, run_manager
from .loop import run_main_loop
from .terminal import TerminalController, TerminalSetupError

__all__ = [
    "TerminalController",
    "TerminalSetupError",
    "build_app_state",
    "run_main_loop",
    "run_manager",
]

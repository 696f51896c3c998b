"""Command-line front door for docmanager.

Takes no options: the working directory at launch is the scan root.
Exits 0 after a normal quit and 1 when the terminal cannot be set up.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .config import APP_NAME, APP_TITLE
from .runtime import TerminalSetupError, run_manager


def build_parser() -> argparse.ArgumentParser:
    return argparse.ArgumentParser(
        prog=APP_NAME,
        description=(
            f"{APP_TITLE}: browse, view and save .md/.mdx files under the current "
            "directory, with git status output in a console pane."
        ),
    )


def main(argv: list[str] | None = None, default_path: Path | None = None) -> int:
    """Parse arguments, launch the TUI, and return the process exit code.

    ``default_path`` is primarily for tests; when omitted the current working
    directory is used.
    """
    build_parser().parse_args(argv)
    root = default_path if default_path is not None else Path.cwd()

    if not (sys.stdin.isatty() and sys.stdout.isatty()):
        print(f"{APP_NAME}: stdin and stdout must be a terminal", file=sys.stderr)
        return 1

    try:
        run_manager(root)
    except TerminalSetupError as exc:
        print(f"{APP_NAME}: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

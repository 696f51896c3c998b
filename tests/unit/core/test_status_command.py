"""Tests for the external status command runner."""

from __future__ import annotations

import subprocess
import sys
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from docmanager.status_command import run_status_command


class StatusCommandTests(unittest.TestCase):
    def test_stdout_lines_are_returned_in_order(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            lines = run_status_command(
                Path(tmp),
                [sys.executable, "-c", "print(' M docs/a.md'); print('?? b.mdx')"],
            )

        self.assertEqual(lines, [" M docs/a.md", "?? b.mdx"])

    def test_stderr_and_exit_code_are_ignored(self) -> None:
        script = "import sys; print('out'); sys.stderr.write('err\\n'); sys.exit(3)"
        with tempfile.TemporaryDirectory() as tmp:
            lines = run_status_command(Path(tmp), [sys.executable, "-c", script])

        self.assertEqual(lines, ["out"])

    def test_command_runs_in_given_directory(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            lines = run_status_command(root, [sys.executable, "-c", "import os; print(os.getcwd())"])

        self.assertEqual([Path(line).resolve() for line in lines], [root])

    def test_missing_binary_yields_no_lines(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            lines = run_status_command(Path(tmp), ["docmanager-no-such-binary-xyz", "status"])

        self.assertEqual(lines, [])

    def test_timeout_yields_no_lines(self) -> None:
        with mock.patch(
            "docmanager.status_command.subprocess.run",
            side_effect=subprocess.TimeoutExpired(cmd=["git"], timeout=0.1),
        ):
            lines = run_status_command(Path("."), ["git", "status", "--short"], timeout_seconds=0.1)

        self.assertEqual(lines, [])

    def test_empty_output_yields_no_lines(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            lines = run_status_command(Path(tmp), [sys.executable, "-c", "pass"])

        self.assertEqual(lines, [])


if __name__ == "__main__":
    unittest.main()

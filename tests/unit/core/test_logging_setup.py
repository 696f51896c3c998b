"""Tests for the file-backed diagnostic logger."""

from __future__ import annotations

import logging
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from docmanager import logs
from docmanager.config import APP_NAME


class SetupLoggingTests(unittest.TestCase):
    def setUp(self) -> None:
        self.logger = logging.getLogger(APP_NAME)
        self._reset()

    def tearDown(self) -> None:
        self._reset()

    def _reset(self) -> None:
        for handler in list(self.logger.handlers):
            self.logger.removeHandler(handler)
            handler.close()
        if hasattr(self.logger, "_docmanager_log_path"):
            delattr(self.logger, "_docmanager_log_path")

    def test_records_go_to_the_log_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp) / "nested" / "docmanager.log"

            self.assertEqual(logs.setup_logging(target), target)
            logging.getLogger("docmanager.actions").info("saved %s", "a.md")
            for handler in self.logger.handlers:
                handler.flush()

            self.assertIn("saved a.md", target.read_text(encoding="utf-8"))
            self._reset()

    def test_second_call_keeps_single_handler(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp) / "docmanager.log"
            logs.setup_logging(target)
            again = logs.setup_logging(Path(tmp) / "other.log")

            self.assertEqual(again, target)
            self.assertEqual(len(self.logger.handlers), 1)
            self._reset()

    def test_unwritable_location_falls_back_to_null_handler(self) -> None:
        with mock.patch.object(Path, "mkdir", side_effect=PermissionError(13, "Permission denied")):
            result = logs.setup_logging(Path("/unwritable/docmanager.log"))

        self.assertIsNone(result)
        self.assertEqual(len(self.logger.handlers), 1)
        self.assertIsInstance(self.logger.handlers[0], logging.NullHandler)

    def test_default_path_lives_in_user_log_dir(self) -> None:
        with mock.patch("docmanager.logs.user_log_dir", return_value="/tmp/logs-here") as log_dir:
            path = logs.default_log_path()

        log_dir.assert_called_once_with(APP_NAME, appauthor=False)
        self.assertEqual(path, Path("/tmp/logs-here") / "docmanager.log")


if __name__ == "__main__":
    unittest.main()

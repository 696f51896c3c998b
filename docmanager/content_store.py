"""Whole-file text load and atomic save for the editor buffer.

Text is read as strict UTF-8 with no newline translation so a load followed by
a save leaves the file byte-identical.
"""

from __future__ import annotations

import logging
import os
import shutil
import tempfile
from pathlib import Path

logger = logging.getLogger(__name__)


class ContentStoreError(Exception):
    """A file could not be read or written."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


def _reason(exc: BaseException) -> str:
    if isinstance(exc, UnicodeDecodeError):
        return "not valid UTF-8"
    if isinstance(exc, OSError) and exc.strerror:
        return exc.strerror
    return str(exc) or exc.__class__.__name__


def load(path: Path) -> str:
    """Return the full text of ``path``.

    Raises ``ContentStoreError`` when the file is missing, unreadable, or not
    valid UTF-8.
    """
    try:
        with open(path, "r", encoding="utf-8", newline="") as handle:
            return handle.read()
    except (OSError, UnicodeDecodeError) as exc:
        logger.info("load failed for %s: %s", path, exc)
        raise ContentStoreError(path, _reason(exc)) from exc


def save(path: Path, text: str) -> None:
    """Replace the content of ``path`` with ``text`` in one step.

    The text goes to a temporary sibling file that is then moved over
    ``path``; on failure the original file is untouched and
    ``ContentStoreError`` is raised.
    """
    directory = path.parent
    try:
        fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=directory)
    except OSError as exc:
        logger.info("save failed for %s: %s", path, exc)
        raise ContentStoreError(path, _reason(exc)) from exc

    tmp_path = Path(tmp_name)
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as handle:
            handle.write(text)
            handle.flush()
            os.fsync(handle.fileno())
        if path.exists():
            shutil.copymode(path, tmp_path)
        os.replace(tmp_path, path)
    except (OSError, UnicodeEncodeError) as exc:
        logger.info("save failed for %s: %s", path, exc)
        try:
            tmp_path.unlink()
        except FileNotFoundError:
            pass
        raise ContentStoreError(path, _reason(exc)) from exc

"""Documentation file discovery under the scan root."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable
from pathlib import Path

from .config import ALLOWED_EXTENSIONS, MAX_SCAN_DEPTH

logger = logging.getLogger(__name__)


def has_allowed_extension(name: str, allowed_extensions: Iterable[str]) -> bool:
    """Return whether ``name`` ends in one of ``allowed_extensions`` (case-sensitive).

    Names such as ``.md`` have no extension, matching ``Path.suffix``.
    """
    suffix = Path(name).suffix
    if not suffix:
        return False
    return suffix[1:] in set(allowed_extensions)


def _sorted_children(directory: Path) -> list[os.DirEntry]:
    with os.scandir(directory) as entries:
        return sorted(entries, key=lambda entry: entry.name)


def scan(
    root: Path,
    max_depth: int = MAX_SCAN_DEPTH,
    allowed_extensions: Iterable[str] = ALLOWED_EXTENSIONS,
) -> list[Path]:
    """Collect documentation files below ``root`` in depth-first name order.

    Entries directly inside ``root`` are depth 1; directories are descended
    while their children stay within ``max_depth``. Only regular files (not
    symlinks) with an allowed extension are returned. An unreadable root
    yields ``[]`` and unreadable subdirectories are skipped.
    """
    extensions = tuple(allowed_extensions)
    found: list[Path] = []
    if max_depth < 1:
        return found

    try:
        root_children = _sorted_children(root)
    except OSError as exc:
        logger.warning("cannot scan root %s: %s", root, exc)
        return found

    def visit(children: list[os.DirEntry], depth: int) -> None:
        for child in children:
            try:
                is_dir = child.is_dir(follow_symlinks=False)
                is_file = not is_dir and child.is_file(follow_symlinks=False)
            except OSError:
                continue

            if is_file:
                if has_allowed_extension(child.name, extensions):
                    found.append(Path(child.path))
                continue

            if is_dir and depth < max_depth:
                try:
                    grandchildren = _sorted_children(Path(child.path))
                except OSError as exc:
                    logger.debug("skipping unreadable directory %s: %s", child.path, exc)
                    continue
                visit(grandchildren, depth + 1)

    visit(root_children, 1)
    return found

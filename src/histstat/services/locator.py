"""Locate the most recently written shell history file."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from histstat.errors import HistFileNotFoundError, HistIoError

logger = logging.getLogger(__name__)

HISTORY_KEYWORD = "history"
KNOWN_SHELLS: tuple[str, ...] = ("zsh", "bash", "fish")


def is_history_file(name: str, keyword: str = HISTORY_KEYWORD, shells: Iterable[str] = KNOWN_SHELLS) -> bool:
    """Check if a file name looks like a shell history file."""
    return keyword in name and any(shell in name for shell in shells)


def find_history_file(
    home: Path,
    keyword: str = HISTORY_KEYWORD,
    shells: Iterable[str] = KNOWN_SHELLS,
) -> Path:
    """Return the history file in ``home`` with the latest modification time.

    Only direct children of ``home`` are considered. Entries whose metadata
    cannot be read are skipped. When several candidates share the latest
    mtime, the one listed last by the directory wins.
    """
    shells = tuple(shells)
    try:
        entries = list(home.iterdir())
    except OSError as e:
        raise HistIoError(e) from e

    candidates: list[tuple[Path, int]] = []
    for entry in entries:
        if not is_history_file(entry.name, keyword, shells):
            continue
        try:
            mtime = entry.stat().st_mtime_ns
        except OSError as e:
            logger.debug("Skipping %s: %s", entry, e)
            continue
        candidates.append((entry, mtime))

    logger.debug("History candidates in %s: %s", home, [str(path) for path, _ in candidates])
    if not candidates:
        raise HistFileNotFoundError()

    candidates.sort(key=lambda candidate: candidate[1])
    latest = candidates[-1][0]
    logger.debug("Using history file: %s", latest)
    return latest

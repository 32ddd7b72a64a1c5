"""History file reader."""

from __future__ import annotations

import logging
from pathlib import Path

from histstat.errors import HistIoError

logger = logging.getLogger(__name__)


def load_history(path: Path) -> list[str]:
    """Read a history file and split it into raw lines.

    Invalid UTF-8 is replaced rather than rejected. The empty segment after a
    trailing newline is kept.
    """
    try:
        data = Path(path).read_bytes()
    except OSError as e:
        raise HistIoError(e) from e

    lines = data.decode("utf-8", errors="replace").split("\n")
    logger.debug("Read %d lines from %s", len(lines), path)
    return lines

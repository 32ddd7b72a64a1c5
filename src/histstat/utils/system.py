"""System utility checks."""

from __future__ import annotations

from pathlib import Path

from histstat.errors import HistIoError


def get_home_dir() -> Path:
    """Return the invoking user's home directory."""
    try:
        return Path.home()
    except (RuntimeError, KeyError) as e:
        raise HistIoError(f"cannot determine home directory: {e}") from e

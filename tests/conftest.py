"""Shared test fixtures."""

from __future__ import annotations

import logging
import os

import pytest


@pytest.fixture
def home(tmp_path, monkeypatch):
    """A fake home directory with no config and no env overrides."""
    home_dir = tmp_path / "home"
    home_dir.mkdir()
    monkeypatch.setenv("HOME", str(home_dir))
    for var in ("HISTSTAT_CONFIG", "HISTSTAT_COUNT", "HISTSTAT_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    return home_dir


@pytest.fixture
def write_history():
    """Write a history file and pin its mtime."""

    def _write(path, lines, mtime=None):
        path.write_text("\n".join(lines) + "\n")
        if mtime is not None:
            os.utime(path, (mtime, mtime))
        return path

    return _write


@pytest.fixture
def root_log_level():
    """Restore the root logger level after a test changes it."""
    root = logging.getLogger()
    original = root.level
    yield root
    root.setLevel(original)

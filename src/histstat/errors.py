"""Errors reported to the user by the CLI."""

from __future__ import annotations


class HistStatError(Exception):
    """Base class for fatal histstat errors."""


class HistFileNotFoundError(HistStatError):
    """No entry in the home directory looks like a shell history file."""

    def __init__(self) -> None:
        super().__init__("not found history file")


class HistIoError(HistStatError):
    """Wraps an underlying I/O failure."""

    def __init__(self, error: OSError | str) -> None:
        self.error = error
        super().__init__(f"io error: {error}")


class ConfigError(HistStatError):
    """Invalid configuration file or environment override."""

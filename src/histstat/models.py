"""Data models for histstat."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ParsedCommand:
    """A command name and exit status pulled out of one history line."""

    name: str = ""
    exit_status: int = 0


@dataclass
class RankedCommand:
    """A command name paired with how many times it succeeded."""

    name: str = ""
    count: int = 0

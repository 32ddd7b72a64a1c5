"""Tally successful commands from raw history lines."""

from __future__ import annotations

import logging
import re
from collections import Counter
from typing import Iterable

from histstat.models import ParsedCommand

logger = logging.getLogger(__name__)

STATUS_RE = re.compile(r"[+-]?[0-9]+")
STATUS_MIN = -(2**31)
STATUS_MAX = 2**31 - 1


def parse_status(text: str) -> int:
    """Parse an exit status, falling back to 0 (success) when it isn't a valid int32."""
    if not STATUS_RE.fullmatch(text):
        return 0
    status = int(text)
    if not STATUS_MIN <= status <= STATUS_MAX:
        return 0
    return status


def command_name(command: str) -> str:
    """Return the counted name for a command line.

    ``sudo`` is looked through: ``sudo apt install x`` counts as ``apt install x``.
    """
    first, sep, rest = command.partition(" ")
    if not sep:
        return command
    if first == "sudo":
        return rest
    return first


def parse_line(line: str) -> ParsedCommand | None:
    """Parse a ``<prefix>:<status>;<command>`` line. Returns None if malformed."""
    _, sep, main = line.partition(":")
    if not sep:
        return None
    status, sep, command = main.partition(";")
    if not sep:
        return None
    return ParsedCommand(name=command_name(command), exit_status=parse_status(status))


def count_commands(lines: Iterable[str]) -> Counter[str]:
    """Count successful invocations per command name."""
    counts: Counter[str] = Counter()
    for line in lines:
        parsed = parse_line(line)
        if parsed is not None and parsed.exit_status == 0:
            counts[parsed.name] += 1
    logger.debug("Counted %d distinct commands", len(counts))
    return counts

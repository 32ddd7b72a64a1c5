"""Ranking and rendering of command counts."""

from __future__ import annotations

from typing import Mapping

from rich.markup import escape
from rich.table import Table

from histstat.models import RankedCommand

DEFAULT_COUNT = 10


def sort_command_counts(counts: Mapping[str, int]) -> list[RankedCommand]:
    """Sort counts ascending. Equal counts keep the mapping's iteration order."""
    ranked = [RankedCommand(name=name, count=count) for name, count in counts.items()]
    ranked.sort(key=lambda item: item.count)
    return ranked


def format_line(item: RankedCommand) -> str:
    return f"count: {item.count}\t {item.name}\n"


def format_statistics(stats: list[RankedCommand], count: int = DEFAULT_COUNT) -> list[str]:
    """Format the ``count`` most frequent commands, most frequent first."""
    display_limit = max(0, min(count, len(stats)))
    lines = [format_line(item) for item in reversed(stats)]
    return lines[:display_limit]


def top_commands(counts: Mapping[str, int], count: int = DEFAULT_COUNT) -> list[RankedCommand]:
    """Return the ``count`` most frequent commands in ascending order."""
    stats = sort_command_counts(counts)
    display_limit = max(0, min(count, len(stats)))
    return stats[len(stats) - display_limit :]


def render_statistics(counts: Mapping[str, int], count: int = DEFAULT_COUNT) -> str:
    """Render the ranking with the most frequent command on the last line."""
    lines = format_statistics(sort_command_counts(counts), count)
    lines.reverse()
    return "".join(lines)


def build_table(counts: Mapping[str, int], count: int = DEFAULT_COUNT) -> Table:
    """Build a rich table of the ranking, in the same order as the plain output."""
    table = Table(title="Top commands")
    table.add_column("Rank", justify="right", style="dim")
    table.add_column("Count", justify="right", style="green")
    table.add_column("Command", style="cyan")

    ranked = top_commands(counts, count)
    for rank, item in zip(range(len(ranked), 0, -1), ranked):
        table.add_row(str(rank), str(item.count), escape(item.name))
    return table

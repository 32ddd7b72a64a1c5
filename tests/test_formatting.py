"""Tests for ranking and formatting utilities."""

from __future__ import annotations

from rich.console import Console
from rich.table import Table

from histstat.models import RankedCommand
from histstat.utils.formatting import (
    build_table,
    format_line,
    format_statistics,
    render_statistics,
    sort_command_counts,
    top_commands,
)

COUNTS = {"ls": 3, "git": 5, "cd": 1}


class TestSortCommandCounts:
    def test_ascending(self):
        ranked = sort_command_counts(COUNTS)
        assert [item.count for item in ranked] == [1, 3, 5]
        assert [item.name for item in ranked] == ["cd", "ls", "git"]

    def test_empty(self):
        assert sort_command_counts({}) == []

    def test_ties_keep_all_entries(self):
        ranked = sort_command_counts({"a": 2, "b": 2, "c": 1})
        assert ranked[0] == RankedCommand(name="c", count=1)
        assert {item.name for item in ranked[1:]} == {"a", "b"}


class TestFormatStatistics:
    def test_line_format(self):
        assert format_line(RankedCommand(name="ls", count=3)) == "count: 3\t ls\n"

    def test_most_frequent_first(self):
        lines = format_statistics(sort_command_counts(COUNTS), 2)
        assert lines == ["count: 5\t git\n", "count: 3\t ls\n"]

    def test_count_larger_than_entries(self):
        lines = format_statistics(sort_command_counts(COUNTS), 50)
        assert len(lines) == 3

    def test_zero(self):
        assert format_statistics(sort_command_counts(COUNTS), 0) == []

    def test_negative_is_clamped(self):
        assert format_statistics(sort_command_counts(COUNTS), -1) == []

    def test_default_count(self):
        counts = {f"cmd{i}": i for i in range(1, 21)}
        lines = format_statistics(sort_command_counts(counts))
        assert len(lines) == 10
        assert lines[0] == "count: 20\t cmd20\n"


class TestRenderStatistics:
    def test_ascending_on_screen(self):
        assert render_statistics(COUNTS, 2) == "count: 3\t ls\ncount: 5\t git\n"

    def test_all_entries(self):
        output = render_statistics(COUNTS, 10)
        assert output == "count: 1\t cd\ncount: 3\t ls\ncount: 5\t git\n"

    def test_empty(self):
        assert render_statistics({}, 10) == ""

    def test_name_with_spaces(self):
        assert render_statistics({"apt update": 4}, 10) == "count: 4\t apt update\n"


class TestTopCommands:
    def test_highest_in_ascending_order(self):
        assert top_commands(COUNTS, 2) == [
            RankedCommand(name="ls", count=3),
            RankedCommand(name="git", count=5),
        ]

    def test_zero(self):
        assert top_commands(COUNTS, 0) == []


class TestBuildTable:
    def test_rows(self):
        table = build_table(COUNTS, 2)
        assert isinstance(table, Table)
        assert table.row_count == 2

    def test_renders_names(self):
        console = Console(width=80, record=True)
        console.print(build_table({"[bold]x": 2, "git": 5}, 10))
        output = console.export_text()
        assert "[bold]x" in output
        assert "git" in output
        assert output.index("[bold]x") < output.index("git")

"""CLI entry point using typer."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from histstat import __version__
from histstat.config import config_path, load_config
from histstat.errors import HistStatError
from histstat.services.counter import count_commands
from histstat.services.loader import load_history
from histstat.services.locator import find_history_file
from histstat.utils.formatting import build_table, render_statistics, top_commands
from histstat.utils.system import get_home_dir

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="histstat",
    help="Show the commands you run most, from your shell history.",
    add_completion=False,
)
console = Console()


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"histstat v{__version__}")
        raise typer.Exit()


def setup_logging(level: str, verbose: bool = False) -> None:
    log_level = logging.DEBUG if verbose else getattr(logging, level.upper(), logging.WARNING)
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    # basicConfig is a no-op once the root logger has handlers
    logging.getLogger().setLevel(log_level)


@app.command()
def main(
    count: Optional[int] = typer.Option(None, "--count", "-c", min=0, help="Number of top commands to display (default: 10)"),
    file: Optional[Path] = typer.Option(None, "--file", "-f", help="Read this history file instead of the latest one in $HOME"),
    table: bool = typer.Option(False, "--table", help="Render the ranking as a table"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True, help="Show version and exit"
    ),
) -> None:
    """Rank the commands that ran successfully in your shell history."""
    try:
        home = get_home_dir()
        config = load_config(config_path(home))
        setup_logging(config.logging.level, verbose)
        logger.debug("Home directory: %s", home)

        if file is not None:
            hist_path = file.expanduser()
        else:
            hist_path = find_history_file(home, config.locator.keyword, config.locator.shells)
        typer.echo(repr(str(hist_path)))

        counts = count_commands(load_history(hist_path))
    except HistStatError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(1)

    limit = config.display.count if count is None else count
    if table or config.display.table:
        if top_commands(counts, limit):
            console.print(build_table(counts, limit))
        else:
            console.print("[dim]No commands found.[/dim]")
    else:
        typer.echo(render_statistics(counts, limit))


if __name__ == "__main__":
    app()

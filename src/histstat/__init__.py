"""histstat - rank the commands you run most from your shell history."""

__version__ = "0.1.0"

"""
CLI command modules for famtext.

Each command module defines a single Typer-compatible command function.
"""

from famtext.cli.commands.import_text import import_command
from famtext.cli.commands.stats import stats_command

__all__ = [
    "import_command",
    "stats_command",
]

"""
CLI command modules for gedcom_graph.

Each command module defines Typer-compatible command functions.
"""

from gedcom_graph.cli.commands.age import age_command
from gedcom_graph.cli.commands.export import export_command
from gedcom_graph.cli.commands.relatives import (
    ancestors_command,
    descendants_command,
    relatives_command,
)
from gedcom_graph.cli.commands.search import find_command, roots_command
from gedcom_graph.cli.commands.stats import stats_command

__all__ = [
    "age_command",
    "ancestors_command",
    "descendants_command",
    "export_command",
    "find_command",
    "relatives_command",
    "roots_command",
    "stats_command",
]

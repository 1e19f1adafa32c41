
"""
CLI command modules for relatedness.

Each command module defines a single Typer-compatible command function.
"""

from relatedness.cli.commands.calculate import calculate_command
from relatedness.cli.commands.export import export_command
from relatedness.cli.commands.paths import paths_command
from relatedness.cli.commands.stats import stats_command
from relatedness.cli.commands.validate import validate_command

__all__ = [
    "calculate_command",
    "export_command",
    "paths_command",
    "stats_command",
    "validate_command",
]

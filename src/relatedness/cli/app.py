
from __future__ import annotations

import typer
from rich.console import Console

from relatedness.cli.commands.calculate import calculate_command
from relatedness.cli.commands.export import export_command
from relatedness.cli.commands.paths import paths_command
from relatedness.cli.commands.stats import stats_command
from relatedness.cli.commands.validate import validate_command

app = typer.Typer(
    name="relatedness",
    help="Wright's coefficient of relatedness over family trees",
    add_completion=False,
)

console = Console()

app.command("calculate")(calculate_command)
app.command("paths")(paths_command)
app.command("stats")(stats_command)
app.command("validate")(validate_command)
app.command("export")(export_command)


def main():
    app()


if __name__ == "__main__":
    main()

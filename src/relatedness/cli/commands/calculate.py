
from __future__ import annotations

import typer
from rich.console import Console
from rich.table import Table

from relatedness.ancestry.calculator import relationship_summary
from relatedness.cli.utils import TREE_HELP, format_coefficient, load_family_tree, require_individuals

console = Console()


def calculate_command(
    tree_source: str = typer.Argument(..., metavar="TREE", help=TREE_HELP),
    id1: str = typer.Argument(..., help="First individual"),
    id2: str = typer.Argument(..., help="Second individual"),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable rich logging",
    ),
):
    """
    Coefficient of relatedness, generational distance and common ancestors.
    """
    tree, _ = load_family_tree(tree_source, verbose=verbose)
    require_individuals(tree, id1, id2)

    summary = relationship_summary(tree, id1, id2)
    distance = summary.generational_distance

    table = Table(title=f"Relatedness of {id1} and {id2}")
    table.add_column("Measure", style="bold")
    table.add_column("Value", justify="right")

    table.add_row("Coefficient of relatedness", format_coefficient(summary.coefficient))
    table.add_row("Generational distance", "undefined" if distance is None else str(distance))
    table.add_row("Common ancestors", str(len(summary.common_ancestors)))
    table.add_row("Independent paths", str(len(summary.paths)))

    console.print(table)
    if summary.common_ancestors:
        console.print("Common ancestors: " + ", ".join(summary.common_ancestors))

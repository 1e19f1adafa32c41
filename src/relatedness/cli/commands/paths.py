
from __future__ import annotations

import typer
from rich.console import Console
from rich.table import Table

from relatedness.ancestry.calculator import relationship_paths
from relatedness.cli.utils import TREE_HELP, load_family_tree, require_individuals

console = Console()


def paths_command(
    tree_source: str = typer.Argument(..., metavar="TREE", help=TREE_HELP),
    id1: str = typer.Argument(..., help="First individual"),
    id2: str = typer.Argument(..., help="Second individual"),
    explain: bool = typer.Option(
        False,
        "--explain",
        "-e",
        help="Show the genetic explanation of each path",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable rich logging",
    ),
):
    """
    List every independent relationship path between two individuals.
    """
    tree, _ = load_family_tree(tree_source, verbose=verbose)
    require_individuals(tree, id1, id2)

    paths = relationship_paths(tree, id1, id2)
    if not paths:
        console.print(f"No relationship paths between {id1} and {id2}.")
        return

    table = Table(title=f"Relationship paths: {id1} → {id2}")
    table.add_column("Path", style="bold")
    table.add_column("Type")
    table.add_column("Contribution", justify="right")
    table.add_column("Description")

    for p in paths:
        table.add_row(" → ".join(p.path), p.type.value, f"{p.coefficient:.3f}", p.description)

    console.print(table)

    if explain:
        for p in paths:
            console.print(f"[bold]{' → '.join(p.path)}[/bold]: {p.explanation}")

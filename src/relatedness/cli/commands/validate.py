
from __future__ import annotations

import typer
from rich.console import Console
from rich.table import Table

from relatedness.cli.utils import TREE_HELP, load_family_tree

console = Console()


def validate_command(
    tree_source: str = typer.Argument(..., metavar="TREE", help=TREE_HELP),
    strict: bool = typer.Option(
        False,
        "--strict",
        help="Exit with status 1 when the tree needed repairs",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable rich logging",
    ),
):
    """
    Report the structural repairs a tree needs.
    """
    tree, report = load_family_tree(tree_source, verbose=verbose)

    if not report.defects:
        console.print(f"Tree is valid ({len(tree)} individuals).")
        return

    table = Table(title="Tree Repairs")
    table.add_column("Kind", style="bold")
    table.add_column("Individual")
    table.add_column("Parent")
    table.add_column("Detail")

    for defect in report.defects:
        table.add_row(defect.kind.value, defect.individual, defect.parent or "", defect.detail)

    console.print(table)

    if strict:
        raise typer.Exit(code=1)


from __future__ import annotations

from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from relatedness.cli.utils import TREE_HELP, format_coefficient, load_family_tree
from relatedness.config import get_config
from relatedness.stats.analyzer import generational_stats, relatedness_distribution

console = Console()


def stats_command(
    tree_source: str = typer.Argument(..., metavar="TREE", help=TREE_HELP),
    precision: Optional[int] = typer.Option(
        None,
        "--precision",
        "-p",
        min=0,
        help="Decimal places used to bucket coefficients (default from config)",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable rich logging",
    ),
):
    """
    Show the relatedness distribution and per-generation statistics.
    """
    tree, _ = load_family_tree(tree_source, verbose=verbose)
    precision = get_config().precision if precision is None else precision

    distribution = relatedness_distribution(tree, precision)
    total = sum(distribution.values())

    dist_table = Table(title="Relatedness Distribution")
    dist_table.add_column("Coefficient", justify="right", style="bold")
    dist_table.add_column("Pairs", justify="right")
    dist_table.add_column("Share", justify="right")

    for coefficient, count in distribution.items():
        share = count / total if total else 0.0
        dist_table.add_row(f"{coefficient:.{precision}f}", str(count), f"{share:.1%}")

    console.print(dist_table)

    gen_table = Table(title="Generational Statistics")
    gen_table.add_column("Generation", justify="right", style="bold")
    gen_table.add_column("Individuals", justify="right")
    gen_table.add_column("Average relatedness", justify="right")

    for generation, stats in generational_stats(tree).items():
        gen_table.add_row(
            str(generation),
            str(stats.count),
            format_coefficient(stats.average_relatedness),
        )

    console.print(gen_table)

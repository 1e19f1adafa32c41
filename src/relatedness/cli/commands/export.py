from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console

from relatedness.cli.utils import TREE_HELP, read_family_tree, require_individuals, write_json
from relatedness.config import get_config
from relatedness.core.context import AnalysisContext
from relatedness.core.pipeline import Pipeline
from relatedness.exporter import build_analysis_dict
from relatedness.logger import get_logger

console = Console()


def _parse_pair(raw: str) -> tuple:
    parts = [p.strip() for p in raw.split(",")]
    if len(parts) != 2 or not all(parts):
        raise typer.BadParameter(f"Expected ID1,ID2 but got {raw!r}", param_hint="--pair")
    return parts[0], parts[1]


def export_command(
    tree_source: str = typer.Argument(..., metavar="TREE", help=TREE_HELP),
    pair: Optional[List[str]] = typer.Option(
        None,
        "--pair",
        help="Also summarise this pair, as ID1,ID2 (repeatable)",
    ),
    out: Optional[Path] = typer.Option(
        None,
        "--out",
        "-o",
        help="Write output to file instead of stdout",
    ),
    pretty: bool = typer.Option(
        False,
        "--pretty",
        help="Pretty-print JSON",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable rich logging",
    ),
):
    """
    Export the repaired tree and all statistics to JSON (stdout by default).
    """
    pairs = [_parse_pair(raw) for raw in pair or []]

    # Read once; the pipeline repairs this tree. Repair never drops
    # individuals, so pair ids can be checked up front.
    tree = read_family_tree(tree_source)
    for a, b in pairs:
        require_individuals(tree, a, b)

    ctx = AnalysisContext(
        config=get_config(),
        logger=get_logger("cli.export"),
        tree_source=tree_source,
        tree=tree,
        pairs=pairs,
    )
    result = Pipeline(ctx).run()

    if verbose:
        console.log(
            f"Analysed {len(result.tree)} individuals "
            f"({len(result.repair.defects)} repair(s))"
        )
        console.log("Exporting JSON")

    write_json(build_analysis_dict(result), out=out, pretty=pretty)

    if verbose:
        console.log("Export complete")


from __future__ import annotations

import json
import time
from pathlib import Path
from typing import Any, Dict, Tuple

import typer
from rich.console import Console

from relatedness.core.exceptions import TreeFormatError
from relatedness.core.pipeline import resolve_tree
from relatedness.model.tree import FamilyTree
from relatedness.validation.repair import RepairReport, repair_report

console = Console()

TREE_HELP = "Tree document (YAML or JSON), or 'example' for the built-in tree"


def read_family_tree(source: str) -> FamilyTree:
    """
    Load a tree without repairing it; unreadable input is a usage error.
    """
    try:
        return resolve_tree(source)
    except FileNotFoundError:
        raise typer.BadParameter(f"Tree file not found: {source}", param_hint="TREE") from None
    except TreeFormatError as exc:
        raise typer.BadParameter(str(exc), param_hint="TREE") from None


def load_family_tree(source: str, *, verbose: bool = False) -> Tuple[FamilyTree, RepairReport]:
    """
    Load and repair a tree; returns the repaired tree and the repair report.
    """
    t0 = time.perf_counter()

    report = repair_report(read_family_tree(source))

    elapsed = time.perf_counter() - t0

    if verbose:
        console.log(
            f"Loaded {len(report.tree)} individuals in {elapsed:.2f}s "
            f"({len(report.defects)} repair(s))"
        )

    return report.tree, report


def require_individuals(tree: FamilyTree, *ids: str) -> None:
    for individual_id in ids:
        if individual_id not in tree:
            known = ", ".join(tree.ids())
            raise typer.BadParameter(
                f"Unknown individual {individual_id!r}. Known: {known}"
            )


def format_coefficient(value: float | None) -> str:
    return "undefined" if value is None else f"{value:.3f}"


def write_json(
    data: Dict[str, Any],
    *,
    out: Path | None,
    pretty: bool,
):
    """
    Write JSON to stdout or file.
    """
    if pretty:
        payload = json.dumps(data, indent=2, ensure_ascii=False)
    else:
        payload = json.dumps(data, separators=(",", ":"), ensure_ascii=False)

    if out:
        out.write_text(payload, encoding="utf-8")
    else:
        print(payload)

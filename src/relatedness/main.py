"""
Main entry for the relatedness calculator's batch mode.

This module is intentionally thin:
- argument parsing
- configuration setup
- pipeline orchestration

No calculation logic lives here. The interactive commands live in
``relatedness.cli``.
"""

from __future__ import annotations

import argparse
from typing import List, Optional, Tuple

from relatedness.config import get_config
from relatedness.logger import configure_debug, get_logger

from relatedness.core.context import AnalysisContext
from relatedness.core.pipeline import EXAMPLE_TREE, Pipeline

log = get_logger("main")


# ---------------------------------------------------------
# CLI Argument Parsing
# ---------------------------------------------------------
def _pair(raw: str) -> Tuple[str, str]:
    parts = [p.strip() for p in raw.split(",")]
    if len(parts) != 2 or not all(parts):
        raise argparse.ArgumentTypeError(f"expected ID1,ID2, got {raw!r}")
    return parts[0], parts[1]


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Relatedness calculator – batch analysis"
    )
    parser.add_argument(
        "-i",
        "--input",
        default=EXAMPLE_TREE,
        help="Path to a tree document (YAML/JSON), or 'example'",
    )
    parser.add_argument(
        "-o",
        "--output",
        default="outputs/analysis.json",
        help="Final output JSON path",
    )
    parser.add_argument(
        "--pair",
        action="append",
        type=_pair,
        default=[],
        help="Summarise an individual pair, as ID1,ID2 (repeatable)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug output",
    )
    return parser


# ---------------------------------------------------------
# Pipeline Runner
# ---------------------------------------------------------
def run(
    input_path: str,
    output_path: str,
    debug_flag: bool,
    pairs: Optional[List[Tuple[str, str]]] = None,
) -> None:
    """
    Prepare context and execute the analysis pipeline.
    """

    cfg = get_config()
    cfg.debug = cfg.debug or bool(debug_flag)
    # Module loggers already exist by now; re-level them in place.
    configure_debug(cfg.debug)

    log.info(f"Loading tree: {input_path}")

    ctx = AnalysisContext(
        config=cfg,
        logger=log,
        tree_source=input_path,
        output_path=output_path,
        pairs=list(pairs or []),
    )

    pipeline = Pipeline(ctx)
    pipeline.run()

    log.info(f"Main pipeline complete. Output: {output_path}")


# ---------------------------------------------------------
# Program Entry Point
# ---------------------------------------------------------
def main(argv: Optional[List[str]] = None) -> None:
    ap = build_arg_parser()
    args = ap.parse_args(argv)

    try:
        run(
            input_path=args.input,
            output_path=args.output,
            debug_flag=args.debug,
            pairs=args.pair,
        )
    except Exception as exc:
        log.exception(f"Unhandled exception in main: {exc}")
        raise


if __name__ == "__main__":
    main()

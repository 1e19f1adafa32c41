"""
exporter.py
High-level JSON export entry point.

This module provides a stable API used by relatedness.core.pipeline:

    export_analysis_to_json(result, output_path)

It delegates the actual JSON construction to json_exporter.export_analysis_json.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Union

from relatedness.logger import get_logger

from .json_exporter import export_analysis_json

if TYPE_CHECKING:
    from relatedness.core.pipeline import AnalysisResult

log = get_logger("exporter")


def export_analysis_to_json(
    result: "AnalysisResult",
    output_path: Union[str, Path],
    indent: int = 2,
) -> Path:
    """
    Write ``result`` to ``output_path`` and return the resolved path.
    """
    output_path = Path(output_path)
    export_analysis_json(result, output_path, indent=indent)
    log.debug("Analysis exported to %s", output_path)
    return output_path

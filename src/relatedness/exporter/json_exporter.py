"""
json_exporter.py
Structured JSON exporter for analysis results.

This exporter:
- Converts dataclasses, enums and trees to dictionaries (NOT strings)
- Stringifies float / int mapping keys so the output is valid JSON
- Is deterministic: ids, generations and coefficients are emitted sorted
"""

from __future__ import annotations

import json
from dataclasses import fields, is_dataclass
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict

from relatedness.logger import get_logger
from relatedness.model.tree import FamilyTree

if TYPE_CHECKING:
    from relatedness.core.pipeline import AnalysisResult

log = get_logger("json_exporter")


def _to_json_compatible(obj: Any) -> Any:
    """
    Recursively convert objects into JSON-compatible structures.

    Rules:
    - Primitives pass through
    - Enums → their value
    - FamilyTree → tree document dict
    - objects with ``as_dict`` → that dict (recursively)
    - dataclasses → dict of fields (recursively)
    - dict → dict with string keys (recursively)
    - list / tuple / set → list (recursively)
    - Last resort → str(obj)
    """
    if obj is None or isinstance(obj, (bool, int, float, str)):
        return obj

    if isinstance(obj, Enum):
        return obj.value

    if isinstance(obj, FamilyTree):
        return obj.as_dict()

    if hasattr(obj, "as_dict"):
        return _to_json_compatible(obj.as_dict())

    if is_dataclass(obj):
        return {f.name: _to_json_compatible(getattr(obj, f.name)) for f in fields(obj)}

    if isinstance(obj, dict):
        return {str(k): _to_json_compatible(v) for k, v in obj.items()}

    if isinstance(obj, set):
        return [_to_json_compatible(v) for v in sorted(obj)]

    if isinstance(obj, (list, tuple)):
        return [_to_json_compatible(v) for v in obj]

    return str(obj)


def build_analysis_dict(result: "AnalysisResult") -> Dict[str, Any]:
    """
    Convert an AnalysisResult into a JSON-safe dict.
    """
    return {
        "counts": {
            "individuals": len(result.tree),
            "pairs": sum(result.distribution.values()),
            "repairs": len(result.repair.defects),
        },
        "tree": _to_json_compatible(result.tree),
        "repairs": [
            {
                "kind": d.kind.value,
                "individual": d.individual,
                "parent": d.parent,
                "detail": d.detail,
            }
            for d in result.repair.defects
        ],
        "distribution": _to_json_compatible(result.distribution),
        "generational_stats": _to_json_compatible(result.generational_stats),
        "pairs": [_to_json_compatible(s) for s in result.summaries],
    }


def serialize_analysis_to_json_string(result: "AnalysisResult", indent: int | None = 2) -> str:
    if indent:
        return json.dumps(build_analysis_dict(result), indent=indent, ensure_ascii=False)
    return json.dumps(build_analysis_dict(result), separators=(",", ":"), ensure_ascii=False)


def export_analysis_json(result: "AnalysisResult", output_path: str | Path, indent: int = 2) -> None:
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    log.info(
        "Exporting analysis JSON to: %s (individuals=%d, buckets=%d, pairs=%d)",
        output_path,
        len(result.tree),
        len(result.distribution),
        len(result.summaries),
    )

    json_str = serialize_analysis_to_json_string(result, indent=indent)

    with output_path.open("w", encoding="utf-8") as f:
        f.write(json_str)

    size_bytes = output_path.stat().st_size
    log.info("JSON export complete. size=%d bytes", size_bytes)

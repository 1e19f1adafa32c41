"""
Exporter package.

Re-exports the main JSON export entry points used by the pipeline and CLI.
"""

from __future__ import annotations

from .exporter import export_analysis_to_json
from .json_exporter import build_analysis_dict, serialize_analysis_to_json_string

__all__ = [
    "build_analysis_dict",
    "export_analysis_to_json",
    "serialize_analysis_to_json_string",
]

# src/relatedness/validation/__init__.py

from .repair import (
    DefectKind,
    RepairReport,
    TreeDefect,
    is_valid,
    repair,
    repair_report,
    topological_order,
    validate,
)

__all__ = [
    "DefectKind",
    "RepairReport",
    "TreeDefect",
    "is_valid",
    "repair",
    "repair_report",
    "topological_order",
    "validate",
]

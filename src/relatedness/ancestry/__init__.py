# src/relatedness/ancestry/__init__.py

"""
Ancestor discovery and the relatedness calculation built on top of it.
"""

from .finder import AncestorPath, ancestor_ids, ancestor_routes, ancestors_of, is_ancestor, meioses
from .paths import (
    DEFAULT_CLASSIFICATION,
    RelationshipKind,
    RelationshipPath,
    build_classification_table,
    classify,
)
from .calculator import (
    RelationshipSummary,
    calculate_relatedness,
    common_ancestors,
    generational_distance,
    relationship_paths,
    relationship_summary,
)

__all__ = [
    "AncestorPath",
    "ancestor_ids",
    "ancestor_routes",
    "ancestors_of",
    "is_ancestor",
    "meioses",
    "DEFAULT_CLASSIFICATION",
    "RelationshipKind",
    "RelationshipPath",
    "build_classification_table",
    "classify",
    "RelationshipSummary",
    "calculate_relatedness",
    "common_ancestors",
    "generational_distance",
    "relationship_paths",
    "relationship_summary",
]

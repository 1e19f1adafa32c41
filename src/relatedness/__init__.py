"""
Wright's coefficient of relatedness over family trees.

Typical use:

    from relatedness import example_tree, repair, calculate_relatedness

    tree = repair(example_tree())
    calculate_relatedness(tree, "C", "D")   # 0.5

Every query takes the tree explicitly; trees are immutable and ``repair``
returns a new one.
"""

from relatedness.core.exceptions import (
    AnalysisExecutionError,
    RelatednessError,
    TreeFormatError,
    UnknownIndividualError,
)
from relatedness.model import FamilyTree, Individual, example_tree, load_tree, tree_from_dict
from relatedness.validation import RepairReport, TreeDefect, repair, repair_report, validate
from relatedness.ancestry import (
    RelationshipKind,
    RelationshipPath,
    RelationshipSummary,
    ancestor_routes,
    ancestors_of,
    calculate_relatedness,
    common_ancestors,
    generational_distance,
    relationship_paths,
    relationship_summary,
)
from relatedness.stats import (
    GenerationStats,
    generational_stats,
    relatedness_distribution,
    relatedness_matrix,
)

__version__ = "0.1.0"

__all__ = [
    "AnalysisExecutionError",
    "RelatednessError",
    "TreeFormatError",
    "UnknownIndividualError",
    "FamilyTree",
    "Individual",
    "example_tree",
    "load_tree",
    "tree_from_dict",
    "RepairReport",
    "TreeDefect",
    "repair",
    "repair_report",
    "validate",
    "RelationshipKind",
    "RelationshipPath",
    "RelationshipSummary",
    "ancestor_routes",
    "ancestors_of",
    "calculate_relatedness",
    "common_ancestors",
    "generational_distance",
    "relationship_paths",
    "relationship_summary",
    "GenerationStats",
    "generational_stats",
    "relatedness_distribution",
    "relatedness_matrix",
]

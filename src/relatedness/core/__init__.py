"""
Core plumbing shared by the relatedness calculator: error taxonomy,
analysis context and the load -> repair -> analyse pipeline.

``core.pipeline`` is not imported eagerly to avoid import cycles with the
component packages it orchestrates.
"""

from .exceptions import (
    AnalysisExecutionError,
    RelatednessError,
    TreeFormatError,
    UnknownIndividualError,
)

__all__ = [
    "AnalysisExecutionError",
    "RelatednessError",
    "TreeFormatError",
    "UnknownIndividualError",
]

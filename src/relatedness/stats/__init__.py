# src/relatedness/stats/__init__.py

from .analyzer import (
    GenerationStats,
    generational_stats,
    pairwise_relatedness,
    relatedness_distribution,
    relatedness_matrix,
    round_coefficient,
)

__all__ = [
    "GenerationStats",
    "generational_stats",
    "pairwise_relatedness",
    "relatedness_distribution",
    "relatedness_matrix",
    "round_coefficient",
]

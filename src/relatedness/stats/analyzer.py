# src/relatedness/stats/analyzer.py

"""
Statistical Analyzer.

Population-wide summaries built by running the calculator over every
unordered pair of distinct individuals. The cost is quadratic in the number
of individuals, which is fine for interactive-sized trees.
"""

from __future__ import annotations

import itertools
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Dict, Iterable, List, Optional, Tuple

from relatedness.ancestry.calculator import calculate_relatedness
from relatedness.config import get_config
from relatedness.logger import get_logger
from relatedness.model.tree import FamilyTree

log = get_logger("stats.analyzer")

Pair = Tuple[str, str]


@dataclass(frozen=True, slots=True)
class GenerationStats:
    count: int
    average_relatedness: Optional[float]

    @property
    def pairs(self) -> int:
        return self.count * (self.count - 1) // 2

    def as_dict(self) -> Dict[str, object]:
        return {
            "count": self.count,
            "average_relatedness": self.average_relatedness,
        }


def round_coefficient(value: float, precision: int) -> float:
    """Round half-up to ``precision`` decimal places (0.0625 -> 0.063)."""
    quantum = Decimal(1).scaleb(-precision)
    return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def unordered_pairs(ids: Iterable[str]) -> List[Pair]:
    return list(itertools.combinations(sorted(ids), 2))


def pairwise_relatedness(tree: FamilyTree, ids: Optional[Iterable[str]] = None) -> Dict[Pair, float]:
    """Coefficient for every unordered pair of ``ids`` (default: whole tree)."""
    ids = tree.ids() if ids is None else ids
    return {
        (a, b): calculate_relatedness(tree, a, b)
        for a, b in unordered_pairs(ids)
    }


def relatedness_distribution(tree: FamilyTree, precision: Optional[int] = None) -> Dict[float, int]:
    """
    Rounded coefficient -> number of unordered pairs with that value.

    Counts always add up to n * (n - 1) / 2. Keys are ascending.
    """
    precision = get_config().precision if precision is None else precision
    counts: Dict[float, int] = {}

    for coefficient in pairwise_relatedness(tree).values():
        key = round_coefficient(coefficient, precision)
        counts[key] = counts.get(key, 0) + 1

    log.debug("Distribution over %d individuals: %d bucket(s)", len(tree), len(counts))
    return {key: counts[key] for key in sorted(counts)}


def generational_stats(tree: FamilyTree) -> Dict[int, GenerationStats]:
    """
    Per generation: member count and mean coefficient over intra-generation
    pairs. Generations with fewer than two members report ``None``.
    """
    stats: Dict[int, GenerationStats] = {}

    for generation, members in tree.generations().items():
        coefficients = list(pairwise_relatedness(tree, members).values())
        average = sum(coefficients) / len(coefficients) if coefficients else None
        stats[generation] = GenerationStats(count=len(members), average_relatedness=average)

    return stats


def relatedness_matrix(tree: FamilyTree) -> Dict[str, Dict[str, float]]:
    """Symmetric coefficient table with 1.0 on the diagonal."""
    ids = tree.ids()
    matrix: Dict[str, Dict[str, float]] = {a: {a: 1.0} for a in ids}
    for (a, b), coefficient in pairwise_relatedness(tree, ids).items():
        matrix[a][b] = coefficient
        matrix[b][a] = coefficient
    return {a: {b: matrix[a][b] for b in ids} for a in ids}

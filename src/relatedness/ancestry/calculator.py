# src/relatedness/ancestry/calculator.py

"""
Relatedness Calculator.

Wright's coefficient of relatedness is the sum, over every independent line
of descent joining two individuals through a common ancestor, of
0.5 ** (number of meioses on the line). Two routes from the same ancestor
form an independent line only when they share nothing but the ancestor;
routes reusing an intermediate individual describe the same transmission
twice and are dropped.

All functions are pure in ``(tree, id1, id2)``. The tree is expected to be
repaired; unknown ids raise ``UnknownIndividualError``. Founders are assumed
unrelated to one another.
"""

from __future__ import annotations

import itertools
import math
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Set, Tuple

from relatedness.ancestry.finder import (
    AncestorPath,
    ancestor_ids,
    ancestor_routes,
    ancestors_of,
    meioses,
)
from relatedness.ancestry.paths import (
    ClassificationTable,
    RelationshipPath,
    classify,
    configured_classification,
    describe,
    explain,
)
from relatedness.logger import get_logger
from relatedness.model.tree import FamilyTree

log = get_logger("ancestry.calculator")


# ----------------------------------------------------------------------
# Helpers
# ----------------------------------------------------------------------

def _internally_disjoint(route_1: AncestorPath, route_2: AncestorPath) -> bool:
    """True when the two routes share only their starting ancestor."""
    return set(route_1[1:]).isdisjoint(route_2[1:])


def _shares_both_parents(tree: FamilyTree, id1: str, id2: str) -> bool:
    parents_1 = set(tree.individual(id1).parents)
    return len(parents_1) == 2 and parents_1 == set(tree.individual(id2).parents)


def _route_pairs(
    ancestor: str,
    id1: str,
    id2: str,
    routes_1: Dict[str, List[AncestorPath]],
    routes_2: Dict[str, List[AncestorPath]],
) -> Iterable[Tuple[AncestorPath, AncestorPath]]:
    # A lineal ancestor contributes its single route; the other side is the
    # zero-length route consisting of the ancestor alone.
    if ancestor == id1:
        return (((id1,), route) for route in routes_2.get(id1, []))
    if ancestor == id2:
        return ((route, (id2,)) for route in routes_1.get(id2, []))
    return itertools.product(routes_1.get(ancestor, []), routes_2.get(ancestor, []))


# ----------------------------------------------------------------------
# Public API
# ----------------------------------------------------------------------

def common_ancestors(tree: FamilyTree, id1: str, id2: str) -> Set[str]:
    """
    Ancestors shared by both individuals, plus either individual itself
    when it is a direct ancestor of the other.
    """
    tree.require(id1, id2)
    ancestors_1 = ancestor_ids(tree, id1)
    ancestors_2 = ancestor_ids(tree, id2)

    common = ancestors_1 & ancestors_2
    if id1 in ancestors_2:
        common.add(id1)
    if id2 in ancestors_1:
        common.add(id2)
    return common


def relationship_paths(
    tree: FamilyTree,
    id1: str,
    id2: str,
    table: Optional[ClassificationTable] = None,
) -> List[RelationshipPath]:
    """
    Every independent line of descent between ``id1`` and ``id2``.

    Ordered by total meioses, then by path. Swapping the arguments returns
    the same lines with each ``path`` reversed. ``id1 == id2`` gives an
    empty list.
    """
    tree.require(id1, id2)
    if id1 == id2:
        return []

    table = configured_classification() if table is None else table
    routes_1 = ancestor_routes(tree, id1)
    routes_2 = ancestor_routes(tree, id2)
    siblings_by_both = _shares_both_parents(tree, id1, id2)

    results: List[RelationshipPath] = []
    for ancestor in sorted(common_ancestors(tree, id1, id2)):
        for route_1, route_2 in _route_pairs(ancestor, id1, id2, routes_1, routes_2):
            if not _internally_disjoint(route_1, route_2):
                continue

            sides = (meioses(route_1), meioses(route_2))
            coefficient = 0.5 ** (sides[0] + sides[1])
            kind = classify(sides[0], sides[1], siblings_by_both, table)
            path = tuple(reversed(route_1)) + route_2[1:]

            results.append(
                RelationshipPath(
                    path=path,
                    type=kind,
                    coefficient=coefficient,
                    description=describe(path, ancestor, sides),
                    explanation=explain(kind, sides, coefficient),
                    ancestor=ancestor,
                    meioses=sides,
                )
            )

    results.sort(key=lambda p: (p.length, p.path))
    log.debug("%s ~ %s: %d independent path(s)", id1, id2, len(results))
    return results


def calculate_relatedness(tree: FamilyTree, id1: str, id2: str) -> float:
    """Wright's coefficient of relatedness; 1.0 for an individual with itself."""
    tree.require(id1, id2)
    if id1 == id2:
        return 1.0
    return math.fsum(p.coefficient for p in relationship_paths(tree, id1, id2))


def generational_distance(tree: FamilyTree, id1: str, id2: str) -> Optional[int]:
    """
    Fewest meioses separating the pair through any common ancestor.

    ``None`` when the pair has no common ancestor; 0 for ``id1 == id2``.
    """
    tree.require(id1, id2)
    if id1 == id2:
        return 0

    lengths_1 = ancestors_of(tree, id1)
    lengths_2 = ancestors_of(tree, id2)

    best: Optional[int] = None
    for ancestor in common_ancestors(tree, id1, id2):
        to_1 = 0 if ancestor == id1 else min(lengths_1[ancestor])
        to_2 = 0 if ancestor == id2 else min(lengths_2[ancestor])
        if best is None or to_1 + to_2 < best:
            best = to_1 + to_2
    return best


@dataclass(frozen=True)
class RelationshipSummary:
    """Everything the calculator reports for one pair."""

    id1: str
    id2: str
    coefficient: float
    generational_distance: Optional[int]
    common_ancestors: Tuple[str, ...] = ()
    paths: Tuple[RelationshipPath, ...] = field(default_factory=tuple)

    @property
    def related(self) -> bool:
        return self.coefficient > 0

    def as_dict(self) -> Dict[str, Any]:
        return {
            "id1": self.id1,
            "id2": self.id2,
            "coefficient": self.coefficient,
            "generational_distance": self.generational_distance,
            "common_ancestors": list(self.common_ancestors),
            "paths": [p.as_dict() for p in self.paths],
        }


def relationship_summary(tree: FamilyTree, id1: str, id2: str) -> RelationshipSummary:
    paths = relationship_paths(tree, id1, id2)
    coefficient = 1.0 if id1 == id2 else math.fsum(p.coefficient for p in paths)
    return RelationshipSummary(
        id1=id1,
        id2=id2,
        coefficient=coefficient,
        generational_distance=generational_distance(tree, id1, id2),
        common_ancestors=tuple(sorted(common_ancestors(tree, id1, id2))),
        paths=tuple(paths),
    )

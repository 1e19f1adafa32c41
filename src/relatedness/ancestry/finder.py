# src/relatedness/ancestry/finder.py

"""
Ancestor Finder.

Walks upward through ``parents`` carrying the full route, so an ancestor
reached along two different lines (pedigree collapse, double cousins, ...)
is recorded once per route instead of being collapsed to its shortest
distance. Downstream, the calculator needs the routes themselves to test
whether two lines of descent are independent.

Routes are tuples ordered from the ancestor DOWN to the queried individual:

    ("A", "C", "E")   # A is parent of C, C is parent of E; 2 meioses
"""

from __future__ import annotations

from collections import deque
from typing import Dict, List, Set, Tuple

from relatedness.model.tree import FamilyTree

AncestorPath = Tuple[str, ...]


def meioses(route: AncestorPath) -> int:
    """Number of parent -> child edges along a route."""
    return len(route) - 1


def ancestor_routes(tree: FamilyTree, individual_id: str) -> Dict[str, List[AncestorPath]]:
    """
    Map every ancestor of ``individual_id`` to all routes leading down to it.

    Returns an empty mapping for founders and for ids absent from the tree.
    A parent already on the current route is skipped, so an unrepaired
    cyclic tree still terminates.
    """
    if individual_id not in tree:
        return {}

    routes: Dict[str, List[AncestorPath]] = {}
    # Each entry is a route climbing upward: (individual, parent, grandparent, ...)
    stack: List[AncestorPath] = [(individual_id,)]

    while stack:
        upward = stack.pop()
        current = tree.get(upward[-1])
        if current is None:
            continue
        for parent_id in current.parents:
            if parent_id in upward or parent_id not in tree:
                continue
            extended = upward + (parent_id,)
            routes.setdefault(parent_id, []).append(tuple(reversed(extended)))
            stack.append(extended)

    return {
        ancestor: sorted(found, key=lambda r: (len(r), r))
        for ancestor, found in sorted(routes.items())
    }


def ancestors_of(tree: FamilyTree, individual_id: str) -> Dict[str, Set[int]]:
    """Map each ancestor to the set of distinct route lengths (meioses)."""
    return {
        ancestor: {meioses(route) for route in found}
        for ancestor, found in ancestor_routes(tree, individual_id).items()
    }


def ancestor_ids(tree: FamilyTree, individual_id: str) -> Set[str]:
    """Plain reachability set, without route bookkeeping."""
    seen: Set[str] = set()
    if individual_id not in tree:
        return seen

    queue = deque([individual_id])
    while queue:
        current = tree.get(queue.popleft())
        if current is None:
            continue
        for parent_id in current.parents:
            if parent_id not in seen and parent_id in tree and parent_id != individual_id:
                seen.add(parent_id)
                queue.append(parent_id)
    return seen


def is_ancestor(tree: FamilyTree, ancestor_id: str, descendant_id: str) -> bool:
    return ancestor_id in ancestor_ids(tree, descendant_id)

# src/relatedness/validation/repair.py

"""
Tree Validator/Repairer.

``repair(tree)`` normalizes an arbitrary FamilyTree into one satisfying the
structural invariants every other component relies on:

  1. every parent reference names an individual of the tree;
  2. the parent -> child graph is acyclic;
  3. generation == max(parent generations) + 1, or 0 for founders;
  4. ``parents`` holds at most two distinct ids, never the individual itself.

The function is total (never raises on malformed structure), deterministic
(ids are always visited in sorted order) and idempotent. The input tree is
never mutated; a new FamilyTree is returned.
"""

from __future__ import annotations

import heapq
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Dict, List, Optional, Tuple

from relatedness.logger import get_logger
from relatedness.model.tree import FamilyTree

log = get_logger("validation.repair")

MAX_PARENTS = 2


class DefectKind(str, Enum):
    DANGLING_PARENT = "dangling-parent"
    SELF_PARENT = "self-parent"
    DUPLICATE_PARENT = "duplicate-parent"
    EXCESS_PARENT = "excess-parent"
    CYCLE = "cycle"
    GENERATION = "generation"


@dataclass(frozen=True, slots=True)
class TreeDefect:
    """One structural problem found (and corrected) in a tree."""

    kind: DefectKind
    individual: str
    parent: Optional[str] = None
    detail: str = ""

    def __str__(self) -> str:
        return f"{self.kind.value}: {self.individual} ({self.detail})"


@dataclass
class RepairReport:
    tree: FamilyTree
    defects: List[TreeDefect] = field(default_factory=list)

    @property
    def changed(self) -> bool:
        return bool(self.defects)

    def by_kind(self, kind: DefectKind) -> List[TreeDefect]:
        return [d for d in self.defects if d.kind is kind]


# ----------------------------------------------------------------------
# Passes
# ----------------------------------------------------------------------

def _clean_references(
    tree: FamilyTree, defects: List[TreeDefect]
) -> Dict[str, List[str]]:
    """Pass 1: dangling, self, duplicate and surplus parent references."""
    parents: Dict[str, List[str]] = {}

    for ind_id in tree.ids():
        kept: List[str] = []
        for parent_id in tree.individual(ind_id).parents:
            if parent_id == ind_id:
                defects.append(TreeDefect(DefectKind.SELF_PARENT, ind_id, parent_id,
                                          "individual listed as own parent"))
            elif parent_id not in tree:
                defects.append(TreeDefect(DefectKind.DANGLING_PARENT, ind_id, parent_id,
                                          f"parent {parent_id!r} not in tree"))
            elif parent_id in kept:
                defects.append(TreeDefect(DefectKind.DUPLICATE_PARENT, ind_id, parent_id,
                                          f"parent {parent_id!r} listed twice"))
            elif len(kept) >= MAX_PARENTS:
                defects.append(TreeDefect(DefectKind.EXCESS_PARENT, ind_id, parent_id,
                                          f"more than {MAX_PARENTS} parents"))
            else:
                kept.append(parent_id)
        parents[ind_id] = kept

    return parents


_WHITE, _GRAY, _BLACK = 0, 1, 2


def _break_cycles(parents: Dict[str, List[str]], defects: List[TreeDefect]) -> None:
    """
    Pass 2: DFS along parent edges with a recursion-stack marker.

    A parent already on the stack closes a cycle; that single link is
    removed and the walk continues. Iterative so deep pedigrees do not hit
    the recursion limit.
    """
    color = {ind_id: _WHITE for ind_id in parents}

    for root in sorted(parents):
        if color[root] != _WHITE:
            continue
        color[root] = _GRAY
        stack: List[Tuple[str, int]] = [(root, 0)]

        while stack:
            node, idx = stack[-1]
            node_parents = parents[node]
            if idx >= len(node_parents):
                color[node] = _BLACK
                stack.pop()
                continue

            parent_id = node_parents[idx]
            if color[parent_id] == _GRAY:
                del node_parents[idx]
                defects.append(TreeDefect(DefectKind.CYCLE, node, parent_id,
                                          f"link {parent_id} -> {node} closes a cycle"))
                continue

            stack[-1] = (node, idx + 1)
            if color[parent_id] == _WHITE:
                color[parent_id] = _GRAY
                stack.append((parent_id, 0))


def topological_order(parents: Dict[str, List[str]]) -> List[str]:
    """
    Founders first; every parent precedes its children. Ties are broken by
    id so the order is deterministic. Assumes an acyclic parent map.
    """
    pending = {ind_id: len(ps) for ind_id, ps in parents.items()}
    children: Dict[str, List[str]] = {ind_id: [] for ind_id in parents}
    for ind_id, ps in parents.items():
        for parent_id in ps:
            children[parent_id].append(ind_id)

    ready = [ind_id for ind_id, count in pending.items() if count == 0]
    heapq.heapify(ready)
    order: List[str] = []

    while ready:
        ind_id = heapq.heappop(ready)
        order.append(ind_id)
        for child_id in children[ind_id]:
            pending[child_id] -= 1
            if pending[child_id] == 0:
                heapq.heappush(ready, child_id)

    return order


def _recompute_generations(
    tree: FamilyTree,
    parents: Dict[str, List[str]],
    defects: List[TreeDefect],
) -> Dict[str, int]:
    """Pass 3: generations in topological rank order."""
    generations: Dict[str, int] = {}

    for ind_id in topological_order(parents):
        ps = parents[ind_id]
        expected = max(generations[p] for p in ps) + 1 if ps else 0
        stored = tree.individual(ind_id).generation
        if stored != expected:
            defects.append(TreeDefect(DefectKind.GENERATION, ind_id, None,
                                      f"generation {stored} corrected to {expected}"))
        generations[ind_id] = expected

    return generations


# ----------------------------------------------------------------------
# Public API
# ----------------------------------------------------------------------

def repair_report(tree: FamilyTree) -> RepairReport:
    """Repair ``tree`` and return the new tree with every correction made."""
    defects: List[TreeDefect] = []

    parents = _clean_references(tree, defects)
    _break_cycles(parents, defects)
    generations = _recompute_generations(tree, parents, defects)

    repaired = FamilyTree.from_individuals(
        replace(
            tree.individual(ind_id),
            parents=tuple(parents[ind_id]),
            generation=generations[ind_id],
        )
        for ind_id in tree.ids()
    )

    for defect in defects:
        log.debug("Repaired %s", defect)
    if defects:
        log.info("Tree repair made %d correction(s) over %d individuals",
                 len(defects), len(tree))

    return RepairReport(tree=repaired, defects=defects)


def repair(tree: FamilyTree) -> FamilyTree:
    """Return a structurally valid copy of ``tree``."""
    return repair_report(tree).tree


def validate(tree: FamilyTree) -> List[TreeDefect]:
    """List the defects ``repair`` would correct; empty for a valid tree."""
    return repair_report(tree).defects


def is_valid(tree: FamilyTree) -> bool:
    return not validate(tree)

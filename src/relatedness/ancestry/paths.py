# src/relatedness/ancestry/paths.py

"""
Relationship path records and their qualitative labels.

A path's label depends only on the number of meioses on each side of the
common ancestor and, for two single-edge sides, on whether the two
individuals share both parents. The mapping lives in a classification table
so the labels can be overridden from ``config/relatedness.yml``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Tuple

from relatedness.config import get_config
from relatedness.logger import get_logger

log = get_logger("ancestry.paths")


class RelationshipKind(str, Enum):
    SELF = "self"
    PARENT_CHILD = "parent-child"
    GRANDPARENT = "grandparent"
    GREAT_GRANDPARENT = "great-grandparent"
    FULL_SIBLING = "full-sibling"
    HALF_SIBLING = "half-sibling"
    AUNT_UNCLE = "aunt-uncle"
    COUSIN = "cousin"
    COMMON_ANCESTOR = "common-ancestor"


ClassificationTable = Dict[Tuple[int, int], RelationshipKind]

DEFAULT_CLASSIFICATION: ClassificationTable = {
    (0, 1): RelationshipKind.PARENT_CHILD,
    (0, 2): RelationshipKind.GRANDPARENT,
    (1, 2): RelationshipKind.AUNT_UNCLE,
    (2, 2): RelationshipKind.COUSIN,
}


def _parse_key(raw: Any) -> Optional[Tuple[int, int]]:
    if isinstance(raw, (list, tuple)) and len(raw) == 2:
        parts = raw
    else:
        parts = str(raw).replace(" ", "").split(",")
        if len(parts) != 2:
            return None
    try:
        a, b = int(parts[0]), int(parts[1])
    except (TypeError, ValueError):
        return None
    if a < 0 or b < 0:
        return None
    return (min(a, b), max(a, b))


def build_classification_table(overrides: Optional[Mapping[Any, Any]] = None) -> ClassificationTable:
    """Default table with ``"<n1>,<n2>": label`` overrides applied."""
    table = dict(DEFAULT_CLASSIFICATION)
    for raw_key, raw_label in (overrides or {}).items():
        key = _parse_key(raw_key)
        try:
            kind = RelationshipKind(str(raw_label))
        except ValueError:
            kind = None
        if key is None or kind is None:
            log.warning("Ignoring classification entry %r: %r", raw_key, raw_label)
            continue
        table[key] = kind
    return table


def configured_classification() -> ClassificationTable:
    return build_classification_table(get_config().classification)


def classify(
    meioses_1: int,
    meioses_2: int,
    shares_both_parents: bool = False,
    table: Optional[ClassificationTable] = None,
) -> RelationshipKind:
    """
    Label a path by its meioses on each side of the common ancestor.

    ``(1, 1)`` is always a sibling path: full when the two individuals have
    the same two parents, half otherwise. Lineal paths deeper than the
    table reach are great-grandparent paths.
    """
    key = (min(meioses_1, meioses_2), max(meioses_1, meioses_2))
    if key == (0, 0):
        return RelationshipKind.SELF
    if key == (1, 1):
        return RelationshipKind.FULL_SIBLING if shares_both_parents else RelationshipKind.HALF_SIBLING

    table = DEFAULT_CLASSIFICATION if table is None else table
    if key in table:
        return table[key]
    if key[0] == 0 and key[1] >= 3:
        return RelationshipKind.GREAT_GRANDPARENT
    return RelationshipKind.COMMON_ANCESTOR


@dataclass(frozen=True, slots=True)
class RelationshipPath:
    """
    One independent line of descent connecting two individuals.

    ``path`` runs from the first queried individual, up to ``ancestor`` and
    down to the second. ``meioses`` holds the edge counts from the ancestor
    to each individual, in query order.
    """

    path: Tuple[str, ...]
    type: RelationshipKind
    coefficient: float
    description: str
    explanation: str
    ancestor: str
    meioses: Tuple[int, int]

    @property
    def length(self) -> int:
        return self.meioses[0] + self.meioses[1]

    def as_dict(self) -> Dict[str, Any]:
        return {
            "path": list(self.path),
            "type": self.type.value,
            "coefficient": self.coefficient,
            "description": self.description,
            "explanation": self.explanation,
            "ancestor": self.ancestor,
            "meioses": list(self.meioses),
        }


def _generations(n: int) -> str:
    return f"{n} generation" if n == 1 else f"{n} generations"


def describe(path: Tuple[str, ...], ancestor: str, meioses: Tuple[int, int]) -> str:
    first, last = path[0], path[-1]
    if ancestor == first:
        return f"{first} is a direct ancestor of {last} ({_generations(meioses[1])} apart)"
    if ancestor == last:
        return f"{last} is a direct ancestor of {first} ({_generations(meioses[0])} apart)"
    return f"{first} and {last} through common ancestor {ancestor}"


def explain(kind: RelationshipKind, meioses: Tuple[int, int], coefficient: float) -> str:
    total = meioses[0] + meioses[1]
    if 0 in meioses:
        lead = "Each generation of direct descent passes on half of the genome"
    else:
        lead = (
            f"The ancestor passes half of its genome down each of the two lines "
            f"({meioses[0]} and {meioses[1]} meioses)"
        )
    return (
        f"{lead}; {total} meioses give 0.5^{total} = {coefficient:.4f} "
        f"expected shared genome along this {kind.value} path."
    )

# src/relatedness/model/tree.py

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Tuple

from relatedness.core.exceptions import UnknownIndividualError


@dataclass(frozen=True, slots=True)
class Individual:
    """
    One person in a family tree.

    Attributes:
        id:
            Unique key within the owning tree.
        generation:
            0 for founders; otherwise one more than the deepest parent
            (guaranteed only after repair).
        parents:
            Ordered identifiers of up to two parents.
    """

    id: str
    generation: int = 0
    parents: Tuple[str, ...] = ()

    @property
    def is_founder(self) -> bool:
        return not self.parents


@dataclass(frozen=True)
class FamilyTree:
    """
    Immutable mapping of identifier -> Individual.

    Every "mutation" helper returns a new tree; callers holding the old
    value never observe a change.
    """

    _individuals: Mapping[str, Individual] = field(default_factory=dict, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "_individuals", MappingProxyType(dict(self._individuals))
        )

    # ------------------------------------------------------------------ #
    # Construction
    # ------------------------------------------------------------------ #

    @classmethod
    def from_individuals(cls, individuals: Iterable[Individual]) -> "FamilyTree":
        return cls({ind.id: ind for ind in individuals})

    def with_individuals(self, individuals: Iterable[Individual]) -> "FamilyTree":
        """Return a copy with the given individuals added or replaced."""
        merged = dict(self._individuals)
        for ind in individuals:
            merged[ind.id] = ind
        return FamilyTree(merged)

    # ------------------------------------------------------------------ #
    # Mapping-style access
    # ------------------------------------------------------------------ #

    def __contains__(self, individual_id: object) -> bool:
        return individual_id in self._individuals

    def __len__(self) -> int:
        return len(self._individuals)

    def __iter__(self) -> Iterator[str]:
        return iter(self._individuals)

    @property
    def individuals(self) -> Mapping[str, Individual]:
        return self._individuals

    def ids(self) -> List[str]:
        return sorted(self._individuals)

    def get(self, individual_id: str) -> Optional[Individual]:
        return self._individuals.get(individual_id)

    def individual(self, individual_id: str) -> Individual:
        """Return the individual or raise UnknownIndividualError."""
        try:
            return self._individuals[individual_id]
        except KeyError:
            raise UnknownIndividualError(individual_id) from None

    def require(self, *individual_ids: str) -> None:
        for individual_id in individual_ids:
            if individual_id not in self._individuals:
                raise UnknownIndividualError(individual_id)

    # ------------------------------------------------------------------ #
    # Structural queries
    # ------------------------------------------------------------------ #

    def children_of(self, individual_id: str) -> List[str]:
        return sorted(
            ind.id for ind in self._individuals.values() if individual_id in ind.parents
        )

    def founders(self) -> List[str]:
        return sorted(ind.id for ind in self._individuals.values() if ind.is_founder)

    def generations(self) -> Dict[int, List[str]]:
        """Group identifiers by stored generation, ascending."""
        groups: Dict[int, List[str]] = {}
        for ind in self._individuals.values():
            groups.setdefault(ind.generation, []).append(ind.id)
        return {gen: sorted(groups[gen]) for gen in sorted(groups)}

    def as_dict(self) -> Dict[str, object]:
        """Tree document shape understood by ``relatedness.model.loader``."""
        return {
            "individuals": {
                ind_id: {
                    "generation": self._individuals[ind_id].generation,
                    "parents": list(self._individuals[ind_id].parents),
                }
                for ind_id in self.ids()
            }
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FamilyTree):
            return NotImplemented
        return dict(self._individuals) == dict(other._individuals)

    def __hash__(self) -> int:
        return hash(frozenset(self._individuals.items()))

    def __repr__(self) -> str:  # pragma: no cover - cosmetic
        return f"<FamilyTree individuals={len(self)}>"

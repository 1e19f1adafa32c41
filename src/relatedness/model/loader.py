# src/relatedness/model/loader.py

"""
Read tree documents into ``FamilyTree`` values.

Accepted document shape (YAML or JSON)::

    individuals:
      A: {generation: 0}
      C: {parents: [A, B], generation: 1}

``individuals`` may also be a list of objects carrying an ``id`` key.
Structural defects (dangling parents, cycles, stale generations) are NOT
rejected here; run ``relatedness.validation.repair`` on the result.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Iterable, List, Tuple, Union

import yaml

from relatedness.core.exceptions import TreeFormatError
from relatedness.logger import get_logger
from relatedness.model.tree import FamilyTree, Individual

log = get_logger("model.loader")


def _coerce_parents(ind_id: str, raw: Any) -> Tuple[str, ...]:
    if raw is None:
        return ()
    if isinstance(raw, str):
        return (raw,)
    if not isinstance(raw, (list, tuple)):
        raise TreeFormatError(f"{ind_id}: 'parents' must be a list, got {type(raw).__name__}")
    return tuple(str(p) for p in raw if p is not None and str(p) != "")


def _coerce_generation(ind_id: str, raw: Any) -> int:
    if raw is None:
        return 0
    if isinstance(raw, bool):
        raise TreeFormatError(f"{ind_id}: 'generation' must be an integer")
    try:
        value = int(raw)
    except (TypeError, ValueError):
        raise TreeFormatError(f"{ind_id}: 'generation' must be an integer, got {raw!r}") from None
    # Negative values are a stale-generation defect, corrected by repair.
    return value


def _iter_entries(individuals: Any) -> Iterable[Tuple[str, Dict[str, Any]]]:
    if isinstance(individuals, dict):
        for key, body in individuals.items():
            body = body or {}
            if not isinstance(body, dict):
                raise TreeFormatError(f"{key}: individual entry must be a mapping")
            yield str(body.get("id", key)), body
    elif isinstance(individuals, list):
        for body in individuals:
            if not isinstance(body, dict) or "id" not in body:
                raise TreeFormatError("List entries under 'individuals' need an 'id'")
            yield str(body["id"]), body
    else:
        raise TreeFormatError("'individuals' must be a mapping or a list")


def tree_from_dict(data: Dict[str, Any]) -> FamilyTree:
    """Build a FamilyTree from an already-decoded document."""
    if not isinstance(data, dict) or "individuals" not in data:
        raise TreeFormatError("Tree document must contain an 'individuals' section")

    people: List[Individual] = []
    seen = set()
    for ind_id, body in _iter_entries(data["individuals"]):
        if ind_id in seen:
            raise TreeFormatError(f"Duplicate individual id: {ind_id!r}")
        seen.add(ind_id)
        people.append(
            Individual(
                id=ind_id,
                generation=_coerce_generation(ind_id, body.get("generation")),
                parents=_coerce_parents(ind_id, body.get("parents")),
            )
        )

    log.debug("Decoded tree document with %d individuals", len(people))
    return FamilyTree.from_individuals(people)


def load_tree(path: Union[str, Path]) -> FamilyTree:
    """
    Load a tree document from disk.

    ``.json`` files are decoded with ``json``; anything else with
    ``yaml.safe_load``.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(path)

    try:
        text = path.read_text(encoding="utf-8")
        if path.suffix.lower() == ".json":
            data = json.loads(text)
        else:
            data = yaml.safe_load(text)
    except (UnicodeDecodeError, OSError, json.JSONDecodeError, yaml.YAMLError) as exc:
        raise TreeFormatError(f"{path}: {exc}") from exc

    log.info(f"Loaded tree document: {path}")
    return tree_from_dict(data or {})

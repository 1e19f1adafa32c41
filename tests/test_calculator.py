# tests/test_calculator.py

from __future__ import annotations

import itertools

import pytest

from relatedness.ancestry import (
    RelationshipKind,
    calculate_relatedness,
    common_ancestors,
    generational_distance,
    relationship_paths,
    relationship_summary,
)
from relatedness.core.exceptions import UnknownIndividualError
from relatedness.model import FamilyTree, Individual
from relatedness.validation import repair


# ----------------------------------------------------------------------
# Known values on the demonstration tree
# ----------------------------------------------------------------------

@pytest.mark.parametrize(
    "id1, id2, expected",
    [
        ("C", "D", 0.5),      # full siblings
        ("A", "C", 0.5),      # parent / child
        ("E", "G", 0.375),    # half-siblings through F plus cousins through A and B
        ("A", "B", 0.0),      # unrelated founders
        ("A", "E", 0.25),     # grandparent
        ("A", "H", 0.25),     # great-grandparent along two lines
        ("C", "G", 0.25),     # aunt / nephew through A and B
        ("C", "H", 0.375),
        ("E", "H", 0.6875),   # parent of an inbred child
        ("F", "H", 0.5),
    ],
)
def test_known_coefficients(canonical_tree, id1, id2, expected) -> None:
    assert calculate_relatedness(canonical_tree, id1, id2) == pytest.approx(expected)


def test_self_relatedness_is_one(canonical_tree) -> None:
    for ind_id in canonical_tree:
        assert calculate_relatedness(canonical_tree, ind_id, ind_id) == 1.0
        assert relationship_paths(canonical_tree, ind_id, ind_id) == []
        assert generational_distance(canonical_tree, ind_id, ind_id) == 0


def test_symmetry_and_range(canonical_tree) -> None:
    for a, b in itertools.combinations(canonical_tree.ids(), 2):
        forward = calculate_relatedness(canonical_tree, a, b)
        assert forward == calculate_relatedness(canonical_tree, b, a)
        assert 0.0 <= forward <= 1.0


def test_common_ancestors(canonical_tree) -> None:
    assert common_ancestors(canonical_tree, "E", "G") == {"A", "B", "F"}
    assert common_ancestors(canonical_tree, "C", "D") == {"A", "B"}
    assert common_ancestors(canonical_tree, "A", "C") == {"A"}
    assert common_ancestors(canonical_tree, "H", "A") == {"A"}
    assert common_ancestors(canonical_tree, "A", "F") == set()


def test_generational_distance(canonical_tree) -> None:
    assert generational_distance(canonical_tree, "H", "A") == 3
    assert generational_distance(canonical_tree, "C", "D") == 2
    assert generational_distance(canonical_tree, "E", "G") == 2
    assert generational_distance(canonical_tree, "C", "G") == 3
    assert generational_distance(canonical_tree, "A", "B") is None


# ----------------------------------------------------------------------
# Paths
# ----------------------------------------------------------------------

def test_full_sibling_paths(canonical_tree) -> None:
    paths = relationship_paths(canonical_tree, "C", "D")

    assert [p.path for p in paths] == [("C", "A", "D"), ("C", "B", "D")]
    assert all(p.type is RelationshipKind.FULL_SIBLING for p in paths)
    assert [p.coefficient for p in paths] == [0.25, 0.25]
    assert [p.ancestor for p in paths] == ["A", "B"]


def test_half_sibling_and_cousin_paths(canonical_tree) -> None:
    paths = relationship_paths(canonical_tree, "E", "G")

    assert [(p.path, p.type, p.coefficient) for p in paths] == [
        (("E", "F", "G"), RelationshipKind.HALF_SIBLING, 0.25),
        (("E", "C", "A", "D", "G"), RelationshipKind.COUSIN, 0.0625),
        (("E", "C", "B", "D", "G"), RelationshipKind.COUSIN, 0.0625),
    ]


def test_lineal_path_uses_single_route(canonical_tree) -> None:
    (path,) = relationship_paths(canonical_tree, "A", "C")

    assert path.path == ("A", "C")
    assert path.type is RelationshipKind.PARENT_CHILD
    assert path.coefficient == 0.5
    assert path.meioses == (0, 1)
    assert path.description == "A is a direct ancestor of C (1 generation apart)"
    assert "0.5^1" in path.explanation


def test_great_grandparent_paths(canonical_tree) -> None:
    paths = relationship_paths(canonical_tree, "H", "A")

    assert [p.path for p in paths] == [("H", "E", "C", "A"), ("H", "G", "D", "A")]
    assert all(p.type is RelationshipKind.GREAT_GRANDPARENT for p in paths)
    assert all(p.meioses == (3, 0) for p in paths)


def test_swapped_query_reverses_each_path(canonical_tree) -> None:
    forward = relationship_paths(canonical_tree, "E", "G")
    backward = relationship_paths(canonical_tree, "G", "E")

    assert sorted(p.path[::-1] for p in forward) == sorted(p.path for p in backward)
    assert sorted(p.coefficient for p in forward) == sorted(p.coefficient for p in backward)


def test_routes_through_an_intermediate_are_not_counted(canonical_tree) -> None:
    """
    C -> E is the only line between C and E; A -> C and A -> C -> E share C
    and describe the same transmission.
    """
    paths = relationship_paths(canonical_tree, "C", "E")

    assert [p.path for p in paths] == [("C", "E")]


def test_paths_connect_neighbours_only(canonical_tree) -> None:
    for p in relationship_paths(canonical_tree, "E", "H"):
        for a, b in zip(p.path, p.path[1:]):
            pa, pb = canonical_tree.individual(a), canonical_tree.individual(b)
            assert a in pb.parents or b in pa.parents
        assert len(set(p.path)) == len(p.path)


def test_half_siblings_with_one_shared_parent() -> None:
    tree = repair(
        FamilyTree.from_individuals(
            [
                Individual("M"),
                Individual("P1"),
                Individual("P2"),
                Individual("S1", 1, ("M", "P1")),
                Individual("S2", 1, ("M", "P2")),
            ]
        )
    )

    (path,) = relationship_paths(tree, "S1", "S2")
    assert path.type is RelationshipKind.HALF_SIBLING
    assert calculate_relatedness(tree, "S1", "S2") == 0.25


# ----------------------------------------------------------------------
# Errors and summaries
# ----------------------------------------------------------------------

@pytest.mark.parametrize(
    "query",
    [calculate_relatedness, relationship_paths, common_ancestors, generational_distance],
)
def test_unknown_ids_fail_fast(canonical_tree, query) -> None:
    with pytest.raises(UnknownIndividualError):
        query(canonical_tree, "C", "Nobody")
    with pytest.raises(ValueError):
        query(canonical_tree, "Nobody", "Nobody")


def test_unrelated_pair_is_not_an_error(canonical_tree) -> None:
    assert relationship_paths(canonical_tree, "C", "F") == []
    assert calculate_relatedness(canonical_tree, "C", "F") == 0.0
    assert generational_distance(canonical_tree, "C", "F") is None


def test_relationship_summary(canonical_tree) -> None:
    summary = relationship_summary(canonical_tree, "E", "G")

    assert summary.coefficient == pytest.approx(0.375)
    assert summary.generational_distance == 2
    assert summary.common_ancestors == ("A", "B", "F")
    assert len(summary.paths) == 3
    assert summary.related

    data = summary.as_dict()
    assert data["paths"][0]["type"] == "half-sibling"
    assert data["paths"][0]["path"] == ["E", "F", "G"]

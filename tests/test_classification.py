# tests/test_classification.py

from __future__ import annotations

import pytest

from relatedness.ancestry import (
    DEFAULT_CLASSIFICATION,
    RelationshipKind,
    build_classification_table,
    classify,
)


@pytest.mark.parametrize(
    "n1, n2, both, expected",
    [
        (0, 0, False, RelationshipKind.SELF),
        (0, 1, False, RelationshipKind.PARENT_CHILD),
        (1, 0, False, RelationshipKind.PARENT_CHILD),
        (2, 0, False, RelationshipKind.GRANDPARENT),
        (0, 3, False, RelationshipKind.GREAT_GRANDPARENT),
        (0, 6, False, RelationshipKind.GREAT_GRANDPARENT),
        (1, 1, True, RelationshipKind.FULL_SIBLING),
        (1, 1, False, RelationshipKind.HALF_SIBLING),
        (2, 1, False, RelationshipKind.AUNT_UNCLE),
        (2, 2, False, RelationshipKind.COUSIN),
        (3, 3, False, RelationshipKind.COMMON_ANCESTOR),
        (1, 4, False, RelationshipKind.COMMON_ANCESTOR),
    ],
)
def test_default_classification(n1, n2, both, expected) -> None:
    assert classify(n1, n2, both) is expected


def test_overrides_extend_the_table() -> None:
    table = build_classification_table({"3,3": "cousin", "2, 3": "cousin"})

    assert classify(3, 3, table=table) is RelationshipKind.COUSIN
    assert classify(3, 2, table=table) is RelationshipKind.COUSIN
    # Defaults survive.
    assert classify(0, 1, table=table) is RelationshipKind.PARENT_CHILD


def test_invalid_overrides_are_ignored() -> None:
    table = build_classification_table({"x,y": "cousin", "1,3": "second-cousin", "4": "cousin"})

    assert table == DEFAULT_CLASSIFICATION


def test_sibling_rule_is_not_table_driven() -> None:
    table = build_classification_table({"1,1": "cousin"})

    assert classify(1, 1, True, table) is RelationshipKind.FULL_SIBLING

# tests/test_loader.py

from __future__ import annotations

import pytest

from relatedness.core.exceptions import TreeFormatError
from relatedness.model import example_tree, load_tree, tree_from_dict
from relatedness.utils import tests_data_path as data_path


def test_yaml_document_matches_builtin_example() -> None:
    tree = load_tree(data_path("trees", "canonical.yml"))

    assert tree == example_tree()


def test_json_list_document_keeps_defects_for_repair() -> None:
    """
    The loader does not repair: dangling and self references survive.
    """
    tree = load_tree(data_path("trees", "broken.json"))

    assert tree.individual("X").parents == ("Y", "GHOST")
    assert tree.individual("Z").parents == ("Z", "Y", "Y")
    assert tree.individual("Y").generation == 0


def test_missing_individuals_section_is_rejected() -> None:
    with pytest.raises(TreeFormatError):
        load_tree(data_path("trees", "not_a_tree.yml"))


def test_missing_file_raises_file_not_found(tmp_path) -> None:
    with pytest.raises(FileNotFoundError):
        load_tree(tmp_path / "nope.yml")


def test_invalid_json_is_a_format_error(tmp_path) -> None:
    path = tmp_path / "bad.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(TreeFormatError):
        load_tree(path)


def test_single_parent_string_and_null_parents() -> None:
    tree = tree_from_dict(
        {"individuals": {"A": None, "B": {"parents": "A"}, "C": {"parents": None}}}
    )

    assert tree.individual("A").parents == ()
    assert tree.individual("B").parents == ("A",)
    assert tree.individual("C").parents == ()


def test_bad_generation_and_duplicate_ids() -> None:
    with pytest.raises(TreeFormatError):
        tree_from_dict({"individuals": {"A": {"generation": "old"}}})

    with pytest.raises(TreeFormatError):
        tree_from_dict({"individuals": [{"id": "A"}, {"id": "A"}]})


def test_non_utf8_document_is_a_format_error(tmp_path) -> None:
    path = tmp_path / "latin1.yml"
    path.write_bytes(b"\xff\xfe{bad")

    with pytest.raises(TreeFormatError):
        load_tree(path)


def test_directory_is_a_format_error(tmp_path) -> None:
    with pytest.raises(TreeFormatError):
        load_tree(tmp_path)

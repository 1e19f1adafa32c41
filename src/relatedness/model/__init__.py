# src/relatedness/model/__init__.py

from .tree import FamilyTree, Individual
from .loader import load_tree, tree_from_dict
from .examples import example_tree

__all__ = [
    "FamilyTree",
    "Individual",
    "load_tree",
    "tree_from_dict",
    "example_tree",
]

r"""
Canonical demonstration tree.

    A   B            A, B founders
    |\ /|
    C   D   F        C, D full siblings; F a founder
     \ / \ /
      E   G          E = C x F, G = D x F
       \ /
        H            H = E x G

F is stored at generation 1 as in the published demonstration data; repair
corrects it to 0.
"""

from __future__ import annotations

from relatedness.model.tree import FamilyTree, Individual


def example_tree() -> FamilyTree:
    return FamilyTree.from_individuals(
        [
            Individual("A", 0),
            Individual("B", 0),
            Individual("C", 1, ("A", "B")),
            Individual("D", 1, ("A", "B")),
            Individual("E", 2, ("C", "F")),
            Individual("F", 1),
            Individual("G", 2, ("D", "F")),
            Individual("H", 3, ("E", "G")),
        ]
    )

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from relatedness.model.tree import FamilyTree


@dataclass
class AnalysisContext:
    """
    Shared pipeline context.
    This object is passed between orchestration layers.

    ``tree_source`` is a path to a tree document or the literal ``"example"``.
    ``tree`` is an already-loaded (unrepaired) tree; when set, the pipeline
    uses it instead of reading ``tree_source``.
    ``pairs`` lists the individual pairs to summarise in addition to the
    population statistics.
    """

    config: Any
    logger: Any

    tree_source: Optional[str] = None
    tree: Optional[FamilyTree] = None
    output_path: Optional[str] = None
    pairs: List[Tuple[str, str]] = field(default_factory=list)

    stats: Dict[str, Any] = field(default_factory=dict)

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional

from relatedness.ancestry.calculator import RelationshipSummary, relationship_summary
from relatedness.core.context import AnalysisContext
from relatedness.core.exceptions import AnalysisExecutionError, RelatednessError
from relatedness.exporter import export_analysis_to_json
from relatedness.model.examples import example_tree
from relatedness.model.loader import load_tree
from relatedness.model.tree import FamilyTree
from relatedness.stats.analyzer import GenerationStats, generational_stats, relatedness_distribution
from relatedness.validation.repair import RepairReport, repair_report

EXAMPLE_TREE = "example"


@dataclass
class AnalysisResult:
    tree: FamilyTree
    repair: RepairReport
    distribution: Dict[float, int] = field(default_factory=dict)
    generational_stats: Dict[int, GenerationStats] = field(default_factory=dict)
    summaries: List[RelationshipSummary] = field(default_factory=list)


def resolve_tree(source: Optional[str]) -> FamilyTree:
    """Load ``source`` (a path, or ``"example"``) without repairing it."""
    if not source or source == EXAMPLE_TREE:
        return example_tree()
    return load_tree(Path(source))


class Pipeline:
    """
    Orchestrates load -> repair -> analyse.
    No calculation logic lives here.
    """

    def __init__(self, context: AnalysisContext):
        self.ctx = context
        self.log = context.logger

    def run(self) -> AnalysisResult:
        self.log.info("Pipeline starting")

        try:
            raw = self.ctx.tree
            if raw is None:
                raw = resolve_tree(self.ctx.tree_source)
            report = repair_report(raw)
            tree = report.tree

            result = AnalysisResult(
                tree=tree,
                repair=report,
                distribution=relatedness_distribution(tree, self.ctx.config.precision),
                generational_stats=generational_stats(tree),
                summaries=[relationship_summary(tree, a, b) for a, b in self.ctx.pairs],
            )

            self.ctx.stats.update(
                individuals=len(tree),
                repairs=len(report.defects),
                pairs=sum(result.distribution.values()),
            )

            if self.ctx.output_path:
                export_analysis_to_json(result, self.ctx.output_path)

            self.log.info("Pipeline completed successfully")
            return result

        except (RelatednessError, FileNotFoundError):
            # Caller errors (bad ids, unreadable documents) pass through untouched.
            raise
        except Exception as exc:
            self.log.exception("Pipeline execution failed")
            raise AnalysisExecutionError(str(exc)) from exc

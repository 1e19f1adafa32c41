# tests/test_pipeline.py

from __future__ import annotations

import json
import logging

import pytest

from relatedness.config import get_config
from relatedness.core.context import AnalysisContext
from relatedness.core.exceptions import AnalysisExecutionError, UnknownIndividualError
from relatedness.core.pipeline import Pipeline
from relatedness.exporter import build_analysis_dict
from relatedness.logger import configure_debug, get_logger
from relatedness.main import main
from relatedness.model import example_tree
from relatedness.utils import tests_data_path as data_path


def _context(**kwargs) -> AnalysisContext:
    return AnalysisContext(config=get_config(), logger=get_logger("tests.pipeline"), **kwargs)


def test_pipeline_on_example_tree() -> None:
    ctx = _context(tree_source="example", pairs=[("C", "D")])
    result = Pipeline(ctx).run()

    assert len(result.tree) == 8
    assert len(result.repair.defects) == 1
    assert sum(result.distribution.values()) == 28
    assert result.summaries[0].coefficient == pytest.approx(0.5)
    assert ctx.stats == {"individuals": 8, "repairs": 1, "pairs": 28}


def test_pipeline_writes_json(tmp_path) -> None:
    out = tmp_path / "nested" / "analysis.json"
    ctx = _context(
        tree_source=str(data_path("trees", "canonical.yml")),
        output_path=str(out),
        pairs=[("E", "G")],
    )
    Pipeline(ctx).run()

    data = json.loads(out.read_text(encoding="utf-8"))
    assert data["counts"] == {"individuals": 8, "pairs": 28, "repairs": 1}
    assert data["distribution"]["0.5"] == 10
    assert data["generational_stats"]["3"] == {"count": 1, "average_relatedness": None}
    assert data["pairs"][0]["coefficient"] == 0.375
    assert data["tree"]["individuals"]["F"]["generation"] == 0
    assert data["repairs"][0]["kind"] == "generation"


def test_pipeline_lets_caller_errors_through() -> None:
    with pytest.raises(UnknownIndividualError):
        Pipeline(_context(tree_source="example", pairs=[("C", "Q")])).run()


def test_pipeline_wraps_unexpected_failures() -> None:
    class BrokenConfig:
        @property
        def precision(self):
            raise RuntimeError("boom")

    ctx = AnalysisContext(
        config=BrokenConfig(),
        logger=get_logger("tests.pipeline"),
        tree_source="example",
    )

    with pytest.raises(AnalysisExecutionError):
        Pipeline(ctx).run()


def test_build_analysis_dict_is_json_serialisable() -> None:
    result = Pipeline(_context(tree_source="example", pairs=[("A", "H")])).run()
    data = build_analysis_dict(result)

    encoded = json.dumps(data)
    assert "great-grandparent" in encoded
    assert set(data) == {"counts", "tree", "repairs", "distribution", "generational_stats", "pairs"}


def test_batch_main_writes_output(tmp_path) -> None:
    out = tmp_path / "batch.json"
    main(["-i", "example", "-o", str(out), "--pair", "C,D"])

    data = json.loads(out.read_text(encoding="utf-8"))
    assert data["pairs"][0]["paths"][0]["type"] == "full-sibling"


@pytest.fixture
def restore_debug():
    yield
    get_config().debug = False
    configure_debug(False)


def test_batch_debug_flag_lowers_log_levels(tmp_path, restore_debug) -> None:
    main(["-i", "example", "-o", str(tmp_path / "debug.json"), "--debug"])

    base = logging.getLogger("relatedness")
    assert base.level == logging.DEBUG
    assert logging.getLogger("relatedness.main").level == logging.DEBUG
    assert all(handler.level == logging.DEBUG for handler in base.handlers)


def test_preloaded_tree_takes_precedence_over_source() -> None:
    ctx = _context(tree_source="does/not/exist.yml", tree=example_tree(), pairs=[("E", "G")])
    result = Pipeline(ctx).run()

    assert result.tree.individual("F").generation == 0
    assert result.summaries[0].coefficient == pytest.approx(0.375)

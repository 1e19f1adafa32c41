# tests/test_config_logging.py

from __future__ import annotations

import logging

from relatedness.ancestry.paths import configured_classification
from relatedness.config import CONFIG_PATH, get_config, load_config
from relatedness.logging import configure_debug, get_logger, list_active_loggers
from relatedness.utils import tests_data_path as data_path


def test_test_configuration_is_active() -> None:
    cfg = get_config()

    assert cfg.precision == 3
    assert cfg.logging.get("dir") is None
    assert cfg.debug is False


def test_shipped_configuration_loads() -> None:
    cfg = load_config(CONFIG_PATH)

    assert cfg.precision == 3
    assert cfg.classification["2,2"] == "cousin"


def test_missing_file_falls_back_to_defaults(tmp_path) -> None:
    cfg = load_config(tmp_path / "absent.yml")

    assert cfg.precision == 3
    assert cfg.classification == {}


def test_custom_precision(tmp_path) -> None:
    path = tmp_path / "custom.yml"
    path.write_text("statistics:\n  precision: 1\n", encoding="utf-8")

    assert load_config(path).precision == 1


def test_classification_from_config_matches_defaults() -> None:
    cfg = load_config(data_path("relatedness_test.yml"))

    assert cfg.classification
    assert configured_classification()[(2, 2)].value == "cousin"


def test_module_loggers_live_under_package_namespace() -> None:
    log = get_logger("tests.logging")

    assert log.name == "relatedness.tests.logging"
    assert log.propagate is True
    assert "relatedness.tests.logging" in list_active_loggers()
    assert logging.getLogger("relatedness").propagate is False


def test_configure_debug_relevels_existing_loggers() -> None:
    log = get_logger("tests.debug_toggle")
    base = logging.getLogger("relatedness")

    try:
        configure_debug(True)
        assert log.level == logging.DEBUG
        assert base.level == logging.DEBUG
        assert all(handler.level == logging.DEBUG for handler in base.handlers)
    finally:
        configure_debug(False)

    # Test configuration: level WARNING, console WARNING.
    assert log.level == logging.WARNING
    assert base.level == logging.WARNING
    assert all(handler.level == logging.WARNING for handler in base.handlers)

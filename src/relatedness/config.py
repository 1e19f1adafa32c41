import os
from pathlib import Path

import yaml

from relatedness.utils.pathing import resolve_project_path

CONFIG_PATH = resolve_project_path(Path("config") / "relatedness.yml")
CONFIG_ENV_VAR = "RELATEDNESS_CONFIG"

DEFAULT_PRECISION = 3


class RelatednessConfig:
    def __init__(self, data):
        self.logging = data.get("logging", {}) or {}
        self.statistics = data.get("statistics", {}) or {}
        self.classification = data.get("classification", {}) or {}
        self.debug = bool(data.get("debug", False))

    @property
    def precision(self) -> int:
        return int(self.statistics.get("precision", DEFAULT_PRECISION))


def config_path() -> Path:
    override = os.environ.get(CONFIG_ENV_VAR)
    return Path(override) if override else CONFIG_PATH


def load_config(path: Path | None = None) -> 'RelatednessConfig':
    path = path or config_path()
    if not path.exists():
        # Library use without the repository checkout: built-in defaults.
        return RelatednessConfig({})

    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    return RelatednessConfig(data)


_config_cache = None


def get_config() -> 'RelatednessConfig':
    global _config_cache
    if _config_cache is None:
        _config_cache = load_config()
    return _config_cache


def reset_config() -> None:
    """Drop the cached configuration (tests, env var changes)."""
    global _config_cache
    _config_cache = None

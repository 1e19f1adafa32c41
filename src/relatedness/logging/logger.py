"""
Centralized logging configuration for the relatedness calculator.

Key behaviors
-------------
* Single entry point via ``get_logger`` to keep handlers/formatters consistent.
* Master log file (default: ``logs/relatedness.log``) plus per-module logs.
* Console logging that respects the configured debug flag.
* Optional log rotation controlled by ``config/relatedness.yml``.
* ``logging.dir: null`` disables file output entirely (console only).
"""

from __future__ import annotations

import logging
from logging import Logger, StreamHandler
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Dict, List, Optional

from relatedness.config import get_config
from relatedness.utils.pathing import project_root

# -----------------------------------------------------------------------------
# Paths and configuration
# -----------------------------------------------------------------------------

PROJECT_ROOT = project_root()
BASE_LOGGER_NAME = "relatedness"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Cache so handlers are only created once per module
_logger_cache: Dict[str, Logger] = {}
_base_configured: bool = False
_effective_level: int = logging.INFO
_configured_level: int = logging.INFO
_log_dir: Optional[Path] = None
_master_log_name: str = "relatedness.log"
_rotate_logs: bool = False


# -----------------------------------------------------------------------------
# Internal helpers
# -----------------------------------------------------------------------------

def _ensure_log_dir() -> Optional[Path]:
    """Resolve and create the log directory from configuration."""
    global _log_dir
    cfg = get_config()

    log_dir_cfg = cfg.logging.get("dir", "logs")
    if not log_dir_cfg:
        _log_dir = None
        return None

    log_dir = Path(log_dir_cfg)
    if not log_dir.is_absolute():
        log_dir = PROJECT_ROOT / log_dir

    log_dir.mkdir(parents=True, exist_ok=True)
    _log_dir = log_dir
    return log_dir


def _build_file_handler(path: Path, level: int) -> logging.Handler:
    """Create a file handler with optional rotation."""
    if _rotate_logs:
        handler = RotatingFileHandler(
            path,
            maxBytes=5 * 1024 * 1024,
            backupCount=5,
            encoding="utf-8",
        )
    else:
        handler = logging.FileHandler(path, encoding="utf-8")

    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    return handler


def _configure_base_logger() -> Logger:
    """Configure the shared base logger once."""
    global _base_configured, _effective_level, _configured_level, _master_log_name, _rotate_logs

    if _base_configured:
        return logging.getLogger(BASE_LOGGER_NAME)

    cfg = get_config()
    _rotate_logs = bool(cfg.logging.get("rotate", False))
    _master_log_name = cfg.logging.get("file", "relatedness.log")

    level_name = str(cfg.logging.get("level", "INFO")).upper()
    base_level = getattr(logging, level_name, logging.INFO)
    _configured_level = base_level
    debug_enabled = bool(getattr(cfg, "debug", False))

    _effective_level = logging.DEBUG if debug_enabled else base_level

    base_logger = logging.getLogger(BASE_LOGGER_NAME)
    base_logger.setLevel(_effective_level)
    base_logger.propagate = False

    # Master log handler
    log_dir = _ensure_log_dir()
    if log_dir is not None:
        master_path = log_dir / _master_log_name
        base_logger.addHandler(_build_file_handler(master_path, _effective_level))

    # Console handler
    console = StreamHandler()
    console.setLevel(logging.DEBUG if debug_enabled else logging.WARNING)
    console.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    console.is_console_handler = True  # type: ignore[attr-defined]
    base_logger.addHandler(console)

    _base_configured = True
    return base_logger


def _module_handler_exists(logger: Logger) -> bool:
    return any(getattr(h, "is_module_handler", False) for h in logger.handlers)


def _attach_module_handler(logger: Logger, module_name: str) -> None:
    if _log_dir is None:
        return
    filename = f"{module_name.replace('.', '_')}.log"
    path = _log_dir / filename

    handler = _build_file_handler(path, _effective_level)
    handler.is_module_handler = True  # type: ignore[attr-defined]
    logger.addHandler(handler)


# -----------------------------------------------------------------------------
# Public API
# -----------------------------------------------------------------------------

def get_logger(name: str | None = None) -> Logger:
    """Return a logger configured with project-wide handlers.

    * Names are placed under the ``relatedness`` namespace so module loggers
      inherit the base console + master log handlers.
    * Each module also gains its own file handler: ``logs/<module>.log``.
    * The debug flag in ``config/relatedness.yml`` forces DEBUG level output.
    """

    base_logger = _configure_base_logger()
    logger_name = name or BASE_LOGGER_NAME
    if logger_name != BASE_LOGGER_NAME and not logger_name.startswith(BASE_LOGGER_NAME + "."):
        logger_name = f"{BASE_LOGGER_NAME}.{logger_name}"

    logger = logging.getLogger(logger_name)
    logger.setLevel(_effective_level)

    if logger_name != base_logger.name:
        if not _module_handler_exists(logger):
            _attach_module_handler(logger, logger_name)
        logger.propagate = True
    else:
        # Base logger already owns the master + console handlers
        logger.propagate = False

    _logger_cache[logger_name] = logger
    return logger


def list_active_loggers() -> List[str]:
    """Helper for debugging configuration issues in tests."""
    return list(_logger_cache.keys())


def configure_debug(enabled: bool) -> None:
    """Switch every configured logger and handler to DEBUG, or back.

    Loggers created before the flag was known (module-level ``get_logger``
    calls) are updated in place.
    """
    global _effective_level

    base_logger = _configure_base_logger()
    _effective_level = logging.DEBUG if enabled else _configured_level

    for logger in [base_logger, *_logger_cache.values()]:
        logger.setLevel(_effective_level)
        for handler in logger.handlers:
            if getattr(handler, "is_console_handler", False):
                handler.setLevel(logging.DEBUG if enabled else logging.WARNING)
            else:
                handler.setLevel(_effective_level)

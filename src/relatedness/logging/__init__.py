"""
Logging package for ``relatedness``.

Use ``get_logger(__name__)`` in modules to inherit shared handlers and write to a
module-specific log file.
"""

from .logger import (
    configure_debug,
    get_logger,
    list_active_loggers,
)

__all__ = [
    "configure_debug",
    "get_logger",
    "list_active_loggers",
]

"""
Compatibility wrapper around the centralized logging package.

Prefer importing from ``relatedness.logging`` directly:
    from relatedness.logging import get_logger
"""

from relatedness.logging import (
    configure_debug,
    get_logger,
    list_active_loggers,
)

__all__ = [
    "configure_debug",
    "get_logger",
    "list_active_loggers",
]

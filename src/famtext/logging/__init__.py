"""
Logging package for ``famtext``.

Use ``get_logger(__name__)`` in modules to inherit the shared console and
master-file handlers.
"""

from .logger import (
    configure_logging,
    get_logger,
    list_active_loggers,
    set_debug,
)

__all__ = [
    "configure_logging",
    "get_logger",
    "list_active_loggers",
    "set_debug",
]

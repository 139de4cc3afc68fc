"""
Logging setup for tabedit.

Modules log through ``logging.getLogger(__name__)``; configure_logging() attaches a single
stderr handler to the package logger and maps the CLI verbosity count to a level.
"""

from __future__ import annotations

import logging
import sys

_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_HANDLER_NAME = "tabedit-console"

_LEVELS: dict[int, int] = {
    0: logging.WARNING,
    1: logging.INFO,
}


def level_for(verbosity: int) -> int:
    """Return the logging level for a -d/--debug count (0 warning, 1 info, 2+ debug)."""
    if verbosity > 1:
        return logging.DEBUG
    return _LEVELS.get(verbosity, logging.WARNING)


def configure_logging(verbosity: int = 0) -> logging.Logger:
    """
    Configure the ``tabedit`` logger for console use.

    Args:
        verbosity (int): Count of -d/--debug flags.

    Returns:
        logging.Logger: The package logger. Repeated calls update the level and point the
        existing handler at the current sys.stderr instead of adding another one.
    """
    logger = logging.getLogger("tabedit")
    logger.setLevel(level_for(verbosity))
    for handler in logger.handlers:
        if handler.get_name() == _HANDLER_NAME and isinstance(handler, logging.StreamHandler):
            handler.setStream(sys.stderr)
            return logger
    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter(_FORMAT))
    logger.addHandler(handler)
    return logger

"""Logging setup for command-line use.

Library modules only create loggers with ``logging.getLogger(__name__)``;
handlers are attached here, by the entry point, and nowhere else.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "critical": logging.CRITICAL,
}

DEFAULT_FORMAT = "%(name)s: %(message)s"
DEFAULT_LEVEL = logging.WARNING


def setup_logger(
    name: str = "npuzzle",
    level: int = DEFAULT_LEVEL,
    console: Console | None = None,
    log_format: str = DEFAULT_FORMAT,
) -> logging.Logger:
    """Configure and return the *name* logger with a Rich console handler.

    Calling it again replaces the handler instead of stacking a second one.
    """
    logger = logging.getLogger(name)
    if logger.hasHandlers():
        logger.handlers.clear()
    logger.setLevel(level)

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(log_format))
    logger.addHandler(handler)
    logger.propagate = False
    return logger

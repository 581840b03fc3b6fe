"""Console logging for the smartunit CLI."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

PROJECT_LOGGER = "smartunit"


def level_for_verbosity(verbosity: int) -> int:
    """-1 and below: ERROR, 0: WARNING, 1: INFO, 2 and above: DEBUG."""
    if verbosity <= -1:
        return logging.ERROR
    if verbosity == 0:
        return logging.WARNING
    if verbosity == 1:
        return logging.INFO
    return logging.DEBUG


def configure_logging(verbosity: int = 0, console: Console | None = None) -> RichHandler:
    """Attach a stderr RichHandler to the ``smartunit`` logger and return it."""
    level = level_for_verbosity(verbosity)
    handler = RichHandler(
        level=level,
        console=console or Console(stderr=True),
        show_time=False,
        show_path=level <= logging.DEBUG,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))

    logger = logging.getLogger(PROJECT_LOGGER)
    for existing in list(logger.handlers):
        if isinstance(existing, RichHandler):
            logger.removeHandler(existing)
    logger.addHandler(handler)
    logger.setLevel(level)
    return handler


__all__ = ["configure_logging", "level_for_verbosity"]

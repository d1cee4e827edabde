"""Logging setup for the command line."""

from __future__ import annotations

import logging as std_logging

from rich.console import Console
from rich.logging import RichHandler


def _level_from_verbosity(verbosity: int) -> int:
    if verbosity <= 0:
        return std_logging.WARNING
    if verbosity == 1:
        return std_logging.INFO
    return std_logging.DEBUG


def configure_logging(verbosity: int = 0) -> None:
    """Send prettytab log records to stderr through rich."""
    level = _level_from_verbosity(verbosity)
    # stderr keeps log records out of the rendered table on stdout.
    handler = RichHandler(console=Console(stderr=True), show_path=False)
    logger = std_logging.getLogger("prettytab")
    logger.handlers = [handler]
    logger.setLevel(level)
    logger.propagate = False


__all__ = ["configure_logging"]

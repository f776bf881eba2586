"""Logging setup using rich for readable console output."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

_ROOT_LOGGER = "brandkit"
_configured = False


def setup_logging(level: str = "INFO", console: Console | None = None) -> logging.Logger:
    """Configure the package logger with a RichHandler.

    Safe to call more than once; later calls only change the level.

    Args:
        level: Logging level name, e.g. "DEBUG" or "INFO".
        console: Optional rich console (defaults to stderr).

    Returns:
        The configured package logger.
    """
    global _configured
    logger = logging.getLogger(_ROOT_LOGGER)
    logger.setLevel(level.upper())
    if not _configured:
        handler = RichHandler(
            console=console or Console(stderr=True),
            show_path=False,
            rich_tracebacks=True,
            markup=False,
        )
        handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
        logger.addHandler(handler)
        logger.propagate = False
        _configured = True
    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the package namespace."""
    if name == _ROOT_LOGGER or name.startswith(_ROOT_LOGGER + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{_ROOT_LOGGER}.{name}")

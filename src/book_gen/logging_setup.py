"""Logging configuration for the book-gen CLI."""

from __future__ import annotations

import logging
import os

from rich.console import Console
from rich.logging import RichHandler

__all__ = ["configure_logging", "console"]

LOG_LEVEL_ENV = "BOOK_GEN_LOG_LEVEL"
DEFAULT_LEVEL_NAME = "WARNING"

console = Console(stderr=True)


def _resolve_level(level: str | int | None) -> int:
    """Return the requested level, falling back to the environment variable."""
    if isinstance(level, int):
        return level
    level_name = (level or os.getenv(LOG_LEVEL_ENV, DEFAULT_LEVEL_NAME)).upper()
    return getattr(logging, level_name, logging.WARNING)


def configure_logging(level: str | int | None = None) -> None:
    """Install a single Rich handler on the root logger.

    Safe to call more than once; later calls only adjust the level.
    """
    root_logger = logging.getLogger()

    handler = next(
        (h for h in root_logger.handlers if getattr(h, "_book_gen_managed", False)),
        None,
    )
    if handler is None:
        handler = RichHandler(
            console=console,
            rich_tracebacks=True,
            show_path=False,
            markup=False,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
        handler._book_gen_managed = True  # type: ignore[attr-defined]
        root_logger.addHandler(handler)

    root_logger.setLevel(_resolve_level(level))

# === FILE: png_scout/logger.py ===
"""Logging for **png_scout**.

Every crawler component logs through a child of the ``PngScout`` logger::

      from png_scout.logger import get_logger
      log = get_logger("worker.3")     # -> "PngScout.worker.3"

Nothing is configured at import time; the CLI calls :func:`configure` once,
which routes the whole tree to stderr (stdout carries the crawl summary)
and, optionally, to a rotating log file.
"""
from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Final, Union

_DEFAULT_FORMAT: Final[str] = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_LOGGER_NAME: Final[str] = "PngScout"

_LevelT = Union[int, str]

#: root of the project logger tree
logger: logging.Logger = logging.getLogger(_LOGGER_NAME)


def get_logger(component: str) -> logging.Logger:
    """Return the logger of one crawler component, e.g. ``"frontier"``."""
    return logger.getChild(component)


def _file_handler(file: Path | str, fmt: str) -> RotatingFileHandler:
    handler = RotatingFileHandler(
        filename=str(file),
        maxBytes=5 * 1024 * 1024,
        backupCount=3,
        encoding="utf-8",
    )
    handler.setFormatter(logging.Formatter(fmt))
    return handler


def configure(
    *,
    level: _LevelT = "INFO",
    log_file: str | Path | None = None,
    log_format: str = _DEFAULT_FORMAT,
) -> logging.Logger:
    """(Re)configure the project logger, replacing any earlier handlers.

    Parameters
    ----------
    level
        Numeric or textual logging level (e.g. ``"DEBUG"``).
    log_file
        Path to a logfile. *None* → stderr only.
    log_format
        Format string for :class:`logging.Formatter`.
    """
    logger.setLevel(level)
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()

    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(logging.Formatter(log_format))
    logger.addHandler(console)
    if log_file is not None:
        logger.addHandler(_file_handler(log_file, log_format))

    logger.propagate = False
    return logger


__all__ = ["logger", "get_logger", "configure"]

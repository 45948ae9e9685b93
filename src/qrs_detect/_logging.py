"""Logging setup for the qrs-detect package.

A single package logger writes to stdout by default. Detection summaries are
emitted at INFO, resolved parameters and per-stage counts at DEBUG, and dropped
beats or empty results at WARNING.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Literal

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

_formatter = logging.Formatter("%(name)s | %(levelname)s | %(message)s")


def _attach(handler: logging.Handler, level: int) -> None:
    handler.setLevel(level)
    handler.setFormatter(_formatter)
    logger.addHandler(handler)


logger = logging.getLogger(__package__)
if not logger.handlers:
    logger.setLevel(logging.INFO)
    logger.propagate = False
    _attach(logging.StreamHandler(sys.stdout), logging.INFO)


def set_log_level(log_level: LogLevel) -> None:
    """Change the level of the package logger and all of its handlers.

    Example:
        >>> set_log_level("DEBUG")
        >>> logger.debug("Resolved detection parameters are now visible")
    """
    level = logging.getLevelNamesMapping()[log_level]
    logger.setLevel(level)
    for handler in logger.handlers:
        handler.setLevel(level)


def set_log_file(log_file: str | Path, log_level: LogLevel = "DEBUG") -> None:
    """Also write package log records to a rotating file.

    A file handler attached by an earlier call is closed and replaced. The
    console handler is left as is.

    Args:
        log_file: Destination file. Parent directories are created.
        log_level: Level for the file handler.
    """
    log_file = Path(log_file)
    log_file.parent.mkdir(parents=True, exist_ok=True)

    for handler in [h for h in logger.handlers if isinstance(h, logging.FileHandler)]:
        handler.close()
        logger.removeHandler(handler)

    _attach(
        RotatingFileHandler(log_file, maxBytes=100_000_000, backupCount=3),
        logging.getLevelNamesMapping()[log_level],
    )

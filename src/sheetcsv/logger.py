"""
INSTRUCTION HEADER

What this file does (plain English):
- One place to get a configured logger for any sheetcsv module.
- The first call attaches a single stdout handler to the "sheetcsv" logger;
  every module logger (sheetcsv.extract, sheetcsv.convert, ...) inherits it.
- Main exports: get_logger(name), set_level(level).

Where it runs: Imported by library modules. Never run directly.
How to use:
    from sheetcsv.logger import get_logger
    logger = get_logger(__name__)
    logger.info("Wrote %s", csv_path)
"""

from __future__ import annotations

import logging
import sys

ROOT_LOGGER_NAME = "sheetcsv"
DEFAULT_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
DEFAULT_LEVEL = logging.INFO

_root_configured = False


def _configure_root_logger() -> None:
    global _root_configured
    if _root_configured:
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(DEFAULT_FORMAT, datefmt=DEFAULT_DATE_FORMAT))

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(DEFAULT_LEVEL)
    root_logger.addHandler(handler)

    _root_configured = True


def get_logger(name: str, level: int | None = None) -> logging.Logger:
    """Return a logger under the sheetcsv root, configuring the root on first use."""
    _configure_root_logger()
    logger = logging.getLogger(name)
    if level is not None:
        logger.setLevel(level)
    return logger


def set_level(level: int | str, logger_name: str | None = None) -> None:
    """
    Set the level of one logger, or of the whole sheetcsv tree when no name is given.

    Accepts logging constants or their names ("DEBUG", "info", ...).
    """
    if isinstance(level, str):
        level = level.upper()
    _configure_root_logger()
    logging.getLogger(logger_name or ROOT_LOGGER_NAME).setLevel(level)

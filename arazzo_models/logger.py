"""
Package loggers.

Every module logs through `get_logger(__name__)`. Loggers are created once,
write to stdout and do not propagate, so the mapping layer never writes into
an embedding application's root handlers. Level names are coloured only when
stdout is a terminal.

Usage:
    from arazzo_models.logger import get_logger

    logger = get_logger(__name__)
    logger.debug("Dropping %s entry", where)
"""

import logging
import sys
from typing import Dict, Optional

from arazzo_models.config import config

LOG_FORMAT = "%(asctime)s | %(name)s | %(levelname)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# ANSI colour codes keyed by numeric level
LEVEL_COLOURS = {
    logging.DEBUG: "36",
    logging.INFO: "32",
    logging.WARNING: "33",
    logging.ERROR: "31",
    logging.CRITICAL: "35",
}

_loggers: Dict[str, logging.Logger] = {}


class LevelColourFormatter(logging.Formatter):
    """Pipe-separated records; optionally wraps the level name in ANSI colour."""

    def __init__(self, colour: bool = False) -> None:
        super().__init__(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
        self.colour = colour

    def format(self, record: logging.LogRecord) -> str:
        code = LEVEL_COLOURS.get(record.levelno)
        if not self.colour or code is None:
            return super().format(record)
        # Colour a copy so other handlers still see the plain level name
        record = logging.makeLogRecord(record.__dict__)
        record.levelname = f"\033[{code}m{record.levelname}\033[0m"
        return super().format(record)


def _stdout_is_terminal() -> bool:
    isatty = getattr(sys.stdout, "isatty", None)
    return bool(isatty and isatty())


def get_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    """
    Return the package logger for `name`, creating it on first use.

    `level` defaults to ARAZZO_LOG_LEVEL and only applies on creation.
    """
    if name in _loggers:
        return _loggers[name]

    logger = logging.getLogger(name)
    logger.setLevel(config.logging_level if level is None else level)
    logger.propagate = False
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(LevelColourFormatter(colour=_stdout_is_terminal()))
    logger.addHandler(handler)

    _loggers[name] = logger
    return logger

"""Logging setup for the treefs command line.

The engine modules only create module loggers; handlers and levels are
decided here, by the front end.
"""

import logging
import sys
from dataclasses import dataclass
from typing import Dict

# Mapping of string identifiers to native logging constants
_LEVEL_MAP: Dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

_HANDLER_TAG = "_treefs_handler"


@dataclass(frozen=True)
class LoggingConfig:
    """Immutable specification for logging initialization.

    Attributes:
        level: Minimum severity level to capture.
        fmt: Record format for stderr output.
        datefmt: Timestamp format.
    """
    level: str = "WARNING"
    fmt: str = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
    datefmt: str = "%H:%M:%S"


def parse_level(level: str) -> int:
    """Map a level name to its logging constant; unknown names give WARNING."""
    return _LEVEL_MAP.get(str(level).upper(), logging.WARNING)


def configure_logging(cfg: LoggingConfig) -> logging.Logger:
    """Attach one stderr handler to the "treefs" logger.

    Calling it again replaces the handler instead of adding a second one.

    Returns:
        The configured "treefs" logger
    """
    logger = logging.getLogger("treefs")
    logger.setLevel(parse_level(cfg.level))

    for handler in list(logger.handlers):
        if getattr(handler, _HANDLER_TAG, False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(cfg.fmt, datefmt=cfg.datefmt))
    setattr(handler, _HANDLER_TAG, True)
    logger.addHandler(handler)
    return logger

"""Logging configuration for the ``bankreport`` package.

Library modules only call ``logging.getLogger(__name__)``; the single
handler is attached here by the command line entry point.
"""

import logging
import sys
from typing import IO

_PKG_LOGGER_NAME = "bankreport"
DEFAULT_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


def parse_level(level: int | str | None) -> int:
    """Translate a level name or number to a logging level; WARNING if unset."""
    if isinstance(level, int):
        return level
    if isinstance(level, str):
        level = level.strip().upper()
        if level.isdigit():
            return int(level)
        numeric = getattr(logging, level, None)
        if isinstance(numeric, int):
            return numeric
        raise ValueError(f"Unknown log level '{level}'")
    return logging.WARNING


def configure_logging(
    level: int | str | None = None,
    *,
    fmt: str = DEFAULT_FORMAT,
    stream: IO[str] | None = None,
) -> logging.Logger:
    """Attach one stream handler to the package logger.

    Calling it again replaces the handler instead of adding another one.
    """
    logger = logging.getLogger(_PKG_LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(logging.Formatter(fmt))
    logger.addHandler(handler)
    logger.setLevel(parse_level(level))
    logger.propagate = False
    return logger

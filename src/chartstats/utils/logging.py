"""
Logging for chartstats.

Modules log through ``get_logger(__name__)``, which places them under the
``chartstats`` logger. The package itself attaches only a NullHandler, so
output goes wherever the host application routes it. Scripts that want
console output call ``configure_logging()``, which installs a single named
stderr handler on the ``chartstats`` logger (the root logger is untouched).

    from chartstats.utils.logging import configure_logging
    configure_logging(level="DEBUG")

Computation code logs at DEBUG only; nothing in chartstats writes log files.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Optional, Union

LOGGER_NAME = "chartstats"
LOG_LEVEL_ENV = "CHARTSTATS_LOG_LEVEL"

# Name given to the console handler installed by configure_logging().
CONSOLE_HANDLER_NAME = "chartstats.console"

DEFAULT_FMT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"
DEFAULT_DATEFMT = "%H:%M:%S"


def resolve_level(level: Optional[Union[str, int]] = None) -> int:
    """Turn a level name or number into a logging level.

    None reads CHARTSTATS_LOG_LEVEL; unknown names fall back to INFO.
    """
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV) or "INFO"
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).strip().upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def _console_handler(logger: logging.Logger) -> Optional[logging.Handler]:
    for h in logger.handlers:
        if h.get_name() == CONSOLE_HANDLER_NAME:
            return h
    return None


def configure_logging(
    level: Optional[Union[str, int]] = None,
    *,
    fmt: Optional[str] = None,
    datefmt: Optional[str] = None,
    force: bool = False,
) -> logging.Logger:
    """Send chartstats logs to stderr.

    Calling again only updates the level, unless force=True, which replaces
    the console handler (e.g. to change the format). Other handlers on the
    chartstats logger, including its NullHandler, are left alone.

    Returns:
        The configured ``chartstats`` logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    lvl = resolve_level(level)
    logger.setLevel(lvl)

    existing = _console_handler(logger)
    if existing is not None and not force:
        existing.setLevel(lvl)
        return logger
    if existing is not None:
        logger.removeHandler(existing)
        existing.close()

    console = logging.StreamHandler(sys.stderr)
    console.set_name(CONSOLE_HANDLER_NAME)
    console.setLevel(lvl)
    console.setFormatter(logging.Formatter(fmt=fmt or DEFAULT_FMT, datefmt=datefmt or DEFAULT_DATEFMT))
    logger.addHandler(console)
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Logger for a chartstats module; the package logger when name is None."""
    return logging.getLogger(name or LOGGER_NAME)

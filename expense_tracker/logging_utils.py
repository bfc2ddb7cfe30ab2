"""Mini README: Application-wide logging helpers for the expense tracker.

Structure:
    * configure_root_logger - one-time root logger setup writing to stderr.
    * get_logger - factory returning module loggers.

Console reports go to stdout, so log records are kept on stderr where they
never interleave with what the user asked to see. Configuration happens once
per process; later calls only adjust the level.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional, Union

_LOGGER_INITIALISED = False


def configure_root_logger(level: Union[int, str] = logging.WARNING) -> None:
    """Configure the root logger, or just update its level if already done."""

    global _LOGGER_INITIALISED
    root_logger = logging.getLogger()
    if isinstance(level, str):
        level = level.upper()
    if _LOGGER_INITIALISED:
        root_logger.setLevel(level)
        return

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        logging.Formatter(
            "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )

    root_logger.setLevel(level)
    root_logger.addHandler(handler)
    _LOGGER_INITIALISED = True


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a module-specific logger ensuring baseline configuration."""

    if not _LOGGER_INITIALISED:
        configure_root_logger()
    return logging.getLogger(name)

"""
utils/logger.py
---------------
Logging setup for the factory, DAO and model layers.
Modules obtain loggers with `get_logger(__name__)`; the first call installs
a single stdout handler at LOG_LEVEL, `configure_logging` changes it later.
"""

import logging
import sys
from typing import Optional, TextIO

from config import LOG_LEVEL

_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
_handler: Optional[logging.Handler] = None


def configure_logging(level: Optional[str] = None, stream: Optional[TextIO] = None) -> None:
    """
    Install (or replace) the root handler and set the level.

    Args:
        level: Level name such as ``"DEBUG"``; defaults to LOG_LEVEL.
            Unknown names fall back to INFO.
        stream: Output stream; defaults to stdout.
    """
    global _handler
    root = logging.getLogger()
    if _handler is not None:
        root.removeHandler(_handler)

    _handler = logging.StreamHandler(stream or sys.stdout)
    _handler.setFormatter(logging.Formatter(_LOG_FORMAT, _DATE_FORMAT))
    root.addHandler(_handler)
    level_no = logging.getLevelName((level or LOG_LEVEL).upper())
    root.setLevel(level_no if isinstance(level_no, int) else logging.INFO)


def get_logger(name: str) -> logging.Logger:
    """
    Get a named logger, configuring logging on first use.

    Args:
        name: Usually ``__name__`` of the calling module.
    """
    if _handler is None:
        configure_logging()
    return logging.getLogger(name)

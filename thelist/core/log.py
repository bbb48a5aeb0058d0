"""Logging setup shared by the HTTP app and the scripts."""
from __future__ import annotations

import logging
import sys

LOGGER_NAME = "thelist"
_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str | int = "INFO") -> logging.Logger:
    """Attach a stderr handler to the package logger (once) and set its level."""
    logger = logging.getLogger(LOGGER_NAME)
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    logger.setLevel(level)
    logger.propagate = False
    if not any(getattr(h, "_thelist", False) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_FORMAT))
        handler._thelist = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
    return logger

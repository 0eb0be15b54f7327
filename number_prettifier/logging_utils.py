"""Helper utilities for the package-wide logger."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Union

PACKAGE_LOGGER_NAME = Path(__file__).resolve().parent.name
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
CONSOLE_HANDLER_NAME = "console"

BASE_LOGGER = logging.getLogger(PACKAGE_LOGGER_NAME)
BASE_LOGGER.addHandler(logging.NullHandler())


def get_logger(suffix: str | None = None) -> logging.Logger:
    """Return the shared package logger or one of its children."""

    if suffix is None:
        return BASE_LOGGER
    logger = BASE_LOGGER.getChild(suffix)
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
    return logger


def set_log_level(level: Union[int, str]) -> None:
    """Update the base logger level (and implicitly its children)."""

    BASE_LOGGER.setLevel(level)


def configure_console_logging(level: Union[int, str] = logging.WARNING) -> logging.Handler:
    """Send package log records to stderr; safe to call more than once."""

    for handler in BASE_LOGGER.handlers:
        if handler.get_name() == CONSOLE_HANDLER_NAME and isinstance(handler, logging.StreamHandler):
            set_log_level(level)
            return handler

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(CONSOLE_HANDLER_NAME)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    BASE_LOGGER.addHandler(handler)
    set_log_level(level)
    return handler


__all__ = ["BASE_LOGGER", "CONSOLE_HANDLER_NAME", "configure_console_logging", "get_logger", "set_log_level"]

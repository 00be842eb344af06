"""Loggers writing '[LEVEL] - <unix nanoseconds> <message>' lines."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

__all__ = ["init_logger_with_debug", "init_logger_with_level_and_writer"]

_LEVEL_NAMES = {
    logging.DEBUG: "DEBUG",
    logging.INFO: "INFO",
    logging.WARNING: "WARN",
    logging.ERROR: "ERROR",
    logging.CRITICAL: "FATAL",
}


class _TextFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        level = _LEVEL_NAMES.get(record.levelno, record.levelname.upper())
        timestamp = int(record.created * 1_000_000_000)
        return f"[{level}] - {timestamp} {record.getMessage()}"


def init_logger_with_level_and_writer(level: int, writer: TextIO) -> logging.Logger:
    """Return a logger that writes records at ``level`` or above to ``writer``."""
    logger = logging.Logger("qstools", level)
    logger.propagate = False
    handler = logging.StreamHandler(writer)
    handler.setFormatter(_TextFormatter())
    logger.addHandler(handler)
    return logger


def init_logger_with_debug(debug: bool) -> logging.Logger:
    """Return a stderr logger: everything when ``debug`` is set, warnings and up otherwise."""
    level = logging.NOTSET if debug else logging.WARNING
    return init_logger_with_level_and_writer(level, sys.stderr)
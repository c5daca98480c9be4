#!/usr/bin/env python3
# core/ui/static/logging.py
from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

from core.ui.utils import ANSI, PRINT_MUTEX, ansi_enabled, strip_ansi

LEVEL_COLORS = {
    logging.DEBUG: "bright_black",
    logging.WARNING: "yellow",
    logging.ERROR: "red",
    logging.CRITICAL: "magenta",
}


class ConsoleLogHandler(logging.StreamHandler):
    """
    stderr handler that colors records by level and shares PRINT_MUTEX with
    print_line, so log records never interleave with command output.
    """

    def __init__(self, stream=None) -> None:
        super().__init__(sys.stderr if stream is None else stream)
        self.use_color = ansi_enabled(self.stream)

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        color = LEVEL_COLORS.get(record.levelno)
        if self.use_color and color:
            return f"{ANSI[color]}{message}{ANSI['reset']}"
        return message

    def emit(self, record: logging.LogRecord) -> None:
        with PRINT_MUTEX:
            super().emit(record)


class PlainFormatter(logging.Formatter):
    """Log file formatter; command output echoed into records may carry ANSI."""

    def format(self, record: logging.LogRecord) -> str:
        return strip_ansi(super().format(record))


def init_logger(
    name: str = "tokenline",
    level: int | str = logging.INFO,
    logfile: str | Path | None = None,
) -> logging.Logger:
    """
    Configure the application logger. Safe to call more than once.

    The console handler shows `level` and up; the optional rotating log file
    records everything from DEBUG.
    """
    logger = logging.getLogger(name)
    logger.propagate = False

    console = next((h for h in logger.handlers if isinstance(h, ConsoleLogHandler)), None)
    if console is None:
        console = ConsoleLogHandler()
        console.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
        logger.addHandler(console)
    console.setLevel(level)
    logger.setLevel(level)

    if logfile:
        if not any(isinstance(h, RotatingFileHandler) for h in logger.handlers):
            file_handler = RotatingFileHandler(
                logfile, maxBytes=1_000_000, backupCount=3, encoding="utf-8")
            file_handler.setFormatter(PlainFormatter(
                "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            ))
            logger.addHandler(file_handler)
        logger.setLevel(logging.DEBUG)

    return logger

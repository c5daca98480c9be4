#!/usr/bin/env python3
# core/ui/__init__.py
from __future__ import annotations
# Re-export convenient top-level API
from .utils import (
    ANSI,
    ansi_enabled,
    colorize,
    strip_ansi,
    PRINT_MUTEX,
    print_line,
)
from .static import (
    format_columns,
    init_logger,
    ConsoleLogHandler,
    PlainFormatter,
)

__all__ = [
    "ANSI",
    "ansi_enabled",
    "colorize",
    "strip_ansi",
    "PRINT_MUTEX",
    "print_line",
    "format_columns",
    "init_logger",
    "ConsoleLogHandler",
    "PlainFormatter",
]

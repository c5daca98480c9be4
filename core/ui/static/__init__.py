#!/usr/bin/env python3
# core/ui/static/__init__.py
from __future__ import annotations
from .table import format_columns
from .logging import ConsoleLogHandler, PlainFormatter, init_logger

__all__ = [
    "format_columns",
    "init_logger",
    "ConsoleLogHandler",
    "PlainFormatter",
]

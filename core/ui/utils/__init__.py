#!/usr/bin/env python3
# core/ui/utils/__init__.py
from __future__ import annotations
from .ansi import (
    ANSI,
    ansi_enabled,
    colorize,
    strip_ansi,
)
from .console import PRINT_MUTEX, print_line

__all__ = [
    "ANSI",
    "ansi_enabled",
    "colorize",
    "strip_ansi",
    "PRINT_MUTEX",
    "print_line",
]

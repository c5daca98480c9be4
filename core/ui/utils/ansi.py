#!/usr/bin/env python3
# core/ui/utils/ansi.py
from __future__ import annotations

import os
import re
import sys
from typing import TextIO

# SGR codes for the colors the console and the logger use.
ANSI = {
    "reset": "\x1b[0m",
    "red": "\x1b[31m",
    "green": "\x1b[32m",
    "yellow": "\x1b[33m",
    "magenta": "\x1b[35m",
    "cyan": "\x1b[36m",
    "bright_black": "\x1b[90m",
}

ANSI_REGEX = re.compile(r"\x1b\[[0-9;]*[A-Za-z]")


def strip_ansi(text: str) -> str:
    """Remove ANSI escape sequences from text."""
    return ANSI_REGEX.sub("", text)


def ansi_enabled(stream: TextIO | None = None) -> bool:
    """
    True when `stream` (stdout by default) is a terminal and NO_COLOR is unset.
    """
    if os.environ.get("NO_COLOR"):
        return False
    stream = sys.stdout if stream is None else stream
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


def colorize(text: str, color: str, *, stream: TextIO | None = None) -> str:
    """Wrap text in one ANSI color, or return it unchanged when colors are off."""
    if color not in ANSI or not ansi_enabled(stream):
        return text
    return f"{ANSI[color]}{text}{ANSI['reset']}"

#!/usr/bin/env python3
# core/ui/utils/console.py
from __future__ import annotations

import sys
import threading

# Single shared print mutex for all UI output (prompt output/logging).
PRINT_MUTEX = threading.Lock()


def print_line(text: str = "", *, file=None, flush: bool = False) -> None:
    """Thread-safe single-line print."""
    stream = sys.stdout if file is None else file
    with PRINT_MUTEX:
        stream.write(f"{text}\n")
        if flush:
            stream.flush()

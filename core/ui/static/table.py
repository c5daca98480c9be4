#!/usr/bin/env python3
# core/ui/static/table.py
from __future__ import annotations

from typing import Sequence

from core.ui.utils import strip_ansi


def format_columns(rows: Sequence[Sequence[object]], *, indent: int = 1, gap: int = 2) -> str:
    """
    Align ragged rows into columns, e.g. one alias group per row:

         teleport  tp
         go

    Widths ignore ANSI sequences; trailing whitespace is dropped.
    """
    cells = [[str(cell) for cell in row] for row in rows]
    widths: list[int] = []
    for row in cells:
        for index, cell in enumerate(row):
            width = len(strip_ansi(cell))
            if index == len(widths):
                widths.append(width)
            elif width > widths[index]:
                widths[index] = width

    lines = []
    for row in cells:
        padded = [cell + " " * (widths[i] - len(strip_ansi(cell))) for i, cell in enumerate(row)]
        lines.append((" " * indent + (" " * gap).join(padded)).rstrip())
    return "\n".join(lines)

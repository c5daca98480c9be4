#!/usr/bin/env python3
# core/interface/history.py
from __future__ import annotations

"""
In-memory command history with cursor based recall.

The cursor counts back from the newest entry (0 = newest); -1 means the user
is not browsing and sees the line they are editing. When browsing starts that
line is kept in a single pending slot and handed back when browsing ends.
"""

NOT_BROWSING = -1


class HistoryNavigator:
    """Append-only log of submitted lines plus a recall cursor."""

    def __init__(self) -> None:
        self._entries: list[str] = []
        self._cursor = NOT_BROWSING
        self._pending = ""

    @property
    def entries(self) -> tuple[str, ...]:
        return tuple(self._entries)

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def pending(self) -> str:
        return self._pending

    @property
    def is_browsing(self) -> bool:
        return self._cursor != NOT_BROWSING

    def __len__(self) -> int:
        return len(self._entries)

    def submit(self, line: str) -> bool:
        """
        Record `line` unless it is blank or repeats the newest entry.
        Browsing state is reset either way. Returns True if recorded.
        """
        recorded = False
        if line.strip(" ") and (not self._entries or self._entries[-1] != line):
            self._entries.append(line)
            recorded = True
        self._cursor = NOT_BROWSING
        self._pending = ""
        return recorded

    def recall_older(self, current_line: str) -> str:
        """Step one entry back in time; returns `current_line` when already at the oldest."""
        if len(self._entries) <= self._cursor + 1:
            return current_line
        if self._cursor == NOT_BROWSING:
            self._pending = current_line
        self._cursor += 1
        return self._entry_at_cursor()

    def recall_newer(self, current_line: str) -> str:
        """Step one entry forward; leaving the newest entry restores the pending line."""
        if self._cursor == NOT_BROWSING:
            return current_line
        self._cursor -= 1
        if self._cursor == NOT_BROWSING:
            return self._pending
        return self._entry_at_cursor()

    def _entry_at_cursor(self) -> str:
        return self._entries[len(self._entries) - self._cursor - 1]

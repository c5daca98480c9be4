#!/usr/bin/env python3
# core/interface/console.py
from __future__ import annotations

"""
Console orchestrator.

Glues the command registry, the completion engine, the history navigator and
an output buffer together. A frontend feeds key and text events in and draws
whatever `render_frame()` hands back; the console itself never draws.
"""

import enum
import logging
from collections import deque
from dataclasses import dataclass, field

from core.commands import CommandRegistry, CommandResult, ResultStatus, aliases
from core.interface.completion import Completion, Suggestion, autocomplete, format_suggestions
from core.interface.history import HistoryNavigator
from core.interface.parser import build_usage, tokenize

log = logging.getLogger("tokenline.console")

ECHO_PREFIX = " >> "
NOT_FOUND_LINE = " -- Command not found -- "
OUT_OF_RANGE_ERROR = "error: argument out of range"
INVALID_ARGUMENT_ERROR = "error: invalid argument"
COMMAND_FAILED_ERROR = "error: command failed"
DEFAULT_HEIGHT = 10


class Key(enum.Enum):
    """Control keys the console reacts to."""
    TOGGLE = "toggle"
    CLOSE = "close"
    HISTORY_UP = "history-up"
    HISTORY_DOWN = "history-down"
    BACKSPACE = "backspace"
    SUBMIT = "submit"
    AUTOCOMPLETE = "autocomplete"


@dataclass(slots=True, frozen=True)
class ConsoleFrame:
    """What a renderer needs for one frame. `lines` are newest first."""
    prompt: str
    lines: list[str] = field(default_factory=list)
    is_open: bool = False


class Console:
    """Owns the typed line, the output buffer and the open/closed state."""

    def __init__(
        self,
        registry: CommandRegistry | None = None,
        history: HistoryNavigator | None = None,
        *,
        height: int = DEFAULT_HEIGHT,
        banner: str | None = None,
    ) -> None:
        self.registry = registry if registry is not None else CommandRegistry()
        self.history = history if history is not None else HistoryNavigator()
        self.height = height
        self.last_suggestions: list[Suggestion] = []
        self._output: deque[str] = deque()
        self._typed_line = ""
        self._is_open = False

        if banner:
            self.output_add(banner)
        self.registry.register([aliases("list")], 1, self._list_commands)

    # ---------------- State ----------------

    @property
    def typed_line(self) -> str:
        return self._typed_line

    @typed_line.setter
    def typed_line(self, text: str) -> None:
        self._typed_line = text

    @property
    def is_open(self) -> bool:
        return self._is_open

    def set_open(self, is_open: bool) -> None:
        self._is_open = is_open

    # ---------------- Registration ----------------

    def register_command(self, generators, num_fixed_tokens, callback):
        return self.registry.register(generators, num_fixed_tokens, callback)

    def register_legacy_command(self, literal_text, callback):
        return self.registry.register_legacy(literal_text, callback)

    # ---------------- Events ----------------

    def on_key_event(self, key: Key) -> CommandResult | None:
        """Apply one control key. Returns the command result for SUBMIT."""
        if key is Key.CLOSE:
            self.set_open(False)
        elif key is Key.TOGGLE:
            self.set_open(not self._is_open)
        elif key is Key.HISTORY_UP:
            self._typed_line = self.history.recall_older(self._typed_line)
        elif key is Key.HISTORY_DOWN:
            self._typed_line = self.history.recall_newer(self._typed_line)
        elif key is Key.BACKSPACE:
            self._typed_line = self._typed_line[:-1]
        elif key is Key.SUBMIT:
            result = self.submit_command(self._typed_line)
            self._typed_line = ""
            return result
        elif key is Key.AUTOCOMPLETE:
            self.autocomplete()
        return None

    def on_text_input(self, text: str) -> None:
        self._typed_line += text

    def autocomplete(self) -> Completion:
        """Rewrite the typed line and remember (and log) the ranked suggestions."""
        completion = autocomplete(self.registry, self._typed_line)
        self._typed_line = completion.line
        self.last_suggestions = completion.suggestions
        if completion.suggestions:
            log.debug("suggestions:\n%s", format_suggestions(completion.suggestions))
        return completion

    # ---------------- Execution ----------------

    def submit_command(self, line: str) -> CommandResult:
        """
        Record, echo and execute one line.

        The echo line always precedes the result line in the output.
        """
        self.history.submit(line)
        if not line:
            return CommandResult(ResultStatus.EMPTY, "")

        self.output_add(ECHO_PREFIX + line)
        tokens = tokenize(line)
        resolution = self.registry.resolve_command(tokens, line)
        if resolution is None:
            log.debug("No command matches %r", line)
            self.output_add(NOT_FOUND_LINE)
            return CommandResult(ResultStatus.NOT_FOUND, NOT_FOUND_LINE)

        log.debug("Resolved %r to %s command #%d", line, resolution.kind, resolution.index)
        try:
            result = CommandResult(ResultStatus.OK, resolution.callback(tokens))
        except LookupError as exc:
            log.warning("Command %r: %s", line, exc)
            result = CommandResult(ResultStatus.ERROR, OUT_OF_RANGE_ERROR)
        except ValueError as exc:
            log.warning("Command %r: %s", line, exc)
            result = CommandResult(ResultStatus.ERROR, INVALID_ARGUMENT_ERROR)
        except Exception:
            log.exception("Command %r failed", line)
            result = CommandResult(ResultStatus.ERROR, COMMAND_FAILED_ERROR)
        self.output_add(result.message)
        return result

    def _list_commands(self, tokens: list[str]) -> str:
        lines = [build_usage(spec) for spec in self.registry.commands]
        lines.extend(legacy.text for legacy in self.registry.legacy_commands)
        return "\n".join(lines)

    # ---------------- Output ----------------

    def output_add(self, message: str) -> None:
        """Push a message; multi-line text becomes one output line per line."""
        lines = message.split("\n") if message else [message]
        for text in lines:
            self._output.appendleft(text)

    @property
    def output(self) -> list[str]:
        return list(self._output)

    @property
    def output_count(self) -> int:
        return len(self._output)

    def recent_output(self, count: int) -> list[str]:
        """The `count` newest output lines, newest first."""
        return [self._output[i] for i in range(min(count, len(self._output)))]

    def visible_output(self, height: int | None = None) -> list[str]:
        return self.recent_output(self.height if height is None else height)

    def render_frame(self) -> ConsoleFrame:
        return ConsoleFrame(self._typed_line, self.visible_output(), self._is_open)

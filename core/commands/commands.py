#!/usr/bin/env python3
# core/commands/commands.py
from __future__ import annotations

"""
Command registry.

This module provides:
- CommandRegistry: insertion-ordered store of alias-group and legacy commands.
- Two resolver strategies (structural per-token and longest literal prefix)
  behind a single `resolve_command` dispatch.
- CommandRegistry.command: decorator to register functions as alias-group commands.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Sequence

from core.commands.command_types import (
    CommandCallback,
    CommandSpec,
    ConfigurationError,
    LegacyCommand,
    as_provider,
)

log = logging.getLogger("tokenline.registry")


@dataclass(slots=True, frozen=True)
class Resolution:
    """Which command a line resolved to."""
    kind: str  # "alias" or "legacy"
    index: int
    callback: CommandCallback


class CommandRegistry:
    """Holds all command definitions and provides lookup utilities."""

    def __init__(self) -> None:
        self._commands: list[CommandSpec] = []
        self._legacy: list[LegacyCommand] = []

    def __len__(self) -> int:
        return len(self._commands) + len(self._legacy)

    @property
    def commands(self) -> tuple[CommandSpec, ...]:
        return tuple(self._commands)

    @property
    def legacy_commands(self) -> tuple[LegacyCommand, ...]:
        return tuple(self._legacy)

    # ---------------- Registration ----------------

    def register(
        self,
        generators: Sequence[Any],
        num_fixed_tokens: int,
        callback: CommandCallback,
    ) -> CommandSpec:
        """Append an alias-group command. Fails fast on an impossible fixed token count."""
        providers = [as_provider(g) for g in generators]
        if num_fixed_tokens < 0 or num_fixed_tokens > len(providers):
            raise ConfigurationError(
                f"num_fixed_tokens={num_fixed_tokens} must be between 0 and "
                f"the number of generators ({len(providers)})."
            )
        spec = CommandSpec(providers, num_fixed_tokens, callback)
        self._commands.append(spec)
        log.debug("Registered command #%d (%d fixed tokens)",
                  len(self._commands) - 1, num_fixed_tokens)
        return spec

    def register_legacy(self, text: str, callback: CommandCallback) -> LegacyCommand:
        """Register a command matched by its full literal text."""
        if not text or not text.strip():
            raise ConfigurationError("Legacy command text must not be blank.")
        legacy = LegacyCommand(text, callback)
        self._legacy.append(legacy)
        return legacy

    def command(
        self,
        *generators: Any,
        fixed: int | None = None,
    ) -> Callable[[CommandCallback], CommandCallback]:
        """
        Decorator to register a function as an alias-group command.

        Every positional argument describes one token position (see `as_provider`);
        `fixed` defaults to all of them.
        """

        def wrapper(func: CommandCallback) -> CommandCallback:
            self.register(list(generators),
                          len(generators) if fixed is None else fixed, func)
            return func

        return wrapper

    # ---------------- Lookup ----------------

    def resolve_exact(self, tokens: Sequence[str]) -> int | None:
        """
        Return the index of the first command whose fixed tokens all equal
        (case-sensitively) one alias at their position, or None.
        """
        for index, spec in enumerate(self._commands):
            if len(tokens) < spec.num_fixed_tokens:
                continue
            if all(
                _in_groups(spec.groups_at(position), tokens[position])
                for position in range(spec.num_fixed_tokens)
            ):
                return index
        return None

    def resolve_legacy(self, line: str) -> int | None:
        """
        Return the index of the longest literal command that prefixes `line`
        on a whitespace boundary, or None. Ties go to the first registered.
        """
        best_index: int | None = None
        best_size = 0
        for index, legacy in enumerate(self._legacy):
            size = len(legacy.text)
            if size <= best_size:
                continue
            if len(line) != size and not (len(line) > size and line[size] == " "):
                continue
            if line.startswith(legacy.text):
                best_index, best_size = index, size
        return best_index

    def resolve_command(self, tokens: Sequence[str], line: str) -> Resolution | None:
        """Try the alias-group resolver, then fall back to literal prefixes."""
        index = self.resolve_exact(tokens)
        if index is not None:
            return Resolution("alias", index, self._commands[index].callback)
        index = self.resolve_legacy(line)
        if index is not None:
            return Resolution("legacy", index, self._legacy[index].callback)
        return None


def _in_groups(groups: Sequence[Sequence[str]], token: str) -> bool:
    return any(token in group for group in groups)

#!/usr/bin/env python3
# core/commands/command_types.py
from __future__ import annotations

"""
Command data structures and protocols.

This module defines:
- AliasGroup: interchangeable spellings of one value at one token position.
- CandidateProvider: anything that produces the current alias groups for a position.
- StaticCandidates / LiveCandidates: the two provider variants shipped with the core.
- CommandSpec: an alias-group command (positional providers + fixed token count).
- LegacyCommand: a command keyed by its full literal text.
- CommandResult: the outcome of submitting a line to the console.
"""

import enum
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, Protocol, Sequence, runtime_checkable

# First alias is the canonical display form.
AliasGroup = tuple[str, ...]

CommandCallback = Callable[[list[str]], str]


class ConfigurationError(ValueError):
    """Raised for malformed command registrations or invalid settings."""


@runtime_checkable
class CandidateProvider(Protocol):
    """Produces the alias groups accepted at one token position."""

    def candidates(self) -> list[AliasGroup]:  # pragma: no cover - signature only
        ...


def _to_group(item: Any) -> AliasGroup:
    if isinstance(item, str):
        return (item,)
    return tuple(str(alias) for alias in item)


@dataclass(slots=True)
class StaticCandidates:
    """A fixed list of alias groups."""

    groups: list[AliasGroup] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.groups = [_to_group(g) for g in self.groups]

    def candidates(self) -> list[AliasGroup]:
        return list(self.groups)


@dataclass(slots=True)
class LiveCandidates:
    """
    Alias groups enumerated from a live source on every call.

    `source` returns the current items. Each item becomes one group: a string
    is a single alias, a sequence of strings is used as-is, and anything else
    goes through `aliases` when given.
    """

    source: Callable[[], Iterable[Any]]
    aliases: Callable[[Any], Sequence[str]] | None = None

    def candidates(self) -> list[AliasGroup]:
        groups: list[AliasGroup] = []
        for item in self.source():
            if self.aliases is not None:
                item = self.aliases(item)
            groups.append(_to_group(item))
        return groups


def aliases(*names: str) -> StaticCandidates:
    """Shorthand for a position that accepts a single alias group."""
    return StaticCandidates([tuple(names)])


def as_provider(value: Any) -> CandidateProvider:
    """
    Coerce a registration argument into a provider.

    Accepts a provider, a single string (one group with one alias) or a
    sequence of strings (one group).
    """
    if isinstance(value, CandidateProvider):
        return value
    if isinstance(value, str):
        return StaticCandidates([(value,)])
    if isinstance(value, Sequence) and all(isinstance(v, str) for v in value):
        return StaticCandidates([tuple(value)])
    raise ConfigurationError(
        f"Cannot use {value!r} as a candidate provider.")


@dataclass(slots=True)
class CommandSpec:
    """
    An alias-group command.

    Attributes:
        generators: One provider per token position.
        num_fixed_tokens: Leading positions that must match an alias exactly.
        callback: Receives all typed tokens, returns the text to output.
    """

    generators: list[CandidateProvider]
    num_fixed_tokens: int
    callback: CommandCallback

    def groups_at(self, position: int) -> list[AliasGroup]:
        """Evaluate the provider at `position` (fresh on every call)."""
        return self.generators[position].candidates()


@dataclass(slots=True)
class LegacyCommand:
    """A command registered by its full literal text."""

    text: str
    callback: CommandCallback


class ResultStatus(enum.Enum):
    OK = "ok"
    ERROR = "error"
    NOT_FOUND = "not_found"
    EMPTY = "empty"


@dataclass(slots=True)
class CommandResult:
    """
    Outcome of submitting one line.

    Attributes:
        status: OK, ERROR, NOT_FOUND or EMPTY.
        message: The text appended to the output (empty for EMPTY).
    """
    status: ResultStatus = ResultStatus.OK
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.status is ResultStatus.OK

    @property
    def found(self) -> bool:
        return self.status is not ResultStatus.NOT_FOUND

    def __str__(self) -> str:
        return self.message

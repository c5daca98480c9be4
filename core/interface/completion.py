#!/usr/bin/env python3
# core/interface/completion.py
from __future__ import annotations

"""
Command line completion engine.

Given a partially typed line, every token is matched against the alias groups
each registered command accepts at that position:

- A query that starts an alias lands in the "starts-with" bucket; a query found
  later inside an alias lands in the "contains" bucket; anything else is dropped.
- Only commands contributing to the preferred non-empty bucket stay alive for
  the next token.
- The token is rewritten to the longest common prefix of the bucket and marked
  locked once no longer candidate exists.

The engine is pure: it returns the rewritten line together with a ranked
suggestion listing and leaves displaying it to the caller.
"""

import enum
import sys
from dataclasses import dataclass, field
from typing import Sequence

from core.commands import AliasGroup, CommandRegistry
from core.interface.parser import ends_with_space, tokenize
from core.ui import format_columns

# Rank position used when the query does not occur in a candidate.
NOT_FOUND = sys.maxsize


class Bucket(enum.Enum):
    STARTS_WITH = "starts-with"
    CONTAINS = "contains"


def rank(query: str, candidate: str) -> tuple[int, int]:
    """
    Rank one candidate for a query, lower is better.

    Returns (position of query inside candidate, len(candidate) - len(query)),
    both compared case-insensitively. The length difference is signed.
    """
    query_lowered = query.lower()
    candidate_lowered = candidate.lower()
    pos = candidate_lowered.find(query_lowered)
    return (NOT_FOUND if pos < 0 else pos,
            len(candidate_lowered) - len(query_lowered))


@dataclass(slots=True, frozen=True)
class MatchInfo:
    pos: int
    diff: int
    command_index: int
    group_index: int
    candidate: str

    @property
    def rank(self) -> tuple[int, int]:
        return self.pos, self.diff


@dataclass(slots=True, frozen=True)
class CompletedToken:
    text: str
    locked: bool = False
    rewritten: bool = False


@dataclass(slots=True, frozen=True)
class Suggestion:
    """One alias group that matched the token at `position`."""
    position: int
    command_index: int
    group_index: int
    aliases: AliasGroup
    match: str
    bucket: Bucket
    rank: tuple[int, int]


@dataclass(slots=True)
class Completion:
    """Result of one autocomplete request."""
    line: str
    tokens: list[CompletedToken] = field(default_factory=list)
    suggestions: list[Suggestion] = field(default_factory=list)

    def suggestions_at(self, position: int) -> list[Suggestion]:
        return [s for s in self.suggestions if s.position == position]


def _best_match(query: str, group: AliasGroup, command_index: int, group_index: int) -> MatchInfo:
    infos = []
    for candidate in group:
        pos, diff = rank(query, candidate)
        infos.append(MatchInfo(pos, diff, command_index, group_index, candidate))
    # min() keeps the first of equally ranked aliases
    return min(infos, key=lambda info: info.rank)


def _common_start_length(a: str, b: str) -> int:
    length = 0
    for char_a, char_b in zip(a, b):
        # per character, so the length indexes the original text
        if char_a.casefold() != char_b.casefold():
            break
        length += 1
    return length


def _common_prefix(matches: Sequence[MatchInfo]) -> tuple[str, bool]:
    """Return (prefix in the first match's case, whether it is already the longest candidate)."""
    reference = matches[0].candidate
    common_length = len(reference)
    longest = len(reference)
    for info in matches:
        common_length = min(common_length, _common_start_length(reference, info.candidate))
        longest = max(longest, len(info.candidate))
    text = reference[:common_length]
    return text, longest == len(text)


def autocomplete(
    registry: CommandRegistry,
    line: str,
    *,
    limit_to_fixed: bool = False,
    collect_suggestions: bool = True,
    rewrite: bool = True,
) -> Completion:
    """
    Complete `line` token by token against every registered alias-group command.

    Args:
        limit_to_fixed: Only consider the fixed token positions of each command.
        collect_suggestions: Fill `Completion.suggestions`.
        rewrite: Return the rewritten line instead of the input.
    """
    tokens = tokenize(line)
    if not tokens:
        return Completion(line)

    completed = [CompletedToken(token) for token in tokens]
    commands = registry.commands
    alive = set(range(len(commands)))
    suggestions: list[Suggestion] = []

    for position, token in enumerate(tokens):
        query = token.lower()
        starts_with: list[MatchInfo] = []
        in_middle: list[MatchInfo] = []
        groups_by_command: dict[int, list[AliasGroup]] = {}

        for command_index, spec in enumerate(commands):
            if command_index not in alive:
                continue
            end = spec.num_fixed_tokens if limit_to_fixed else len(spec.generators)
            if position >= end:
                continue
            groups = spec.groups_at(position)
            groups_by_command[command_index] = groups
            for group_index, group in enumerate(groups):
                if not group:
                    continue
                best = _best_match(query, group, command_index, group_index)
                if best.pos == 0:
                    starts_with.append(best)
                elif best.pos != NOT_FOUND:
                    in_middle.append(best)

        selected = starts_with or in_middle
        alive = {info.command_index for info in selected}
        if selected:
            text, locked = _common_prefix(selected)
            if text:
                completed[position] = CompletedToken(text, locked, True)

        if collect_suggestions:
            for bucket, infos in ((Bucket.STARTS_WITH, starts_with), (Bucket.CONTAINS, in_middle)):
                for info in sorted(infos, key=lambda i: i.rank):
                    suggestions.append(Suggestion(
                        position=position,
                        command_index=info.command_index,
                        group_index=info.group_index,
                        aliases=groups_by_command[info.command_index][info.group_index],
                        match=info.candidate,
                        bucket=bucket,
                        rank=info.rank,
                    ))

    if not rewrite:
        return Completion(line, completed, suggestions)

    last = len(completed) - 1
    parts: list[str] = []
    for index, token in enumerate(completed):
        parts.append(token.text)
        if index != last or ends_with_space(line) or token.locked:
            parts.append(" ")
    return Completion("".join(parts), completed, suggestions)


def suggest(registry: CommandRegistry, text_before_cursor: str) -> list[str]:
    """
    Best-matching aliases for the token under the cursor, in rank order.

    Only the bucket that narrowing would select is offered. Nothing is
    suggested once the user has typed trailing whitespace.
    """
    tokens = tokenize(text_before_cursor)
    if not tokens or ends_with_space(text_before_cursor):
        return []
    completion = autocomplete(registry, text_before_cursor, rewrite=False)
    current = completion.suggestions_at(len(tokens) - 1)
    starts_with = [s for s in current if s.bucket is Bucket.STARTS_WITH]
    words: list[str] = []
    for suggestion in starts_with or current:
        if suggestion.match not in words:
            words.append(suggestion.match)
    return words


def format_suggestions(suggestions: Sequence[Suggestion]) -> str:
    """Render suggestions as aligned columns, one alias group per row."""
    if not suggestions:
        return ""
    return format_columns([s.aliases for s in suggestions])

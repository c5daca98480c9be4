#!/usr/bin/env python3
# core/interface/parser.py
from __future__ import annotations

"""
Line tokenizing helpers shared by the console and the completion engine,
plus usage rendering for registered commands.
"""

from core.commands import CommandSpec, StaticCandidates


def tokenize(command_line: str) -> list[str]:
    """Split a raw command line on runs of whitespace. No quoting rules apply."""
    return command_line.split()


def ends_with_space(command_line: str) -> bool:
    """True when the user has already started a new (empty) token."""
    return bool(command_line) and command_line[-1].isspace()


def current_token(command_line: str) -> str:
    """Return the token under an end-of-line cursor ('' after trailing whitespace)."""
    if not command_line or ends_with_space(command_line):
        return ""
    return tokenize(command_line)[-1]


def build_usage(spec: CommandSpec, placeholder: str = "arg") -> str:
    """
    Render a compact usage string for an alias-group command.

    Fixed positions with static aliases show the canonical alias of each group
    joined by '/'; free positions and live candidates show `<placeholder>`.

    Examples:
        'math add/sub/mul/div <arg> <arg>'
    """
    usage_parts: list[str] = []
    for position, provider in enumerate(spec.generators):
        canonical = []
        if position < spec.num_fixed_tokens and isinstance(provider, StaticCandidates):
            canonical = [group[0] for group in provider.candidates() if group]
        usage_parts.append("/".join(canonical) if canonical else f"<{placeholder}>")
    return " ".join(usage_parts)

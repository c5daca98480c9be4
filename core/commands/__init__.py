#!/usr/bin/env python3
# core/commands/__init__.py
from __future__ import annotations

"""
Package for command management and registration.

Provides:
- Data structures and protocols (`CommandSpec`, `CandidateProvider`, `CommandResult`, ...).
- The explicitly owned `CommandRegistry` and its resolver strategies.

This package re-exports public APIs from:
- command_types.py
- commands.py
"""


# Re-export from submodules
from .command_types import (
    AliasGroup,
    CandidateProvider,
    CommandCallback,
    CommandResult,
    CommandSpec,
    ConfigurationError,
    LegacyCommand,
    LiveCandidates,
    ResultStatus,
    StaticCandidates,
    aliases,
    as_provider,
)
from .commands import CommandRegistry, Resolution

__all__ = [
    "AliasGroup",
    "CandidateProvider",
    "CommandCallback",
    "CommandResult",
    "CommandSpec",
    "ConfigurationError",
    "LegacyCommand",
    "LiveCandidates",
    "ResultStatus",
    "StaticCandidates",
    "aliases",
    "as_provider",
    "CommandRegistry",
    "Resolution",
]

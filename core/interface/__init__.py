#!/usr/bin/env python3
# core/interface/__init__.py
from __future__ import annotations

"""
Package for the interactive console and its matching engine.

Provides:
- Tokenizer helpers.
- Match scoring and token-by-token autocompletion.
- Command history recall.
- The Console orchestrator (key/text events, output buffer).
- CLI frontends (prompt_toolkit / plain) and the REPL loop.
- Dynamic command loader for the plugins package.
"""


# Parser FIRST (completion and console depend on it)
from .parser import tokenize, ends_with_space, current_token, build_usage

# Completion engine
from .completion import (
    NOT_FOUND,
    Bucket,
    Completion,
    CompletedToken,
    MatchInfo,
    Suggestion,
    autocomplete,
    format_suggestions,
    rank,
    suggest,
)

# History / console
from .history import HistoryNavigator, NOT_BROWSING
from .console import Console, ConsoleFrame, Key

# Loader
from .loader import load_commands

# CLI frontends (after the console is available)
from .cli import BaseCLI, PlainCLI, PromptToolkitCLI, build_key_bindings, make_cli, run_repl

__all__ = [
    # parser
    "tokenize",
    "ends_with_space",
    "current_token",
    "build_usage",
    # completion
    "NOT_FOUND",
    "Bucket",
    "Completion",
    "CompletedToken",
    "MatchInfo",
    "Suggestion",
    "autocomplete",
    "format_suggestions",
    "rank",
    "suggest",
    # history / console
    "HistoryNavigator",
    "NOT_BROWSING",
    "Console",
    "ConsoleFrame",
    "Key",
    # loader
    "load_commands",
    # cli
    "BaseCLI",
    "PlainCLI",
    "PromptToolkitCLI",
    "build_key_bindings",
    "make_cli",
    "run_repl",
]

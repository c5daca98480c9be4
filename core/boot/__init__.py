#!/usr/bin/env python3
# core/boot/__init__.py
from __future__ import annotations
"""
Boot sequence package.

Exports:
- boot_sequence: Orchestrated startup pipeline with [  OK  ] / [FAILED] lines.
- BootState: Dataclass containing config, logger, console and command count.
- main: Console script entry point.
"""


from .boot import BootState, boot_sequence, main

__all__ = ["boot_sequence", "BootState", "main"]

#!/usr/bin/env python3
# core/__init__.py
from __future__ import annotations
"""
Core package bootstrap.

Avoid eager imports that trigger package initialization cascades.

Notes:
- Let 'core.commands' and 'core.interface' expose their APIs via their own
  __init__.py files.
"""

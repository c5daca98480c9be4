#!/usr/bin/env python3
# core/config/__init__.py
from __future__ import annotations

"""
Package for application configuration.

Provides:
- config.toml sections and TOKENLINE_* environment overrides mapped onto
  the typed `AppConfig` (`config`).
"""


from .config import (
    AppConfig,
    CONFIG_FILE_NAME,
    DEFAULTS,
    ENV_PREFIX,
    load_config,
    load_config_or_defaults,
)

__all__ = [
    "AppConfig",
    "CONFIG_FILE_NAME",
    "DEFAULTS",
    "ENV_PREFIX",
    "load_config",
    "load_config_or_defaults",
]

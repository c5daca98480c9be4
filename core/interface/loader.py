#!/usr/bin/env python3
# core/interface/loader.py
from __future__ import annotations

"""
Plugin loader.

Every public module of the plugin package (default: 'plugins') is imported
once at boot. A module contributes commands through a `register(registry)`
function and/or a `COMMANDS` iterable of CommandSpec / LegacyCommand objects.
"""

import importlib
import logging
import pkgutil
from pathlib import Path
from types import ModuleType
from typing import Iterable

from core.commands import CommandRegistry, CommandSpec, LegacyCommand

log = logging.getLogger("tokenline.loader")


def _register_from_module(registry: CommandRegistry, module: ModuleType) -> int:
    """Register whatever `module` exports. Returns the number of commands added."""
    before = len(registry)
    hook = getattr(module, "register", None)
    if callable(hook):
        hook(registry)
    exported = getattr(module, "COMMANDS", None)
    if isinstance(exported, Iterable):
        for item in exported:
            if isinstance(item, CommandSpec):
                registry.register(item.generators, item.num_fixed_tokens, item.callback)
            elif isinstance(item, LegacyCommand):
                registry.register_legacy(item.text, item.callback)
    return len(registry) - before


def _import(registry: CommandRegistry, module_name: str) -> int:
    try:
        module = importlib.import_module(module_name)
    except Exception:
        log.exception("Skipping plugin module %s", module_name)
        return 0
    added = _register_from_module(registry, module)
    log.debug("Loaded %s (%d commands)", module_name, added)
    return added


def load_commands(registry: CommandRegistry, commands_package: str = "plugins") -> int:
    """
    Register the commands of every module in `commands_package`, by name order.

      plugins/foo.py                -> plugins.foo
      plugins/bar/entrypoint.py     -> plugins.bar.entrypoint
      plugins/baz/__init__.py       -> plugins.baz (no entrypoint)

    Names starting with '_' are skipped. Returns the number of commands registered.
    """
    package = importlib.import_module(commands_package)
    search_paths = list(getattr(package, "__path__", []))
    if not search_paths:
        raise RuntimeError(
            f"Plugin package '{commands_package}' is a plain module; "
            "commands must live in modules inside a package directory.")

    registered = 0
    for search_path in search_paths:
        for info in sorted(pkgutil.iter_modules([str(search_path)]), key=lambda m: m.name):
            if info.name.startswith("_"):
                continue
            target = f"{commands_package}.{info.name}"
            if info.ispkg and (Path(search_path) / info.name / "entrypoint.py").exists():
                target += ".entrypoint"
            registered += _import(registry, target)
    return registered

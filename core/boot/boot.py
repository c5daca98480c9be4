#!/usr/bin/env python3
# core/boot/boot.py
from __future__ import annotations
"""
Boot sequence for the tokenline console.

Goals:
- Build the explicitly owned registry/console pair before interactive use.
- Register every plugin command during startup wiring.
- Maintain clear status output for each boot step.
"""

from dataclasses import dataclass
from typing import Any, Callable
import logging
import platform

from core.commands import CommandRegistry
from core.config import AppConfig, load_config_or_defaults
from core.interface import Console, load_commands, make_cli, run_repl
from core.ui import colorize, init_logger, print_line


@dataclass(slots=True)
class BootState:
    config: AppConfig
    logger: logging.Logger
    console: Console
    loaded_count: int


def _step(label: str, fn: Callable[[], Any], *, quiet: bool = False) -> Any:
    """Run a boot step with status output."""
    try:
        out = fn()
    except Exception as exc:
        print_line(
            colorize(f"[FAILED] {label} ({type(exc).__name__}: {exc})", "red")
        )
        raise
    if not quiet:
        print_line(colorize(f"[  OK  ] {label}", "green"))
    return out


def boot_sequence(config: AppConfig | None = None, *, quiet: bool = False) -> BootState:
    # ---------- config ----------
    if config is None:
        config = _step("Load configuration", load_config_or_defaults, quiet=quiet)

    # ---------- logging ----------
    logger = _step(
        "Initialize logger",
        lambda: init_logger(
            "tokenline",
            level=config.log_level or logging.INFO,
            logfile=str(config.log_file_path) if config.log_file_path else None,
        ),
        quiet=quiet,
    )
    logger.debug("Environment: %s %s / Python %s",
                 platform.system(), platform.release(), platform.python_version())

    # ---------- console ----------
    registry = CommandRegistry()
    console = _step(
        "Create console",
        lambda: Console(
            registry,
            height=config.console_height,
            banner=config.banner if config.show_banner else None,
        ),
        quiet=quiet,
    )

    # ---------- commands ----------
    loaded_count = _step(
        f"Load commands from '{config.plugin_package}'",
        lambda: load_commands(registry, config.plugin_package),
        quiet=quiet,
    )
    logger.debug("%d commands registered (%d from plugins)", len(registry), loaded_count)
    _step("Boot complete", lambda: None, quiet=quiet)

    return BootState(
        config=config,
        logger=logger,
        console=console,
        loaded_count=loaded_count,
    )


def main() -> int:
    """Boot, then run the interactive console until the user leaves."""
    state = boot_sequence()
    for line in reversed(state.console.visible_output()):
        print_line(colorize(line, "cyan"))
    cli = make_cli(
        state.console,
        prompt=state.config.prompt,
        enable_completion=state.config.enable_completion,
    )
    return run_repl(state.console, cli)

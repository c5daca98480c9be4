# plugins/system/entrypoint.py
from __future__ import annotations

import getpass
import platform
import time
from datetime import datetime
from importlib.metadata import PackageNotFoundError, version

from core.commands import CommandRegistry, LegacyCommand, aliases


def _format_duration(seconds: float) -> str:
    minutes, secs = divmod(int(seconds), 60)
    hours, minutes = divmod(minutes, 60)
    days, hours = divmod(hours, 24)
    clock = f"{hours:02d}:{minutes:02d}:{secs:02d}"
    return f"{days}d {clock}" if days else clock


def _leave(tokens: list[str]) -> str:
    raise SystemExit(0)


def _version(tokens: list[str]) -> str:
    try:
        return f"tokenline {version('tokenline')}"
    except PackageNotFoundError:
        return "tokenline (not installed)"


COMMANDS = [
    LegacyCommand("exit", _leave),
    LegacyCommand("quit", _leave),
    LegacyCommand("version", _version),
]


def register(registry: CommandRegistry) -> None:
    started = time.monotonic()

    # ---------- echo ----------
    @registry.command(aliases("echo", "say"))
    def echo(tokens: list[str]) -> str:
        return " ".join(tokens[1:])

    # ---------- whoami ----------
    @registry.command(aliases("whoami", "user"))
    def whoami(tokens: list[str]) -> str:
        return f"{getpass.getuser()}@{platform.node()}"

    # ---------- time ----------
    @registry.command(aliases("time", "date", "now"))
    def current_time(tokens: list[str]) -> str:
        return datetime.now().isoformat(sep=" ", timespec="seconds")

    # ---------- uptime ----------
    @registry.command(aliases("uptime"))
    def uptime(tokens: list[str]) -> str:
        return f"up {_format_duration(time.monotonic() - started)}"

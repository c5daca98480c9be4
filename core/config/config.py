#!/usr/bin/env python3
# core/config/config.py
from __future__ import annotations

"""
Configuration loader.

Precedence (low → high):
  1) Built-in defaults (`DEFAULTS`)
  2) config.toml in the working directory
  3) Environment variables TOKENLINE_<FIELD>, e.g. TOKENLINE_CONSOLE_HEIGHT=12

config.toml layout:

    [console]
    height = 12
    banner = "welcome"
    show_banner = true

    [prompt]
    text = "tl> "
    completion = true

    [plugins]
    package = "plugins"

    [logging]
    level = "DEBUG"
    file = "~/tokenline.log"
"""

from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any, Callable, Mapping
import os
import re
import tomllib

from core.commands import ConfigurationError
from core.ui import colorize, print_line

ENV_PREFIX = "TOKENLINE_"
CONFIG_FILE_NAME = "config.toml"


@dataclass(frozen=True)
class AppConfig:
    plugin_package: str = "plugins"
    log_file_path: Path | None = None
    log_level: str | None = None  # None -> INFO
    console_height: int = 10
    prompt: str = "> "
    banner: str = " ----------- tokenline console -----------"
    show_banner: bool = True
    enable_completion: bool = True  # live completion menu while typing

    # "section.key" entries of config.toml that map to no field
    extra: dict[str, Any] = field(default_factory=dict)


DEFAULTS = AppConfig()

# (section, key) in config.toml -> AppConfig field
TOML_KEYS: dict[tuple[str, str], str] = {
    ("console", "height"): "console_height",
    ("console", "banner"): "banner",
    ("console", "show_banner"): "show_banner",
    ("prompt", "text"): "prompt",
    ("prompt", "completion"): "enable_completion",
    ("plugins", "package"): "plugin_package",
    ("logging", "level"): "log_level",
    ("logging", "file"): "log_file_path",
}


# ---------- coercion ----------

_BOOL_WORDS = {
    "1": True, "true": True, "yes": True, "on": True,
    "0": False, "false": False, "no": False, "off": False,
}
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _as_bool(val: Any) -> bool:
    if isinstance(val, bool):
        return val
    try:
        return _BOOL_WORDS[str(val).strip().lower()]
    except KeyError:
        raise ConfigurationError(f"Expected boolean, got: {val!r}") from None


def _as_height(val: Any) -> int:
    if isinstance(val, bool):
        raise ConfigurationError(f"Console height must be an integer, got: {val!r}")
    try:
        height = val if isinstance(val, int) else int(str(val).strip())
    except ValueError as exc:
        raise ConfigurationError(f"Console height must be an integer, got: {val!r}") from exc
    if height < 1:
        raise ConfigurationError(f"Console height must be >= 1, got: {height}")
    return height


def _as_opt_str(val: Any) -> str | None:
    return None if val is None or str(val).strip().lower() in {"", "none"} else str(val)


def _as_log_level(val: Any) -> str | None:
    level = _as_opt_str(val)
    if level is None:
        return None
    if level.upper() not in _LOG_LEVELS:
        raise ConfigurationError(f"Log level must be one of {list(_LOG_LEVELS)}, got {level!r}")
    return level.upper()


def _as_opt_path(val: Any) -> Path | None:
    path = _as_opt_str(val)
    if path is None:
        return None
    return Path(os.path.expandvars(os.path.expanduser(path))).resolve()


def _as_module_name(val: Any) -> str:
    name = str(val).strip()
    if not re.fullmatch(r"[A-Za-z_]\w*(\.[A-Za-z_]\w*)*", name):
        raise ConfigurationError(f"Plugin package must be a dotted module name, got {name!r}")
    return name


def _as_prompt(val: Any) -> str:
    return _as_opt_str(val) or DEFAULTS.prompt


_COERCE: dict[str, Callable[[Any], Any]] = {
    "plugin_package": _as_module_name,
    "log_file_path": _as_opt_path,
    "log_level": _as_log_level,
    "console_height": _as_height,
    "prompt": _as_prompt,
    "banner": lambda val: "" if val is None else str(val),
    "show_banner": _as_bool,
    "enable_completion": _as_bool,
}


# ---------- sources ----------

def _read_toml(path: Path) -> tuple[dict[str, Any], dict[str, Any]]:
    """Return (field values, unrecognized "section.key" entries) from config.toml."""
    try:
        with path.open("rb") as fh:
            document = tomllib.load(fh)
    except FileNotFoundError:
        return {}, {}
    except tomllib.TOMLDecodeError as exc:
        raise ConfigurationError(f"{path.name}: {exc}") from exc

    values: dict[str, Any] = {}
    extra: dict[str, Any] = {}
    for section, table in document.items():
        if not isinstance(table, dict):
            extra[section] = table
            continue
        for key, value in table.items():
            name = TOML_KEYS.get((section, key))
            if name is None:
                extra[f"{section}.{key}"] = value
            else:
                values[name] = value
    return values, extra


def _read_environ(environ: Mapping[str, str]) -> dict[str, str]:
    values: dict[str, str] = {}
    for f in fields(AppConfig):
        key = ENV_PREFIX + f.name.upper()
        if f.name in _COERCE and key in environ:
            values[f.name] = environ[key]
    return values


# ---------- public API ----------

def load_config(
    base: Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> AppConfig:
    """
    Build the configuration from defaults, `<base>/config.toml` and the environment.
    Raises ConfigurationError on an unreadable file or an invalid value.
    """
    values, extra = _read_toml((base or Path.cwd()) / CONFIG_FILE_NAME)
    values.update(_read_environ(os.environ if environ is None else environ))
    coerced = {name: _COERCE[name](value) for name, value in values.items()}
    return replace(DEFAULTS, extra=extra, **coerced)


def load_config_or_defaults(base: Path | None = None) -> AppConfig:
    """Like load_config, but warns and falls back to DEFAULTS on invalid input."""
    try:
        return load_config(base)
    except ConfigurationError as exc:
        print_line(colorize(f"[ WARN ] Invalid configuration: {exc}", "yellow"))
        return DEFAULTS

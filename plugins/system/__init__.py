# plugins/system/__init__.py
from __future__ import annotations

"""
System command group:
- echo, whoami, time, uptime
- exit / quit / version (literal commands)
"""

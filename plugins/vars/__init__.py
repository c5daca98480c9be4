# plugins/vars/__init__.py
from __future__ import annotations

"""
Variable and arithmetic commands.

Variable names are offered through a live candidate provider, so completion
and exact resolution always see the current set of variables.
"""

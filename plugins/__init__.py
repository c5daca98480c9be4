# plugins/__init__.py
"""Command sets loaded at boot by core.interface.loader."""

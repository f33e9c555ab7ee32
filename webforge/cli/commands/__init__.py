"""CLI command modules."""

from . import build_cmd, config_cmd, presets_cmd

__all__ = ["build_cmd", "config_cmd", "presets_cmd"]

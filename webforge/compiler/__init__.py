"""Userspace configuration: loading declarative files and resolving overrides."""

from webforge.compiler.config_loader import ConfigLoader, load_project_config
from webforge.compiler.resolver import CliOverrides, resolve_project_config

__all__ = ["CliOverrides", "ConfigLoader", "load_project_config", "resolve_project_config"]

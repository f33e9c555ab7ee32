"""Declarative project configuration loader.

Parses a project file into a :class:`~webforge.kernel.domain.ProjectConfig`.
Discovery order when no explicit path is given:

1. ``WEBFORGE_CONFIG_PATH`` environment variable
2. ``webforge.yaml`` / ``webforge.yml`` / ``polymer.json`` in the working
   directory
3. ``pyproject.toml`` with a ``[tool.webforge]`` table

String values may reference environment variables as ``${VAR}`` or
``${VAR:default}``.

This is part of the compiler (userspace); the kernel never touches config
file formats directly.
"""

from __future__ import annotations

import json
import os
import re
import tomllib
from pathlib import Path
from typing import Any

import pydantic
import yaml

from webforge.kernel.domain.project_config import ProjectConfig
from webforge.kernel.exceptions import ConfigurationError
from webforge.kernel.logging import get_logger

# Type alias for configuration data that can be recursively substituted
ConfigData = str | dict[str, "ConfigData"] | list["ConfigData"] | int | float | bool | None

CONFIG_PATH_ENV = "WEBFORGE_CONFIG_PATH"
DEFAULT_CONFIG_FILES: tuple[str, ...] = ("webforge.yaml", "webforge.yml", "polymer.json")

logger = get_logger(__name__)


class ConfigLoader:
    """Loads and validates declarative project configuration files."""

    ENV_VAR_PATTERN = re.compile(r"\$\{([A-Z_][A-Z0-9_]*)(?::([^}]*))?\}")

    def __init__(self, cwd: Path | None = None) -> None:
        self._cwd = cwd or Path.cwd()

    def load(self, path: str | Path | None = None) -> ProjectConfig:
        """Find, read and validate the project configuration.

        Parameters
        ----------
        path : str | Path | None
            Explicit config file. If None, uses the discovery order.

        Returns
        -------
        ProjectConfig
            Configuration with ``root`` resolved to an absolute path. Its
            targets are the declared builds, before any command-line
            overrides or preset expansion.

        Raises
        ------
        ConfigurationError
            If no file is found, or the file is unreadable or invalid
        """
        config_path = self.find_config_file(path)
        logger.debug("Loading configuration from {}", config_path)
        data = self._substitute_env_vars(self._read(config_path))
        return self.parse(data, base_dir=config_path.parent)

    def parse(self, data: Any, base_dir: Path) -> ProjectConfig:
        """Validate raw configuration data; relative ``root`` is taken from ``base_dir``."""
        if not isinstance(data, dict):
            raise ConfigurationError(
                "config", f"expected a mapping at the top level, got {type(data).__name__}"
            )

        root = Path(data.get("root") or ".")
        data = {**data, "root": (base_dir / root).resolve()}
        try:
            return ProjectConfig.model_validate(data)
        except pydantic.ValidationError as e:
            raise ConfigurationError("config", str(e)) from e

    def find_config_file(self, path: str | Path | None = None) -> Path:
        """Resolve which configuration file to load."""
        if path is not None:
            explicit = Path(path)
            if not explicit.is_file():
                raise ConfigurationError(str(explicit), "config file not found")
            return explicit

        env_path = os.getenv(CONFIG_PATH_ENV)
        if env_path:
            return self.find_config_file(env_path)

        for name in DEFAULT_CONFIG_FILES:
            candidate = self._cwd / name
            if candidate.is_file():
                return candidate

        pyproject = self._cwd / "pyproject.toml"
        if pyproject.is_file():
            return pyproject

        raise ConfigurationError(
            "config",
            f"no config file found in {self._cwd} (looked for {', '.join(DEFAULT_CONFIG_FILES)})",
        )

    def _read(self, config_path: Path) -> Any:
        try:
            text = config_path.read_text(encoding="utf-8")
        except OSError as e:
            raise ConfigurationError(str(config_path), f"cannot read file: {e}") from e

        try:
            if config_path.suffix == ".json":
                return json.loads(text)
            if config_path.suffix == ".toml":
                return self._tool_table(tomllib.loads(text), config_path)
            return yaml.safe_load(text)
        except (json.JSONDecodeError, tomllib.TOMLDecodeError, yaml.YAMLError) as e:
            raise ConfigurationError(str(config_path), f"parse error: {e}") from e

    def _tool_table(self, data: dict[str, Any], config_path: Path) -> dict[str, Any]:
        table = data.get("tool", {}).get("webforge")
        if table is None:
            raise ConfigurationError(str(config_path), "no [tool.webforge] table")
        return table

    def _substitute_env_vars(self, data: ConfigData) -> ConfigData:
        """Recursively replace ``${VAR}`` references with environment values.

        Unset variables without a default are left as written.
        """
        if isinstance(data, str):

            def replace(match: re.Match[str]) -> str:
                value = os.getenv(match.group(1))
                if value is not None:
                    return value
                default = match.group(2)
                return default if default is not None else match.group(0)

            return self.ENV_VAR_PATTERN.sub(replace, data)
        if isinstance(data, dict):
            return {key: self._substitute_env_vars(value) for key, value in data.items()}
        if isinstance(data, list):
            return [self._substitute_env_vars(item) for item in data]
        return data


def load_project_config(path: str | Path | None = None) -> ProjectConfig:
    """Load the declarative project configuration (convenience wrapper)."""
    return ConfigLoader().load(path)

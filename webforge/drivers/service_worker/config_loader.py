"""Service-worker configuration file loader.

Accepted formats:

- ``.json``
- ``.yaml`` / ``.yml``
- ``.js`` in the sw-precache style ``module.exports = {...};``. The object
  literal is read as a YAML flow mapping, which covers unquoted keys and
  single-quoted strings; ``//`` line comments are stripped first.
"""

from __future__ import annotations

import json
import re
from pathlib import Path
from typing import Any

import aiofiles
import aiofiles.os
import yaml

from webforge.kernel.exceptions import ConfigLoadError
from webforge.kernel.logging import get_logger

logger = get_logger(__name__)

_MODULE_EXPORTS = re.compile(r"module\.exports\s*=\s*(\{.*\})\s*;?\s*$", re.DOTALL)
_LINE_COMMENT = re.compile(r"^\s*//.*$", re.MULTILINE)


class FileServiceWorkerConfigLoader:
    """Loads a service-worker configuration mapping from disk."""

    async def aload(self, path: Path) -> dict[str, Any] | None:
        if not await aiofiles.os.path.isfile(path):
            raise ConfigLoadError(path, "file not found")

        try:
            async with aiofiles.open(path, encoding="utf-8") as f:
                text = await f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigLoadError(path, str(e)) from e

        logger.debug("Loading service worker config from {}", path)
        config = self._parse(path, text)
        if config is not None and not isinstance(config, dict):
            raise ConfigLoadError(path, f"expected a mapping, got {type(config).__name__}")
        return config

    def _parse(self, path: Path, text: str) -> Any:
        try:
            if path.suffix == ".json":
                return json.loads(text) if text.strip() else None
            if path.suffix in (".yaml", ".yml"):
                return yaml.safe_load(text)
            if path.suffix == ".js":
                return self._parse_module_exports(path, text)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise ConfigLoadError(path, f"parse error: {e}") from e
        raise ConfigLoadError(path, f"unsupported config format '{path.suffix}'")

    def _parse_module_exports(self, path: Path, text: str) -> Any:
        source = _LINE_COMMENT.sub("", text).strip()
        if not source:
            return None
        match = _MODULE_EXPORTS.search(source)
        if match is None:
            raise ConfigLoadError(path, "expected 'module.exports = {...};'")
        return yaml.safe_load(match.group(1))

"""Configuration data models for webforge."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal


@dataclass(frozen=True, slots=True)
class LoggingConfig:
    """Logging configuration for webforge.

    Attributes
    ----------
    level : str, default="INFO"
        Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    format : str, default="console"
        Output format (console, json, structured, rich)
    output_file : str | None, default=None
        Optional file path to additionally write JSON records to
    include_timestamp : bool, default=False
        Include timestamp in log output

    Examples
    --------
    YAML configuration:

    ```yaml
    logging:
      level: DEBUG
      format: rich
    ```

    Environment variable overrides:

    ```bash
    export WEBFORGE_LOG_LEVEL=DEBUG
    export WEBFORGE_LOG_FORMAT=json
    ```
    """

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    format: Literal["console", "json", "structured", "rich"] = "console"
    output_file: str | None = None
    include_timestamp: bool = False

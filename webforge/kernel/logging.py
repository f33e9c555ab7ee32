"""Centralized logging configuration for webforge using Loguru.

Provides consistent logging across the build engine with support for:
- Multiple output formats (console, JSON, structured, rich)
- Environment-based configuration
- Idempotent configuration

Examples
--------
Basic usage:

>>> from webforge.kernel.logging import get_logger
>>> logger = get_logger(__name__)
>>> logger.info("Clearing build/ directory...")

Configure logging globally::

    from webforge.kernel.logging import configure_logging
    configure_logging(level="DEBUG", format="rich")
"""

import os
import sys
from contextlib import suppress
from functools import lru_cache
from pathlib import Path
from typing import TYPE_CHECKING, Literal

if TYPE_CHECKING:
    from loguru import Logger

from loguru import logger
from rich.logging import RichHandler

LogLevel = Literal["TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
LogFormat = Literal["console", "json", "structured", "rich"]

_CURRENT_CONFIG: dict | None = None
_HANDLER_IDS: list[int] = []


def configure_logging(
    level: LogLevel = "INFO",
    format: LogFormat = "console",
    output_file: str | Path | None = None,
    use_color: bool = True,
    include_timestamp: bool = False,
    force_reconfigure: bool = False,
) -> None:
    """Configure global logging for webforge.

    Calling it again with the same settings is a no-op; handlers added by
    previous calls are replaced, handlers added by others are left alone.

    Parameters
    ----------
    level : LogLevel, default="INFO"
        Minimum log level to output
    format : LogFormat, default="console"
        Output format:
        - "console": plain progress lines, suited to build output
        - "json": one JSON record per line
        - "structured": colored, with module and line information
        - "rich": Rich console handler
    output_file : str | Path | None, default=None
        Optional file to additionally write JSON records to
    use_color : bool, default=True
        Use ANSI color codes (auto-disabled for non-TTY)
    include_timestamp : bool, default=False
        Include timestamp in console and structured output
    force_reconfigure : bool, default=False
        Force reconfiguration even if already configured with same settings
    """
    global _CURRENT_CONFIG

    current_config = {
        "level": level,
        "format": format,
        "output_file": str(output_file) if output_file else None,
        "use_color": use_color,
        "include_timestamp": include_timestamp,
    }

    if not force_reconfigure and current_config == _CURRENT_CONFIG:
        return

    # Remove only our previously added handlers, pytest and others keep theirs
    for handler_id in _HANDLER_IDS:
        with suppress(ValueError):
            logger.remove(handler_id)
    _HANDLER_IDS.clear()

    if format == "rich":
        rich_handler = RichHandler(
            rich_tracebacks=True,
            markup=False,
            show_time=include_timestamp,
            show_level=True,
            show_path=False,
        )
        handler_id = logger.add(sink=rich_handler, level=level, format="{message}")
        _HANDLER_IDS.append(handler_id)

    elif format == "json":
        handler_id = logger.add(sink=sys.stderr, level=level, serialize=True)
        _HANDLER_IDS.append(handler_id)

    elif format == "structured":
        timestamp_fmt = "<green>{time:YYYY-MM-DD HH:mm:ss}</green> " if include_timestamp else ""
        colorize = use_color and sys.stderr.isatty()
        color_level = "<level>{level: <8}</level>" if colorize else "{level: <8}"
        structured_format = (
            f"{timestamp_fmt}[{color_level}]"
            "<cyan>{name}:{function}:{line}</cyan> | <level>{message}</level>"
        )
        handler_id = logger.add(
            sink=sys.stderr,
            level=level,
            format=structured_format,
            colorize=colorize,
        )
        _HANDLER_IDS.append(handler_id)

    else:  # console
        timestamp_fmt = "{time:HH:mm:ss} " if include_timestamp else ""
        handler_id = logger.add(
            sink=sys.stderr,
            level=level,
            format=f"{timestamp_fmt}{{message}}",
            colorize=False,
        )
        _HANDLER_IDS.append(handler_id)

    if output_file:
        output_path = Path(output_file)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        handler_id = logger.add(sink=output_path, level=level, serialize=True)
        _HANDLER_IDS.append(handler_id)

    _CURRENT_CONFIG = current_config


@lru_cache(maxsize=256)
def get_logger(name: str) -> "Logger":
    """Get a logger bound with the given module name.

    If configure_logging() hasn't been called yet, logging is initialized
    from ``WEBFORGE_LOG_LEVEL`` / ``WEBFORGE_LOG_FORMAT``.
    """
    _ensure_configured()
    return logger.bind(module=name)


def _ensure_configured() -> None:
    """Ensure logging has at least basic configuration (lazy initialization)."""
    if _CURRENT_CONFIG is None:
        level = os.getenv("WEBFORGE_LOG_LEVEL", "INFO").upper()
        format_type = os.getenv("WEBFORGE_LOG_FORMAT", "console").lower()
        configure_logging(level=level, format=format_type)  # type: ignore[arg-type]

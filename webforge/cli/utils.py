"""CLI helper utilities for webforge commands."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any, Protocol

import typer
from rich.console import Console

from webforge.compiler import CliOverrides, ConfigLoader, resolve_project_config
from webforge.kernel.logging import configure_logging

if TYPE_CHECKING:
    from webforge.kernel.domain.project_config import ProjectConfig


class ContextProtocol(Protocol):
    """Protocol for common interface between Click and Typer contexts."""

    @property
    def obj(self) -> dict[str, Any] | None: ...


console = Console()

# Commands taking --presets leave the names after the first one in ctx.args
PRESET_LIST_SETTINGS: dict[str, Any] = {"allow_extra_args": True}


def collect_presets(ctx: typer.Context, presets: list[str] | None) -> tuple[str, ...] | None:
    """Merge ``--presets a b`` and ``--presets a --presets b`` into one list.

    The preset commands take no positional arguments, so any extra argument
    is a preset name that followed a ``--presets`` option.

    Raises
    ------
    typer.BadParameter
        If extra arguments were given without any ``--presets`` option
    """
    if ctx.args and not presets:
        raise typer.BadParameter(
            f"unexpected arguments: {' '.join(ctx.args)}", param_hint="'--presets'"
        )
    names = [*(presets or []), *ctx.args]
    return tuple(names) if names else None


def load_resolved_project(
    config_path: Path | None, overrides: CliOverrides | None = None
) -> ProjectConfig:
    """Load the project file and apply command-line overrides.

    Raises
    ------
    ConfigurationError
        If the file cannot be found or parsed, or no targets resolve
    """
    declared = ConfigLoader().load(config_path)
    return resolve_project_config(declared, overrides)


def apply_project_logging(ctx: ContextProtocol | None, project: ProjectConfig) -> None:
    """Reconfigure logging from the project file.

    A level given on the command line (``--log-level``, ``--verbose``,
    ``--quiet``) wins over the file's ``logging.level``.
    """
    settings = project.logging
    cli_level = ctx.obj.get("log_level") if ctx is not None and ctx.obj else None
    configure_logging(
        level=cli_level or settings.level,
        format=settings.format,
        output_file=settings.output_file,
        include_timestamp=settings.include_timestamp,
    )

"""Configuration commands for webforge CLI."""

from pathlib import Path
from typing import Annotated

import typer
import yaml
from rich.console import Console
from rich.markup import escape

from webforge.cli.utils import collect_presets, load_resolved_project
from webforge.compiler import CliOverrides
from webforge.kernel.exceptions import WebforgeError

console = Console()


def show_config(
    ctx: typer.Context,
    config: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Project config file (default: discovered)"),
    ] = None,
    presets: Annotated[
        list[str] | None,
        typer.Option("--presets", help="Resolve as if building only these presets"),
    ] = None,
) -> None:
    """Print the configuration a build would use, with presets expanded."""
    overrides = CliOverrides(presets=collect_presets(ctx, presets))
    try:
        project = load_resolved_project(config, overrides)
    except WebforgeError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1) from e

    data = project.model_dump(mode="json", by_alias=True, exclude_none=True)
    typer.echo(yaml.safe_dump(data, sort_keys=False))

"""Build command for webforge CLI."""

from __future__ import annotations

import asyncio
from enum import StrEnum
from pathlib import Path
from typing import TYPE_CHECKING, Annotated

import typer
from rich.console import Console
from rich.markup import escape

from webforge.cli.utils import apply_project_logging, collect_presets, load_resolved_project
from webforge.compiler import CliOverrides
from webforge.drivers import (
    FileServiceWorkerConfigLoader,
    LocalAssetSource,
    LocalFilesystem,
    PrecacheServiceWorkerGenerator,
    RegexHtmlSplitter,
)
from webforge.kernel.exceptions import WebforgeError
from webforge.kernel.orchestration import BuildCoordinator, PostBuildStepRunner, TargetExecutor
from webforge.stdlib.adapters import CommandToolkit, MockToolkit

if TYPE_CHECKING:
    from webforge.kernel.domain.pipeline_run import BuildReport
    from webforge.kernel.domain.project_config import ProjectConfig
    from webforge.kernel.ports.toolkit import BuildToolkit

console = Console()


class ToolkitChoice(StrEnum):
    """Available transform toolkits."""

    COMMAND = "command"
    MOCK = "mock"


def build(
    ctx: typer.Context,
    presets: Annotated[
        list[str] | None,
        typer.Option("--presets", help="Build only these presets (one or more names)"),
    ] = None,
    add_service_worker: Annotated[
        bool, typer.Option("--add-service-worker", help="Generate a service worker")
    ] = False,
    bundle: Annotated[bool, typer.Option("--bundle", help="Bundle dependencies")] = False,
    css_minify: Annotated[bool, typer.Option("--css-minify", help="Minify CSS")] = False,
    html_minify: Annotated[bool, typer.Option("--html-minify", help="Minify HTML")] = False,
    js_compile: Annotated[
        bool, typer.Option("--js-compile", help="Compile JavaScript to ES5")
    ] = False,
    js_minify: Annotated[bool, typer.Option("--js-minify", help="Minify JavaScript")] = False,
    insert_prefetch_links: Annotated[
        bool, typer.Option("--insert-prefetch-links", help="Add prefetch links for fragments")
    ] = False,
    entrypoint: Annotated[
        str | None, typer.Option("--entrypoint", help="Entry document path")
    ] = None,
    shell: Annotated[str | None, typer.Option("--shell", help="App shell document path")] = None,
    fragment: Annotated[
        list[str] | None,
        typer.Option("--fragment", help="Extra fragment, appended to the configured ones"),
    ] = None,
    config: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Project config file (default: discovered)"),
    ] = None,
    toolkit: Annotated[
        ToolkitChoice,
        typer.Option("--toolkit", help="Transform toolkit to run stages with"),
    ] = ToolkitChoice.COMMAND,
    build_dir: Annotated[
        Path,
        typer.Option("--build-dir", help="Output directory, relative to the project root"),
    ] = Path("build"),
) -> None:
    """Build every resolved target into its own subdirectory of the build directory.

    Giving any stage flag replaces the configured builds with a single custom
    build. ``--presets`` selects configured or built-in presets instead.
    """
    overrides = CliOverrides(
        presets=collect_presets(ctx, presets),
        add_service_worker=add_service_worker or None,
        bundle=bundle or None,
        css_minify=css_minify or None,
        html_minify=html_minify or None,
        js_compile=js_compile or None,
        js_minify=js_minify or None,
        insert_prefetch_links=insert_prefetch_links or None,
        entrypoint=entrypoint,
        shell=shell,
        fragment=tuple(fragment) if fragment else None,
    )

    try:
        project = load_resolved_project(config, overrides)
        apply_project_logging(ctx, project)
        coordinator = create_coordinator(project, _create_toolkit(toolkit, project), build_dir)
        report = asyncio.run(coordinator.arun())
    except WebforgeError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1) from e

    _print_summary(report)


def create_coordinator(
    project: ProjectConfig, toolkit: BuildToolkit, build_dir: Path = Path("build")
) -> BuildCoordinator:
    """Wire the local drivers into a coordinator for ``project``."""
    filesystem = LocalFilesystem()
    executor = TargetExecutor(
        project, LocalAssetSource(project), toolkit, filesystem, RegexHtmlSplitter
    )
    post_build = PostBuildStepRunner(
        project, FileServiceWorkerConfigLoader(), PrecacheServiceWorkerGenerator()
    )
    return BuildCoordinator(
        project, executor, post_build, filesystem, build_root=project.root / build_dir
    )


def _create_toolkit(choice: ToolkitChoice, project: ProjectConfig) -> BuildToolkit:
    if choice == ToolkitChoice.MOCK:
        return MockToolkit()
    return CommandToolkit(project.tools)


def _print_summary(report: BuildReport) -> None:
    for run in report.succeeded:
        console.print(f"[green]✓[/green] {run.target_name} -> {run.output_dir}")
    for run in report.failed:
        console.print(f"[red]✗[/red] {run.target_name}: {escape(run.error or '')}")

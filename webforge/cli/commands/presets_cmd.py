"""Presets command for webforge CLI."""

import typer
from rich.console import Console
from rich.table import Table

from webforge.kernel.domain import PRESETS, TargetSpec, expand_preset
from webforge.kernel.domain.stage import STRUCTURAL_STAGES
from webforge.kernel.orchestration import compose_pipeline

app = typer.Typer()
console = Console()


def _describe(target: TargetSpec) -> str:
    steps = [
        str(stage.kind)
        for stage in compose_pipeline(target)
        if stage.kind not in STRUCTURAL_STAGES
    ]
    if target.add_service_worker:
        steps.append("service-worker")
    return ", ".join(steps)


@app.callback(invoke_without_command=True)
def list_presets(ctx: typer.Context) -> None:
    """List the built-in presets and the stages each one runs."""
    if ctx.invoked_subcommand is not None:
        return

    table = Table(title="Built-in presets")
    table.add_column("Preset", style="cyan", no_wrap=True)
    table.add_column("Bundled", justify="center")
    table.add_column("Stages")

    for name in PRESETS:
        target = expand_preset(TargetSpec(preset=name))
        bundled = "[green]✓[/green]" if target.is_bundled else "[dim]-[/dim]"
        table.add_row(name, bundled, _describe(target))

    console.print(table)
    console.print("\nSelect with [bold]webforge build --presets <name>[/bold]")

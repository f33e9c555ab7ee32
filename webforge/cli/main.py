"""webforge CLI - Main entrypoint."""

import typer
from rich.console import Console

from webforge import __version__
from webforge.cli.commands import build_cmd, config_cmd, presets_cmd
from webforge.cli.utils import PRESET_LIST_SETTINGS
from webforge.kernel.logging import configure_logging

app = typer.Typer(
    name="webforge",
    help="webforge - Configuration-driven multi-target web asset builds.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    pretty_exceptions_enable=False,
)

console = Console()

app.command("build", context_settings=PRESET_LIST_SETTINGS)(build_cmd.build)
app.add_typer(presets_cmd.app, name="presets", help="List the built-in presets")
app.command("config", context_settings=PRESET_LIST_SETTINGS)(config_cmd.show_config)

_LOG_LEVELS = {
    "trace": "TRACE",
    "debug": "DEBUG",
    "info": "INFO",
    "warn": "WARNING",
    "warning": "WARNING",
    "error": "ERROR",
    "critical": "CRITICAL",
}


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"[bold blue]webforge[/bold blue] version [green]{__version__}[/green]")
        raise typer.Exit()


@app.callback()
def callback(
    ctx: typer.Context,
    *,
    quiet: bool = typer.Option(False, "-q", "--quiet", help="Only log errors"),
    verbose: bool = typer.Option(False, "-V", "--verbose", help="Enable debug logging"),
    log_level: str | None = typer.Option(
        None, "--log-level", help="Log level: debug|info|warn|error"
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show version and exit",
        callback=_version_callback,
        is_eager=True,
    ),
) -> None:
    """webforge CLI - build web assets for several targets at once.

    Global flags are parsed here and stored on `ctx.obj` for subcommands.
    """
    if ctx.obj is None:
        ctx.obj = {}

    effective_level = None
    if quiet:
        effective_level = "ERROR"
    elif verbose:
        effective_level = "DEBUG"
    elif log_level is not None:
        effective_level = _LOG_LEVELS.get(log_level.lower())
        if effective_level is None:
            raise typer.BadParameter(
                f"unknown log level '{log_level}'", param_hint="--log-level"
            )

    ctx.obj.update({
        "quiet": quiet,
        "verbose": verbose,
        "log_level": effective_level,
        "version": __version__,
    })

    if effective_level is not None:
        configure_logging(level=effective_level)


def main() -> None:
    """Main CLI entrypoint."""
    app()


if __name__ == "__main__":
    main()

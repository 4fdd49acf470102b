"""Command line interface for framediag."""

from __future__ import annotations

import dataclasses
import json

import typer
from rich.console import Console
from rich.table import Table

from framediag import settings
from framediag.app import FrameDiagApp, format_kb
from framediag.config import LogLevel, load_config
from framediag.diagnostics import get_resource_stats
from framediag.environ import ENV_PREFIX, read_env
from framediag.exceptions import FrameDiagError
from framediag.log import setup_logging

app = typer.Typer(
    add_completion=False,
    help="framediag: memory diagnostics for the ImmichFrame kiosk on Linux.",
)
console = Console()


@app.callback()
def main(
    log_level: LogLevel | None = typer.Option(
        None, "--log-level", case_sensitive=False, help="Override IMMICHFRAME_LOG_LEVEL."
    ),
) -> None:
    config = load_config()
    setup_logging(log_level.value if log_level else config.log_level, config.log_file)


@app.command()
def stats(as_json: bool = typer.Option(False, "--json", help="Print JSON instead of a table.")) -> None:
    """Print a one-off resource snapshot."""
    snapshot = get_resource_stats()
    if snapshot is None:
        console.print("[red]Resource stats are only available on Linux.[/red]")
        raise typer.Exit(code=1)

    if as_json:
        typer.echo(json.dumps(snapshot.to_dict(), indent=2))
        return

    t = Table(title="Resource snapshot")
    t.add_column("Metric")
    t.add_column("kB", justify="right")
    t.add_column("Human", justify="right")
    for name, value in snapshot.to_dict().items():
        if name == "webkit_process_count":
            t.add_row(name, "", "-" if value is None else str(value))
        else:
            t.add_row(name, "-" if value is None else str(value), format_kb(value))
    console.print(t)


@app.command()
def overlay(
    force: bool = typer.Option(False, "--force", help="Show stats even without IMMICHFRAME_DEBUG_OVERLAY."),
) -> None:
    """Launch the live debug overlay."""
    config = load_config()
    if force:
        config = dataclasses.replace(config, debug_overlay=True)
    FrameDiagApp(config).run()


@app.command()
def url() -> None:
    """Print the frame URL, falling back to the default."""
    typer.echo(settings.resolve_url())


@app.command("set-url")
def set_url(value: str = typer.Argument(..., help="URL to show in the frame.")) -> None:
    """Save the frame URL."""
    try:
        settings.save_url(value)
    except FrameDiagError as e:
        console.print(f"[red]Error saving URL:[/red] {e}")
        raise typer.Exit(code=1)
    console.print("URL saved successfully.")


@app.command()
def env(suffix: str = typer.Argument(..., help=f"Variable name without the {ENV_PREFIX} prefix.")) -> None:
    """Print an IMMICHFRAME_* variable."""
    value = read_env(suffix)
    if value is None:
        raise typer.Exit(code=1)
    typer.echo(value)

"""Command-line entry points for boringcache-action.

Each phase command reads its inputs from the Actions runner environment
(``INPUT_*``, ``STATE_*``, ``GITHUB_*``) and exits non-zero when the run
failed.
"""

from __future__ import annotations

import functools
import sys
from collections.abc import Callable
from typing import Any

import typer
from rich.console import Console
from rich.table import Table

from boringcache_action import __version__
from boringcache_action.config import ActionSettings, resolve_workspace
from boringcache_action.entries import parse_entries
from boringcache_action.exceptions import InvalidEntryFormatError
from boringcache_action.host.actions import Host
from boringcache_action.host.commands import configure_logging
from boringcache_action.phases import Operation, run_phase, run_restore, run_save, run_save_only
from boringcache_action.platform import platform_suffix
from boringcache_action.runner import BoringCacheCLI

app = typer.Typer(
    name="boringcache-action",
    help="Restore and save CI caches through the boringcache CLI.",
    add_completion=False,
)
console = Console()


@app.callback()
def main(
    version: bool = typer.Option(False, "--version", "-v", help="Show version"),
) -> None:
    if version:
        console.print(f"boringcache-action {__version__}")
        raise typer.Exit()


def _execute(operation: Operation, phase: Callable[..., Any]) -> None:
    configure_logging()
    settings = ActionSettings()
    host = Host()
    cli = BoringCacheCLI.from_settings(settings, mask=host.set_secret)
    run_phase(operation, phase, host, cli, settings)
    if host.failed:
        raise typer.Exit(code=host.exit_code)


@app.command()
def restore() -> None:
    """Restore caches and record entries for the post-job save."""
    _execute("restore", run_restore)


@app.command("restore-only")
def restore_only() -> None:
    """Restore caches without scheduling a post-job save."""
    _execute("restore", functools.partial(run_restore, save_state=False))


@app.command()
def save() -> None:
    """Post-job save using the entries recorded during restore."""
    _execute("save", run_save)


@app.command("save-only")
def save_only() -> None:
    """Save caches from this step's own inputs."""
    _execute("save", run_save_only)


@app.command("parse-entries")
def parse_entries_command(
    spec: str = typer.Argument(..., help="Entries, e.g. 'deps:node_modules,build:a=>b'"),
    resolve: bool = typer.Option(True, "--resolve/--no-resolve", help="Resolve paths"),
) -> None:
    """Show how an entries string is parsed."""
    try:
        entries = parse_entries(spec, resolve_paths=resolve)
    except InvalidEntryFormatError as exc:
        console.print(f"[red]Error: {exc}[/red]")
        raise typer.Exit(code=1) from None

    if not entries:
        console.print("[yellow]No entries[/yellow]")
        return

    table = Table(title="Cache entries")
    table.add_column("Tag", style="cyan")
    table.add_column("Restore path", style="green")
    table.add_column("Save path", style="green")
    for entry in entries:
        table.add_row(entry.tag, entry.restore_path, entry.save_path)
    console.print(table)


@app.command()
def info(
    no_platform: bool = typer.Option(False, "--no-platform", help="Disable platform suffix"),
    cross_os: bool = typer.Option(False, "--cross-os", help="Cross-OS archive"),
) -> None:
    """Show the resolved workspace, platform suffix and CLI settings."""
    settings = ActionSettings()
    suffix = platform_suffix(no_platform, cross_os)

    table = Table(title="boringcache-action info")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")
    table.add_row("Version", __version__)
    table.add_row("Python", sys.version.split()[0])
    table.add_row("Workspace", resolve_workspace(settings))
    table.add_row("Platform suffix", suffix or "(none)")
    table.add_row("CLI executable", settings.boringcache_cli)
    table.add_row("API token", "set" if settings.api_token else "[dim]unset[/dim]")
    console.print(table)


if __name__ == "__main__":
    app()

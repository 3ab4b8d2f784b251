"""Prune command: periodlog prune."""

from __future__ import annotations

import click

from periodlog.cli.options import log_directory, resolve_config
from periodlog.core.retention import prune as prune_files
from periodlog.output.console import console


@click.command()
@click.pass_context
def prune(ctx: click.Context) -> None:
    """Delete the oldest log files beyond max_count now."""
    config = resolve_config(ctx)
    if config.max_count <= 0:
        console.print("[dim]max_count is 0, retention disabled.[/dim]")
        return

    removed = prune_files(log_directory(config), config.base_name, config.max_count)
    console.print(f"[status.success]Removed {removed} file(s)[/status.success]")

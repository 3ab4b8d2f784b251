"""Status command: periodlog status."""

from __future__ import annotations

from datetime import datetime

import click
from rich.table import Table

from periodlog.cli.options import log_directory, resolve_config
from periodlog.core.retention import LOG_EXTENSION, list_log_files
from periodlog.core.rollover import compute_boundary
from periodlog.output.console import console


@click.command()
@click.pass_context
def status(ctx: click.Context) -> None:
    """Show the active log file, when it rolls over and the files on disk."""
    config = resolve_config(ctx)
    now_local = datetime.now()
    boundary = compute_boundary(config.rollover_period, now_local)
    log_dir = log_directory(config)
    active = log_dir / f"{config.base_name}.{boundary.stamp(now_local)}{LOG_EXTENSION}"

    console.print(f"\n[header]Periodlog[/header] ({config.rollover_period.value} rollover)\n")
    console.print(f"  active file: [path]{active}[/path]")
    console.print(f"  expires (UTC): {boundary.expires_at_utc.isoformat(timespec='seconds')}")
    console.print(f"  max_count: {config.max_count or 'unlimited'}\n")

    try:
        records = list_log_files(log_dir, config.base_name)
    except OSError:
        console.print("[dim]No log directory yet.[/dim]\n")
        return

    if not records:
        console.print("[dim]No log files.[/dim]\n")
        return

    table = Table(show_header=True, header_style="bold")
    table.add_column("File", style="path")
    table.add_column("Created")
    table.add_column("Size", justify="right")

    for record in records:
        size = record.path.stat().st_size if record.path.exists() else 0
        marker = " (active)" if record.path == active else ""
        table.add_row(
            record.path.name + marker,
            record.created.isoformat(sep=" ", timespec="seconds"),
            f"{size:,} B",
        )

    console.print(table)
    console.print()

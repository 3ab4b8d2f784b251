"""Write command: periodlog write "message"."""

from __future__ import annotations

import click

from periodlog.cli.options import resolve_config
from periodlog.facade import LogFacade
from periodlog.models.period import Level
from periodlog.output.console import ConsoleColor


@click.command()
@click.argument("message")
@click.option(
    "--level", "-l",
    type=click.Choice([lvl.value for lvl in Level], case_sensitive=False),
    default=Level.INFORMATION.value,
    show_default=True,
    help="Level tag written to the log line.",
)
@click.option(
    "--color", "-c",
    type=click.Choice([c.value for c in ConsoleColor], case_sensitive=False),
    default=None,
    help="Console color for host messages.",
)
@click.pass_context
def write(ctx: click.Context, message: str, level: str, color: str | None) -> None:
    """Append a message to the current log file and echo it.

    Example: periodlog write --level warning "Disk almost full"
    """
    facade = LogFacade(config=resolve_config(ctx))
    facade.write(Level.parse(level), message, color)

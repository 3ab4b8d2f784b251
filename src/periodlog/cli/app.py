"""Main Click group entry point for Periodlog CLI."""

from __future__ import annotations

import click

from periodlog import __version__
from periodlog.cli.prune_cmd import prune
from periodlog.cli.status_cmd import status
from periodlog.cli.write_cmd import write
from periodlog.models.period import RolloverPeriod


@click.group()
@click.version_option(__version__, prog_name="periodlog")
@click.option("--config", "config_file", type=click.Path(dir_okay=False), default=None,
              help="Config file (default: ~/.periodlog/config.toml)")
@click.option("--directory", "-d", default=None, help="Root folder for log files")
@click.option("--base-name", "-n", default=None, help="Subfolder and file name prefix")
@click.option("--period", "-p", default=None,
              help=f"Rollover period: {', '.join(p.value for p in RolloverPeriod)}")
@click.option("--max-count", "-m", type=int, default=None, help="Files to keep, 0 keeps all")
@click.pass_context
def cli(
    ctx: click.Context,
    config_file: str | None,
    directory: str | None,
    base_name: str | None,
    period: str | None,
    max_count: int | None,
) -> None:
    """Periodlog: calendar-based log rotation."""
    ctx.ensure_object(dict)
    ctx.obj["config_file"] = config_file
    ctx.obj["overrides"] = {
        "directory": directory,
        "base_name": base_name,
        "rollover_period": period,
        "max_count": max_count,
    }


def _make_config_group() -> click.Group:
    """Create the config subcommand group."""

    @click.group()
    def config() -> None:
        """View and modify Periodlog configuration."""

    @config.command("show")
    @click.pass_context
    def config_show(ctx: click.Context) -> None:
        """Display current configuration."""
        from periodlog.cli.options import resolve_config
        from periodlog.config import config_path
        from periodlog.output.console import console

        cfg = resolve_config(ctx)
        console.print(f"\n[header]Periodlog Configuration[/header] ({config_path(ctx.obj.get('config_file'))})\n")
        for key, value in cfg.model_dump(mode="json").items():
            console.print(f"  {key}: {value}", highlight=False)
        console.print()

    @config.command("init")
    @click.pass_context
    def config_init(ctx: click.Context) -> None:
        """Create a commented default config file if none exists."""
        from periodlog.config import write_default_config
        from periodlog.output.console import console

        path = write_default_config(ctx.obj.get("config_file"))
        console.print(f"[status.success]Config at {path}[/status.success]")

    @config.command("set")
    @click.argument("key")
    @click.argument("value")
    @click.pass_context
    def config_set(ctx: click.Context, key: str, value: str) -> None:
        """Set a configuration value (e.g., 'rollover_period Hour')."""
        from periodlog.config import build_config, load_config, save_config
        from periodlog.exceptions import ConfigError
        from periodlog.models.config import LogConfig
        from periodlog.output.console import console, error_console

        if key not in LogConfig.model_fields:
            error_console.print(f"[status.failed]Unknown key: {key}[/status.failed]")
            raise SystemExit(1)

        config_file = ctx.obj.get("config_file")
        try:
            cfg = build_config(load_config(config_file), **{key: value})
        except ConfigError as e:
            error_console.print(f"[status.failed]Invalid value for {key}: {e}[/status.failed]")
            raise SystemExit(1) from e

        save_config(cfg, config_file)
        console.print(f"[status.success]Set {key} = {value}[/status.success]")

    return config


# Register subcommands
cli.add_command(write)
cli.add_command(status)
cli.add_command(prune)
cli.add_command(_make_config_group(), "config")
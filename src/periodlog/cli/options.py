"""Shared helpers for CLI commands."""

from __future__ import annotations

from pathlib import Path

import click

from periodlog.config import build_config, load_config
from periodlog.exceptions import ConfigError
from periodlog.models.config import LogConfig
from periodlog.output.console import error_console


def resolve_config(ctx: click.Context) -> LogConfig:
    """Load the config file and apply command-line overrides, exiting on bad values."""
    obj = ctx.obj or {}
    try:
        return build_config(load_config(obj.get("config_file")), **obj.get("overrides", {}))
    except ConfigError as e:
        error_console.print(f"[status.failed]Configuration error: {e}[/status.failed]")
        raise SystemExit(2) from e


def log_directory(config: LogConfig) -> Path:
    return (Path(config.directory) / config.base_name).absolute()

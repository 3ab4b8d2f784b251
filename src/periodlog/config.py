"""Configuration sourcing: TOML file plus environment overrides."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import toml
from pydantic import ValidationError

from periodlog.exceptions import ConfigError
from periodlog.logger import log
from periodlog.models.config import LogConfig
from periodlog.models.period import RolloverPeriod

CONFIG_DIR = Path.home() / ".periodlog"
CONFIG_FILE = CONFIG_DIR / "config.toml"
CONFIG_ENV = "PERIODLOG_CONFIG"

ENV_OVERRIDES = {
    "PERIODLOG_DIRECTORY": "directory",
    "PERIODLOG_BASE_NAME": "base_name",
    "PERIODLOG_ROLLOVER_PERIOD": "rollover_period",
    "PERIODLOG_MAX_COUNT": "max_count",
}

_DEFAULT_CONFIG_TOML = """\
# Periodlog configuration
# Root folder; files go to <directory>/<base_name>/
# directory = "/var/log/myapp"
base_name = "Logs"

# One of: Month, Week, Day, Hour, Minute
rollover_period = "Day"

# Number of files to keep, 0 keeps everything
max_count = 0

console_output = true
debug_enabled = false
verbose_enabled = false
information_enabled = true
warning_enabled = true
error_enabled = true
"""


def config_path(path: str | os.PathLike | None = None) -> Path:
    """Resolve which config file to use."""
    if path is not None:
        return Path(path)
    env_path = os.environ.get(CONFIG_ENV)
    if env_path:
        return Path(env_path)
    return CONFIG_FILE


def build_config(base: LogConfig | None = None, **options: Any) -> LogConfig:
    """Validate options on top of base, raising ConfigError on bad values."""
    data = base.model_dump() if base is not None else {}
    data.update({k: v for k, v in options.items() if v is not None})
    if "rollover_period" in data:
        data["rollover_period"] = RolloverPeriod.parse(data["rollover_period"])
    try:
        return LogConfig(**data)
    except ValidationError as e:
        raise ConfigError(_describe(e)) from e


def load_config(path: str | os.PathLike | None = None) -> LogConfig:
    """Load configuration from the config file and environment, falling back to defaults."""
    raw: dict[str, Any] = {}
    file = config_path(path)
    if file.exists():
        try:
            raw = toml.loads(file.read_text(encoding="utf-8"))
            log.debug("Loaded config from %s: %s", file, raw)
        except (OSError, UnicodeDecodeError, toml.TomlDecodeError) as e:
            log.warning("Failed to read config %s, using defaults: %s", file, e)
            raw = {}
    else:
        log.debug("No config file at %s, using defaults", file)

    raw.update(_env_overrides())

    try:
        return build_config(**raw)
    except ConfigError as e:
        log.warning("Invalid configuration, using defaults: %s", e)
        return LogConfig()


def save_config(config: LogConfig, path: str | os.PathLike | None = None) -> Path:
    """Write configuration as TOML and return the file written."""
    file = config_path(path)
    file.parent.mkdir(parents=True, exist_ok=True)
    file.write_text(toml.dumps(config.model_dump(mode="json")), encoding="utf-8")
    log.info("Saved config to %s", file)
    return file


def write_default_config(path: str | os.PathLike | None = None) -> Path:
    """Create a commented default config file if none exists."""
    file = config_path(path)
    if not file.exists():
        file.parent.mkdir(parents=True, exist_ok=True)
        file.write_text(_DEFAULT_CONFIG_TOML, encoding="utf-8")
        log.info("Created default config at %s", file)
    return file


def _env_overrides() -> dict[str, Any]:
    overrides = {}
    for env_name, field in ENV_OVERRIDES.items():
        value = os.environ.get(env_name)
        if value:
            overrides[field] = value
    return overrides


def _describe(error: ValidationError) -> str:
    parts = []
    for err in error.errors():
        loc = ".".join(str(p) for p in err["loc"]) or "config"
        parts.append(f"{loc}: {err['msg']}")
    return "; ".join(parts)

"""Shared test fixtures for Periodlog."""

from __future__ import annotations

import io
from datetime import datetime, timezone

import pytest
from rich.console import Console

from periodlog import facade as facade_module
from periodlog.core.clock import FrozenClock
from periodlog.facade import LogFacade
from periodlog.models.config import LogConfig
from periodlog.output.console import PERIODLOG_THEME


@pytest.fixture
def clock():
    """A frozen clock at Wednesday 2024-03-13 12:00:00 UTC."""
    return FrozenClock(datetime(2024, 3, 13, 12, 0, 0, tzinfo=timezone.utc))


@pytest.fixture
def config(tmp_path):
    """Minute rollover into a temporary directory."""
    return LogConfig(directory=str(tmp_path), base_name="App", rollover_period="Minute")


@pytest.fixture
def out_console():
    return Console(file=io.StringIO(), theme=PERIODLOG_THEME, width=200, color_system=None)


@pytest.fixture
def err_console():
    return Console(file=io.StringIO(), theme=PERIODLOG_THEME, width=200, color_system=None)


@pytest.fixture
def facade(config, clock, out_console, err_console):
    """A facade wired to the frozen clock and string-buffer consoles."""
    return LogFacade(config=config, clock=clock, console=out_console, error_console=err_console)


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path, monkeypatch):
    """Keep tests away from the user's config file and the process-wide facade."""
    monkeypatch.setenv("PERIODLOG_CONFIG", str(tmp_path / "no-such-config.toml"))
    for name in ("PERIODLOG_DIRECTORY", "PERIODLOG_BASE_NAME", "PERIODLOG_ROLLOVER_PERIOD", "PERIODLOG_MAX_COUNT"):
        monkeypatch.delenv(name, raising=False)
    facade_module.reset_default()
    yield
    facade_module.reset_default()

"""Tests for configuration models and loading."""

from __future__ import annotations

import tempfile

import pytest

from periodlog.config import build_config, load_config, save_config, write_default_config
from periodlog.exceptions import ConfigError, UnknownPeriodError
from periodlog.models.config import LogConfig
from periodlog.models.period import Level, RolloverPeriod


class TestLogConfig:
    """Tests for the LogConfig model."""

    def test_defaults(self):
        cfg = LogConfig()
        assert cfg.directory == tempfile.gettempdir()
        assert cfg.base_name == "Logs"
        assert cfg.rollover_period is RolloverPeriod.DAY
        assert cfg.max_count == 0
        assert cfg.console_output is True

    def test_period_is_case_insensitive(self):
        assert LogConfig(rollover_period="minute").rollover_period is RolloverPeriod.MINUTE
        assert LogConfig(rollover_period=" WEEK ").rollover_period is RolloverPeriod.WEEK

    def test_level_switches(self):
        cfg = LogConfig(information_enabled=False)
        assert cfg.is_enabled(Level.HOST)
        assert not cfg.is_enabled(Level.DEBUG)
        assert not cfg.is_enabled(Level.VERBOSE)
        assert not cfg.is_enabled(Level.INFORMATION)
        assert cfg.is_enabled(Level.WARNING)
        assert cfg.is_enabled(Level.ERROR)


class TestBuildConfig:
    """Tests for build_config."""

    def test_unknown_period(self):
        with pytest.raises(UnknownPeriodError) as exc_info:
            build_config(rollover_period="Fortnight")
        assert exc_info.value.period == "Fortnight"

    @pytest.mark.parametrize("options", [
        {"max_count": -1},
        {"base_name": ""},
        {"base_name": "a/b"},
        {"max_count": "many"},
    ])
    def test_invalid_options(self, options):
        with pytest.raises(ConfigError):
            build_config(**options)

    def test_overrides_base_and_ignores_none(self):
        base = LogConfig(base_name="Svc", max_count=4)
        cfg = build_config(base, max_count=None, rollover_period="Hour")
        assert cfg.base_name == "Svc"
        assert cfg.max_count == 4
        assert cfg.rollover_period is RolloverPeriod.HOUR


class TestLoadConfig:
    """Tests for load_config / save_config."""

    def test_missing_file_gives_defaults(self, tmp_path):
        assert load_config(tmp_path / "absent.toml") == LogConfig()

    def test_reads_toml(self, tmp_path):
        path = tmp_path / "config.toml"
        path.write_text(
            'directory = "/var/log/app"\nbase_name = "Svc"\nrollover_period = "hour"\nmax_count = 7\n',
            encoding="utf-8",
        )
        cfg = load_config(path)
        assert cfg.directory == "/var/log/app"
        assert cfg.base_name == "Svc"
        assert cfg.rollover_period is RolloverPeriod.HOUR
        assert cfg.max_count == 7

    def test_environment_overrides_file(self, tmp_path, monkeypatch):
        path = tmp_path / "config.toml"
        path.write_text('base_name = "Svc"\nmax_count = 7\n', encoding="utf-8")
        monkeypatch.setenv("PERIODLOG_MAX_COUNT", "2")
        monkeypatch.setenv("PERIODLOG_ROLLOVER_PERIOD", "Month")

        cfg = load_config(path)

        assert cfg.base_name == "Svc"
        assert cfg.max_count == 2
        assert cfg.rollover_period is RolloverPeriod.MONTH

    def test_env_selects_config_file(self, tmp_path, monkeypatch):
        path = tmp_path / "other.toml"
        path.write_text('base_name = "FromEnv"\n', encoding="utf-8")
        monkeypatch.setenv("PERIODLOG_CONFIG", str(path))
        assert load_config().base_name == "FromEnv"

    def test_malformed_toml_gives_defaults(self, tmp_path, caplog):
        path = tmp_path / "config.toml"
        path.write_text("not valid toml at all\n", encoding="utf-8")
        assert load_config(path) == LogConfig()
        assert "Failed to read config" in caplog.text

    def test_undecodable_file_gives_defaults(self, tmp_path, caplog):
        path = tmp_path / "config.toml"
        path.write_bytes(b'base_name = "\xff\xfe"\n')
        assert load_config(path) == LogConfig()
        assert "Failed to read config" in caplog.text

    def test_invalid_period_in_file_gives_defaults(self, tmp_path, caplog):
        path = tmp_path / "config.toml"
        path.write_text('rollover_period = "Fortnight"\n', encoding="utf-8")
        assert load_config(path).rollover_period is RolloverPeriod.DAY
        assert "Invalid configuration" in caplog.text

    def test_save_then_load(self, tmp_path):
        path = tmp_path / "nested" / "config.toml"
        cfg = LogConfig(directory=str(tmp_path), base_name="Svc", rollover_period="Week", max_count=3)

        save_config(cfg, path)

        assert load_config(path) == cfg

    def test_write_default_config_does_not_overwrite(self, tmp_path):
        path = tmp_path / "config.toml"
        write_default_config(path)
        assert load_config(path).base_name == "Logs"

        path.write_text('base_name = "Mine"\n', encoding="utf-8")
        write_default_config(path)
        assert load_config(path).base_name == "Mine"

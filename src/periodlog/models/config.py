"""Pydantic configuration models."""

from __future__ import annotations

import tempfile

from pydantic import BaseModel, Field, field_validator

from periodlog.exceptions import UnknownPeriodError
from periodlog.models.period import Level, RolloverPeriod


class LogConfig(BaseModel):
    """Process-scoped logging configuration."""

    directory: str = Field(default_factory=tempfile.gettempdir)
    base_name: str = "Logs"
    rollover_period: RolloverPeriod = RolloverPeriod.DAY
    max_count: int = Field(default=0, ge=0)  # 0 keeps every file
    console_output: bool = True

    debug_enabled: bool = False
    verbose_enabled: bool = False
    information_enabled: bool = True
    warning_enabled: bool = True
    error_enabled: bool = True

    @field_validator("rollover_period", mode="before")
    @classmethod
    def _parse_period(cls, value: object) -> RolloverPeriod:
        try:
            return RolloverPeriod.parse(value)
        except UnknownPeriodError as e:
            raise ValueError(str(e)) from e

    @field_validator("base_name")
    @classmethod
    def _check_base_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("base_name must not be empty")
        if "/" in value or "\\" in value:
            raise ValueError("base_name must not contain path separators")
        return value

    def is_enabled(self, level: Level) -> bool:
        """Whether messages at this level are emitted at all."""
        if level is Level.HOST:
            return True
        return getattr(self, f"{level.value.lower()}_enabled")

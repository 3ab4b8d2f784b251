"""Rollover period and log level enums."""

from __future__ import annotations

from enum import Enum

from periodlog.exceptions import UnknownPeriodError


class RolloverPeriod(str, Enum):
    """Calendar unit at which the active log file is replaced."""

    MONTH = "Month"
    WEEK = "Week"
    DAY = "Day"
    HOUR = "Hour"
    MINUTE = "Minute"

    @classmethod
    def parse(cls, value: object) -> RolloverPeriod:
        """Parse a period name case-insensitively, raising UnknownPeriodError."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            for member in cls:
                if member.value.lower() == value.strip().lower():
                    return member
        raise UnknownPeriodError(value)


class Level(str, Enum):
    """Level tag written into each log line."""

    HOST = "HOST"
    DEBUG = "DEBUG"
    VERBOSE = "VERBOSE"
    INFORMATION = "INFORMATION"
    WARNING = "WARNING"
    ERROR = "ERROR"

    @classmethod
    def parse(cls, value: str) -> Level:
        """Parse a level name case-insensitively."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise ValueError(f"Unknown level: {value!r}")
        try:
            return cls(value.strip().upper())
        except ValueError:
            raise ValueError(f"Unknown level: {value}") from None

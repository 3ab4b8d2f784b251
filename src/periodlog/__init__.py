"""Periodlog: calendar-based log rotation with leveled, console-mirrored logging."""

__version__ = "0.1.0"

from periodlog.facade import (
    LogFacade,
    debug,
    error,
    get_default,
    host,
    information,
    initialize,
    reset_default,
    verbose,
    warning,
)
from periodlog.models import Level, LogConfig, RolloverPeriod

__all__ = [
    "__version__",
    "Level",
    "LogConfig",
    "LogFacade",
    "RolloverPeriod",
    "debug",
    "error",
    "get_default",
    "host",
    "information",
    "initialize",
    "reset_default",
    "verbose",
    "warning",
]

"""Data models for Periodlog."""

from periodlog.models.config import LogConfig
from periodlog.models.period import Level, RolloverPeriod
from periodlog.models.record import LogFileRecord

__all__ = ["Level", "LogConfig", "LogFileRecord", "RolloverPeriod"]

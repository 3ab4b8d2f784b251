"""Log session state and the lazy staleness check."""

from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Protocol

from periodlog.core.retention import LOG_EXTENSION, prune
from periodlog.core.rollover import compute_boundary
from periodlog.logger import log
from periodlog.models.config import LogConfig
from periodlog.models.period import RolloverPeriod


class Clock(Protocol):
    def now(self) -> datetime: ...

    def utcnow(self) -> datetime: ...


@dataclass(frozen=True)
class LogSession:
    """The active log file and when it expires.

    Sessions are never mutated; a rollover produces a new one.
    """

    directory: str
    base_name: str
    rollover_period: RolloverPeriod
    max_count: int
    current_log_file: Path
    expires_at_utc: datetime

    @property
    def log_directory(self) -> Path:
        return Path(self.directory) / self.base_name

    @classmethod
    def create(cls, config: LogConfig, clock: Clock) -> LogSession:
        """Start a new session: compute the boundary, prepare the directory, prune.

        Pruning runs on every creation, including the first one.
        """
        now_local = clock.now()
        boundary = compute_boundary(config.rollover_period, now_local)

        log_dir = (Path(config.directory) / config.base_name).absolute()
        try:
            log_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            log.warning("Cannot create log directory %s: %s", log_dir, e)

        file_name = f"{config.base_name}.{boundary.stamp(now_local)}{LOG_EXTENSION}"
        current = log_dir / file_name

        prune(log_dir, config.base_name, config.max_count, active_file=current)

        log.debug("New log session %s, expires %s", current, boundary.expires_at_utc.isoformat())
        return cls(
            directory=config.directory,
            base_name=config.base_name,
            rollover_period=config.rollover_period,
            max_count=config.max_count,
            current_log_file=current,
            expires_at_utc=boundary.expires_at_utc,
        )


def is_valid(session: LogSession | None, clock: Clock) -> bool:
    """A session is valid while its file exists and its boundary is in the future."""
    if session is None:
        return False
    if clock.utcnow() >= session.expires_at_utc:
        return False
    return os.path.isfile(session.current_log_file)


def ensure_valid(session: LogSession | None, config: LogConfig, clock: Clock) -> LogSession:
    """Return session unchanged if still valid, otherwise a freshly created one."""
    if is_valid(session, clock):
        return session
    return LogSession.create(config, clock)

"""Line formatting and mutually exclusive appends."""

from __future__ import annotations

import os
import threading
from datetime import datetime

from periodlog.logger import log
from periodlog.models.period import Level

LOCK_NAME = "periodlog"

_locks: dict[str, threading.Lock] = {}
_registry_lock = threading.Lock()


def named_lock(name: str) -> threading.Lock:
    """Return the process-wide lock registered under name, creating it once."""
    with _registry_lock:
        lock = _locks.get(name)
        if lock is None:
            lock = _locks[name] = threading.Lock()
        return lock


def format_line(level: Level, message: str, timestamp: datetime) -> str:
    """Format one log line: ``[<timestamp>] [<LEVEL>] <message>``."""
    return f"[{timestamp.isoformat(timespec='seconds')}] [{level.value}] {message}"


class LogWriter:
    """Append lines to log files, one writer at a time.

    The lock only serializes threads within this process. Separate processes
    appending to the same file are not coordinated.
    """

    def __init__(self, lock_name: str = LOCK_NAME):
        self.lock_name = lock_name
        self._lock = named_lock(lock_name)

    def append(self, path: str | os.PathLike, line: str) -> bool:
        """Append line plus a terminator. Returns False instead of raising on I/O errors."""
        with self._lock:
            try:
                with open(path, "a", encoding="utf-8") as f:
                    f.write(line + "\n")
            except OSError as e:
                log.warning("Failed to write log file %s: %s", path, e)
                return False
        return True

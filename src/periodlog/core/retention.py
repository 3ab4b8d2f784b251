"""Retention: keep at most max_count log files per base name."""

from __future__ import annotations

import os
from datetime import datetime
from pathlib import Path

from periodlog.logger import log
from periodlog.models.record import LogFileRecord

LOG_EXTENSION = ".log"


def list_log_files(directory: str | os.PathLike, base_name: str) -> list[LogFileRecord]:
    """List log files for base_name directly inside directory, oldest first.

    Raises OSError if the directory cannot be read.
    """
    prefix = f"{base_name}."
    records = []
    for entry in os.scandir(directory):
        if not entry.is_file() or not entry.name.endswith(LOG_EXTENSION):
            continue
        if not entry.name.startswith(prefix):
            continue
        records.append(LogFileRecord(
            path=Path(entry.path),
            created=_creation_time(entry.stat()),
            matches_base_name=True,
        ))
    records.sort(key=lambda r: r.sort_key)
    return records


def prune(
    directory: str | os.PathLike,
    base_name: str,
    max_count: int,
    *,
    active_file: str | os.PathLike | None = None,
) -> int:
    """Delete the oldest log files beyond max_count and return how many were removed.

    When active_file is given it always takes one slot, whether or not it is on
    disk yet, so max_count bounds the total including the file about to be
    written. The active file is never deleted.
    Each deletion is independent: a failure is reported and the rest continue.
    """
    if max_count <= 0:
        return 0

    try:
        records = list_log_files(directory, base_name)
    except OSError as e:
        log.warning("Cannot list log directory %s: %s", directory, e)
        return 0

    active = Path(active_file).resolve() if active_file is not None else None
    candidates = [r for r in records if active is None or r.path.resolve() != active]
    keep = max_count
    if active is not None:
        # The active file is always the newest and always kept.
        keep -= 1

    excess = len(candidates) - keep
    if excess <= 0:
        return 0

    removed = 0
    for record in candidates[:excess]:
        try:
            record.path.unlink()
        except FileNotFoundError:
            log.debug("Log file already gone: %s", record.path)
        except OSError as e:
            log.warning("Failed to delete old log file %s: %s", record.path, e)
        else:
            log.debug("Deleted old log file %s", record.path)
            removed += 1

    if removed:
        log.info("Pruned %d log file(s) from %s (max_count=%d)", removed, directory, max_count)
    return removed


def _creation_time(stat: os.stat_result) -> datetime:
    # st_birthtime is missing on most Linux builds; fall back to mtime.
    timestamp = getattr(stat, "st_birthtime", None)
    if timestamp is None:
        timestamp = stat.st_mtime
    return datetime.fromtimestamp(timestamp)

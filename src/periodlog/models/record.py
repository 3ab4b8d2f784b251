"""Directory listing row used by retention."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path


@dataclass(frozen=True)
class LogFileRecord:
    """A log file found during a retention scan."""

    path: Path
    created: datetime
    matches_base_name: bool = True

    @property
    def sort_key(self) -> tuple[datetime, str]:
        """Oldest first, ties broken by file name."""
        return (self.created, self.path.name)

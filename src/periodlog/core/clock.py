"""Clock sources for the rollover engine."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone, tzinfo


class SystemClock:
    """Wall clock of the running process."""

    def now(self) -> datetime:
        """Naive local time."""
        return datetime.now()

    def utcnow(self) -> datetime:
        return datetime.now(timezone.utc)


class FrozenClock:
    """A clock that only moves when told to."""

    def __init__(self, instant: datetime, tz: tzinfo = timezone.utc):
        if instant.tzinfo is None:
            instant = instant.replace(tzinfo=tz)
        self._instant = instant.astimezone(timezone.utc)
        self.tz = tz

    def now(self) -> datetime:
        return self._instant.astimezone(self.tz)

    def utcnow(self) -> datetime:
        return self._instant

    def set(self, instant: datetime) -> None:
        if instant.tzinfo is None:
            instant = instant.replace(tzinfo=self.tz)
        self._instant = instant.astimezone(timezone.utc)

    def advance(self, delta: timedelta) -> None:
        self._instant += delta

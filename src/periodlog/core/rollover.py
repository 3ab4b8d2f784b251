"""Period boundary arithmetic.

Boundaries are built on the local wall clock ("midnight" means local
midnight) and then converted to UTC, so expiry checks are not affected by
daylight-saving jumps.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from periodlog.exceptions import UnknownPeriodError
from periodlog.models.period import RolloverPeriod

DATE_FORMATS = {
    RolloverPeriod.MONTH: "%Y%m",
    RolloverPeriod.WEEK: "%Y%m%d-W%V",
    RolloverPeriod.DAY: "%Y%m%d",
    RolloverPeriod.HOUR: "%Y%m%d%H",
    RolloverPeriod.MINUTE: "%Y%m%d%H%M",
}

SUNDAY = 6  # datetime.weekday()


@dataclass(frozen=True)
class Boundary:
    """File name date format and expiry instant for one period."""

    date_format: str
    expires_at_utc: datetime

    def stamp(self, now_local: datetime) -> str:
        return now_local.strftime(self.date_format)


def compute_boundary(period: RolloverPeriod, now_local: datetime) -> Boundary:
    """Compute the file name format and the next period boundary after now_local.

    A naive now_local is taken as system local time; an aware one keeps its
    own time zone.
    """
    if not isinstance(period, RolloverPeriod):
        raise UnknownPeriodError(period)

    wall = now_local.replace(tzinfo=None)

    if period is RolloverPeriod.MONTH:
        if wall.month == 12:
            boundary = datetime(wall.year + 1, 1, 1)
        else:
            boundary = datetime(wall.year, wall.month + 1, 1)
    elif period is RolloverPeriod.WEEK:
        boundary = _next_sunday(wall)
    elif period is RolloverPeriod.DAY:
        boundary = _midnight(wall) + timedelta(days=1)
    elif period is RolloverPeriod.HOUR:
        boundary = wall.replace(minute=0, second=0, microsecond=0) + timedelta(hours=1)
    else:
        boundary = wall.replace(second=0, microsecond=0) + timedelta(minutes=1)

    return Boundary(
        date_format=DATE_FORMATS[period],
        expires_at_utc=_to_utc(boundary, now_local),
    )


def _midnight(wall: datetime) -> datetime:
    return wall.replace(hour=0, minute=0, second=0, microsecond=0)


def _next_sunday(wall: datetime) -> datetime:
    # Exactly Sunday 00:00:00.000 expires at that same instant.
    boundary = _midnight(wall)
    while boundary.weekday() != SUNDAY:
        boundary += timedelta(days=1)
    if boundary < wall:
        boundary += timedelta(days=7)
    return boundary


def _to_utc(boundary: datetime, now_local: datetime) -> datetime:
    if now_local.tzinfo is None:
        return boundary.astimezone(timezone.utc)
    return boundary.replace(tzinfo=now_local.tzinfo).astimezone(timezone.utc)

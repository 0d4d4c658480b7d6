"""Instant handling helpers.

Every calculator receives its instant explicitly; nothing in the package
reads the wall clock.  These helpers pin down how naive and aware
``datetime`` values are interpreted.
"""

from __future__ import annotations

import datetime as _dt
from typing import Final

__all__ = [
    "SECONDS_PER_DAY",
    "ensure_utc",
    "local_midnight",
    "elapsed_seconds",
]


SECONDS_PER_DAY: Final[float] = 86_400.0


def ensure_utc(moment: _dt.datetime) -> _dt.datetime:
    """Return ``moment`` converted to UTC (naive values are taken as UTC)."""

    tzinfo = moment.tzinfo
    if tzinfo is None or tzinfo.utcoffset(moment) is None:
        return moment.replace(tzinfo=_dt.UTC)
    return moment.astimezone(_dt.UTC)


def local_midnight(moment: _dt.datetime, *, days: int = 0) -> _dt.datetime:
    """Return 00:00 of ``moment``'s calendar day, shifted by ``days``.

    The calendar day is the one printed on ``moment`` itself: an aware
    datetime keeps its own offset, a naive one is treated as UTC.
    """

    if moment.tzinfo is None or moment.tzinfo.utcoffset(moment) is None:
        moment = moment.replace(tzinfo=_dt.UTC)
    midnight = moment.replace(hour=0, minute=0, second=0, microsecond=0)
    if days:
        midnight = midnight + _dt.timedelta(days=days)
    return midnight


def elapsed_seconds(start: _dt.datetime, end: _dt.datetime) -> float:
    """Return ``end - start`` in seconds after normalising both to UTC."""

    return (ensure_utc(end) - ensure_utc(start)).total_seconds()

"""Narrow ephemeris capability surface consumed by the calendar core."""

from __future__ import annotations

from datetime import datetime
from typing import Protocol, runtime_checkable

from ..core.location import ObserverLocation

__all__ = ["EphemerisProvider"]


@runtime_checkable
class EphemerisProvider(Protocol):
    """What the calculators need from an ephemeris backend.

    Julian days are in Universal Time.  Implementations raise
    :class:`vedicclock.errors.EphemerisError` when a value cannot be
    produced; they never return a placeholder.
    """

    def julian_day(self, moment: datetime) -> float: ...

    def from_julian_day(self, jd_ut: float) -> datetime: ...

    def sun_longitude(self, jd_ut: float) -> float: ...

    def moon_longitude(self, jd_ut: float) -> float: ...

    def moon_illuminated_fraction(self, jd_ut: float) -> float: ...

    def next_sunrise(self, jd_ut: float, location: ObserverLocation) -> float | None:
        """Return the Julian day of the first sunrise after ``jd_ut`` or ``None``."""
        ...

"""Nakshatra (lunar mansion) helpers driven by the Moon's longitude."""

from __future__ import annotations

import logging
from datetime import datetime, timedelta
from typing import Final

from ...core.angles import normalize_degrees
from ...core.location import ObserverLocation
from ...data.tables import NAKSHATRA_DEFINITIONS, NakshatraDefinition, lookup
from ...ephemeris.provider import EphemerisProvider
from ...errors import DegenerateRateError
from ..lunar.calendar import rashi_for_longitude
from ..lunar.elongation import DEFAULT_PROBE, moon_longitude_rate
from ..lunar.positions import default_provider, moon_longitude
from .models import NakshatraResult
from .tithi import MIN_RATE_DEG_PER_HOUR

__all__ = [
    "NAKSHATRA_ARC_DEGREES",
    "PADA_ARC_DEGREES",
    "minutes_to_next_nakshatra",
    "nakshatra_definition",
    "nakshatra_for_longitude",
    "nakshatra_for_moment",
    "nakshatra_number",
    "nakshatra_pada",
    "nakshatra_progress",
]

LOG = logging.getLogger(__name__)

NAKSHATRA_ARC_DEGREES: Final[float] = 360.0 / 27.0
PADA_ARC_DEGREES: Final[float] = NAKSHATRA_ARC_DEGREES / 4.0


def nakshatra_number(moon_longitude_deg: float) -> int:
    """Return the nakshatra 1–27 holding ``moon_longitude_deg``."""

    return int(normalize_degrees(moon_longitude_deg) // NAKSHATRA_ARC_DEGREES) % 27 + 1


def nakshatra_pada(moon_longitude_deg: float) -> int:
    offset = normalize_degrees(moon_longitude_deg) % NAKSHATRA_ARC_DEGREES
    return min(int(offset // PADA_ARC_DEGREES) + 1, 4)


def nakshatra_progress(moon_longitude_deg: float) -> float:
    offset = normalize_degrees(moon_longitude_deg) % NAKSHATRA_ARC_DEGREES
    return offset / NAKSHATRA_ARC_DEGREES * 100.0


def minutes_to_next_nakshatra(moon_longitude_deg: float, rate_deg_per_hour: float) -> float:
    """Estimate minutes until the Moon enters the next nakshatra."""

    if rate_deg_per_hour <= MIN_RATE_DEG_PER_HOUR:
        raise DegenerateRateError(
            f"lunar rate {rate_deg_per_hour!r} deg/h cannot reach the next nakshatra"
        )
    offset = normalize_degrees(moon_longitude_deg) % NAKSHATRA_ARC_DEGREES
    return (NAKSHATRA_ARC_DEGREES - offset) / rate_deg_per_hour * 60.0


def nakshatra_definition(number: int) -> NakshatraDefinition:
    if not 1 <= number <= 27:
        raise ValueError(f"nakshatra number must lie within 1..27, got {number}")
    return lookup(NAKSHATRA_DEFINITIONS, number)


def nakshatra_for_longitude(moon_longitude_deg: float, rate_deg_per_hour: float) -> NakshatraResult:
    lon = normalize_degrees(moon_longitude_deg)
    number = nakshatra_number(lon)
    definition = nakshatra_definition(number)
    try:
        minutes: float | None = minutes_to_next_nakshatra(lon, rate_deg_per_hour)
    except DegenerateRateError:
        LOG.warning("Degenerate lunar rate %r; nakshatra end time unavailable", rate_deg_per_hour)
        minutes = None
    return NakshatraResult(
        number=number,
        name=definition.name,
        name_sanskrit=definition.sanskrit,
        deity=definition.deity,
        symbol=definition.symbol,
        pada=nakshatra_pada(lon),
        progress_percent=nakshatra_progress(lon),
        minutes_to_next=minutes,
        moon_longitude=lon,
        rashi=rashi_for_longitude(lon),
    )


def nakshatra_for_moment(
    moment: datetime,
    location: ObserverLocation | None = None,
    *,
    provider: EphemerisProvider | None = None,
    probe: timedelta = DEFAULT_PROBE,
) -> NakshatraResult:
    """Return the nakshatra occupied by the Moon at ``moment``.

    The rate comes from the Moon's own longitude, not the elongation: the
    Sun's motion slows elongation but not the Moon's passage through the
    mansions.
    """

    provider = provider or default_provider()
    lon = moon_longitude(moment, location, provider=provider)
    rate = moon_longitude_rate(moment, location, provider=provider, probe=probe, current=lon)
    return nakshatra_for_longitude(lon, rate)

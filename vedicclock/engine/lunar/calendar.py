"""Solar-longitude based month and Moon sign helpers."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from ...core.angles import normalize_degrees
from ...core.location import ObserverLocation
from ...data.tables import MASA_DEFINITIONS, RASHI_DEFINITIONS, lookup
from ...ephemeris.provider import EphemerisProvider
from .positions import moon_longitude

__all__ = [
    "MasaInfo",
    "RashiInfo",
    "masa_for_longitude",
    "masa_number",
    "moon_rashi",
    "rashi_for_longitude",
    "rashi_number",
]


@dataclass(frozen=True, slots=True)
class MasaInfo:
    """Metadata describing the running lunar month."""

    number: int
    name: str
    name_sanskrit: str
    sun_longitude: float


@dataclass(frozen=True, slots=True)
class RashiInfo:
    """Zodiac sign occupied by a body."""

    number: int
    name: str
    western: str
    longitude: float


def masa_number(sun_longitude: float) -> int:
    """Return the month number 1–12 from the Sun's longitude.

    This is the solar approximation: each 30° sign maps to one month,
    starting with Chaitra at 0°.  The traditional rule names the month
    after the nakshatra of its full moon; the two agree most of the year
    but drift near sign boundaries and in adhika (leap) months.
    """

    return int(normalize_degrees(sun_longitude) // 30.0) % 12 + 1


def masa_for_longitude(sun_longitude: float) -> MasaInfo:
    lon = normalize_degrees(sun_longitude)
    number = masa_number(lon)
    definition = lookup(MASA_DEFINITIONS, number)
    return MasaInfo(
        number=number,
        name=definition.name,
        name_sanskrit=definition.sanskrit,
        sun_longitude=lon,
    )


def rashi_number(longitude: float) -> int:
    return int(normalize_degrees(longitude) // 30.0) % 12 + 1


def rashi_for_longitude(longitude: float) -> RashiInfo:
    lon = normalize_degrees(longitude)
    number = rashi_number(lon)
    definition = lookup(RASHI_DEFINITIONS, number)
    return RashiInfo(number=number, name=definition.name, western=definition.western, longitude=lon)


def moon_rashi(
    moment: datetime,
    location: ObserverLocation | None = None,
    *,
    provider: EphemerisProvider | None = None,
) -> RashiInfo:
    """Return the sign the Moon occupies at ``moment``."""

    return rashi_for_longitude(moon_longitude(moment, location, provider=provider))

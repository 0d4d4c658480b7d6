"""Sun and Moon positions for a single instant."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from ...core.angles import normalize_degrees
from ...core.location import ObserverLocation
from ...ephemeris.provider import EphemerisProvider
from ...ephemeris.swisseph_adapter import SwissEphemerisAdapter

__all__ = [
    "CelestialSnapshot",
    "celestial_snapshot",
    "default_provider",
    "moon_illumination_percent",
    "moon_longitude",
    "sun_longitude",
]


@dataclass(frozen=True, slots=True)
class CelestialSnapshot:
    """Raw luminary geometry the calendar is derived from.

    ``moon_phase_fraction`` is geometric (0 new, 0.5 full) while
    ``illumination_percent`` is the lit share of the disc; the two are
    related but not interchangeable.
    """

    sun_longitude: float
    moon_longitude: float
    elongation: float
    moon_phase_fraction: float
    illumination_percent: float


def default_provider() -> EphemerisProvider:
    return SwissEphemerisAdapter.get_default_adapter()


def sun_longitude(moment: datetime, *, provider: EphemerisProvider | None = None) -> float:
    """Return the Sun's geocentric ecliptic longitude at ``moment``."""

    provider = provider or default_provider()
    return normalize_degrees(provider.sun_longitude(provider.julian_day(moment)))


def moon_longitude(
    moment: datetime,
    location: ObserverLocation | None = None,
    *,
    provider: EphemerisProvider | None = None,
) -> float:
    """Return the Moon's geocentric ecliptic longitude at ``moment``.

    ``location`` is accepted so call sites read the same as the other
    calculators; topocentric parallax is below the calendar's resolution.
    """

    provider = provider or default_provider()
    return normalize_degrees(provider.moon_longitude(provider.julian_day(moment)))


def moon_illumination_percent(
    moment: datetime, *, provider: EphemerisProvider | None = None
) -> float:
    provider = provider or default_provider()
    fraction = provider.moon_illuminated_fraction(provider.julian_day(moment))
    return min(100.0, max(0.0, fraction * 100.0))


def celestial_snapshot(
    moment: datetime,
    location: ObserverLocation | None = None,
    *,
    provider: EphemerisProvider | None = None,
) -> CelestialSnapshot:
    """Return every luminary quantity for ``moment`` in one pass."""

    provider = provider or default_provider()
    jd_ut = provider.julian_day(moment)
    sun = normalize_degrees(provider.sun_longitude(jd_ut))
    moon = normalize_degrees(provider.moon_longitude(jd_ut))
    elongation = normalize_degrees(moon - sun)
    fraction = provider.moon_illuminated_fraction(jd_ut)
    return CelestialSnapshot(
        sun_longitude=sun,
        moon_longitude=moon,
        elongation=elongation,
        moon_phase_fraction=elongation / 360.0,
        illumination_percent=min(100.0, max(0.0, fraction * 100.0)),
    )

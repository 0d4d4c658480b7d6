"""Sun–Moon elongation and its forward rate.

Rates are finite differences over a short forward probe rather than
analytic derivatives.  They only feed "minutes until the next boundary"
estimates, where a few percent of error is acceptable.
"""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Final

from ...core.angles import forward_delta, normalize_degrees
from ...core.location import ObserverLocation
from ...ephemeris.provider import EphemerisProvider
from .positions import default_provider

__all__ = [
    "DEFAULT_PROBE",
    "elongation",
    "elongation_from_longitudes",
    "elongation_rate",
    "moon_longitude_rate",
    "moon_phase_fraction",
]

DEFAULT_PROBE: Final[timedelta] = timedelta(hours=1)


def elongation_from_longitudes(moon_longitude: float, sun_longitude: float) -> float:
    return normalize_degrees(moon_longitude - sun_longitude)


def _elongation_at(provider: EphemerisProvider, moment: datetime) -> float:
    jd_ut = provider.julian_day(moment)
    return elongation_from_longitudes(provider.moon_longitude(jd_ut), provider.sun_longitude(jd_ut))


def elongation(
    moment: datetime,
    location: ObserverLocation | None = None,
    *,
    provider: EphemerisProvider | None = None,
) -> float:
    """Return ``normalize(moon − sun)`` at ``moment``."""

    return _elongation_at(provider or default_provider(), moment)


def moon_phase_fraction(
    moment: datetime,
    location: ObserverLocation | None = None,
    *,
    provider: EphemerisProvider | None = None,
) -> float:
    """Return the geometric phase in ``[0, 1)``: 0 new moon, 0.5 full moon."""

    return elongation(moment, location, provider=provider) / 360.0


def _probe_hours(probe: timedelta) -> float:
    hours = probe.total_seconds() / 3600.0
    if hours <= 0.0:
        raise ValueError("rate probe must be a positive interval")
    return hours


def elongation_rate(
    moment: datetime,
    location: ObserverLocation | None = None,
    *,
    provider: EphemerisProvider | None = None,
    probe: timedelta = DEFAULT_PROBE,
    current: float | None = None,
) -> float:
    """Return the forward elongation rate in degrees per hour.

    ``current`` lets callers that already hold the elongation at ``moment``
    skip one ephemeris evaluation.
    """

    provider = provider or default_provider()
    hours = _probe_hours(probe)
    start = _elongation_at(provider, moment) if current is None else current
    end = _elongation_at(provider, moment + probe)
    return forward_delta(start, end) / hours


def moon_longitude_rate(
    moment: datetime,
    location: ObserverLocation | None = None,
    *,
    provider: EphemerisProvider | None = None,
    probe: timedelta = DEFAULT_PROBE,
    current: float | None = None,
) -> float:
    """Return the Moon's forward longitude rate in degrees per hour."""

    provider = provider or default_provider()
    hours = _probe_hours(probe)
    if current is None:
        current = normalize_degrees(provider.moon_longitude(provider.julian_day(moment)))
    later = normalize_degrees(provider.moon_longitude(provider.julian_day(moment + probe)))
    return forward_delta(current, later) / hours

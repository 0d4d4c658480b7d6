"""Assemble a full :class:`VedicTimeSnapshot` for one instant and place."""

from __future__ import annotations

import logging
from datetime import datetime, timedelta

from ...config.settings import Settings, default_settings
from ...core.location import ObserverLocation, coerce_location
from ...core.time import ensure_utc
from ...ephemeris.provider import EphemerisProvider
from ...ephemeris.swisseph_adapter import SwissEphemerisAdapter
from ..lunar.calendar import masa_for_longitude
from ..lunar.elongation import elongation_rate, moon_longitude_rate
from ..lunar.positions import celestial_snapshot
from ..observational.sun import most_recent_sunrise
from .models import VedicTimeSnapshot
from .muhurta import muhurta_for_moment
from .nakshatra import nakshatra_for_longitude
from .prana import prana_for_moment
from .tithi import tithi_for_elongation

__all__ = ["VedicTimeAssembler", "compute_vedic_time"]

LOG = logging.getLogger(__name__)


class VedicTimeAssembler:
    """Compute complete Vedic time snapshots against one ephemeris provider.

    The assembler holds no per-instant state: two calls with the same
    instant and location return equal snapshots.  Ephemeris failures
    propagate as :class:`~vedicclock.errors.EphemerisError`; no partial
    snapshot is ever returned.
    """

    def __init__(
        self,
        provider: EphemerisProvider | None = None,
        settings: Settings | None = None,
    ) -> None:
        self.settings = settings or default_settings()
        if provider is None:
            if settings is None:
                provider = SwissEphemerisAdapter.get_default_adapter()
            else:
                provider = SwissEphemerisAdapter.from_settings(self.settings)
        self.provider = provider

    @property
    def probe(self) -> timedelta:
        return timedelta(minutes=self.settings.rates.probe_minutes)

    @property
    def sunrise_window(self) -> timedelta:
        return timedelta(days=self.settings.sunrise.search_window_days)

    def compute(
        self,
        instant: datetime,
        location: ObserverLocation | tuple[float, float],
    ) -> VedicTimeSnapshot:
        observer = coerce_location(location)
        provider = self.provider
        probe = self.probe

        celestial = celestial_snapshot(instant, observer, provider=provider)
        tithi = tithi_for_elongation(
            celestial.elongation,
            elongation_rate(
                instant, observer, provider=provider, probe=probe, current=celestial.elongation
            ),
        )
        nakshatra = nakshatra_for_longitude(
            celestial.moon_longitude,
            moon_longitude_rate(
                instant, observer, provider=provider, probe=probe, current=celestial.moon_longitude
            ),
        )
        masa = masa_for_longitude(celestial.sun_longitude)

        # One sunrise feeds both counters so they can never disagree.
        sunrise = most_recent_sunrise(
            instant, observer, provider=provider, window=self.sunrise_window
        )
        muhurta = muhurta_for_moment(instant, observer, provider=provider, sunrise=sunrise)
        prana = prana_for_moment(instant, observer, provider=provider, sunrise=sunrise)

        LOG.debug(
            "Vedic time at %s: tithi=%d nakshatra=%d masa=%d muhurta=%d prana=%d",
            ensure_utc(instant).isoformat(),
            tithi.number,
            nakshatra.number,
            masa.number,
            muhurta.number,
            prana.number,
        )
        return VedicTimeSnapshot(
            calculated_for=ensure_utc(instant),
            location=observer,
            celestial=celestial,
            tithi=tithi,
            nakshatra=nakshatra,
            masa=masa,
            muhurta=muhurta,
            prana=prana,
        )


def compute_vedic_time(
    instant: datetime,
    location: ObserverLocation | tuple[float, float] | None = None,
    *,
    latitude: float | None = None,
    longitude: float | None = None,
    provider: EphemerisProvider | None = None,
    settings: Settings | None = None,
) -> VedicTimeSnapshot:
    """Return the complete Vedic time snapshot for ``instant`` at a location.

    The location may be given as an :class:`ObserverLocation`, a
    ``(latitude, longitude)`` pair, or the ``latitude``/``longitude``
    keywords.
    """

    observer = coerce_location(location, latitude=latitude, longitude=longitude)
    return VedicTimeAssembler(provider=provider, settings=settings).compute(instant, observer)

"""Sunrise epoch used by the muhurta and prana counters."""

from __future__ import annotations

import logging
from datetime import datetime, timedelta
from typing import Final

from ...core.location import ObserverLocation
from ...core.time import ensure_utc, local_midnight
from ...ephemeris.provider import EphemerisProvider
from ..lunar.positions import default_provider

__all__ = [
    "DEFAULT_SEARCH_WINDOW",
    "most_recent_sunrise",
    "sunrise_after",
]

LOG = logging.getLogger(__name__)

DEFAULT_SEARCH_WINDOW: Final[timedelta] = timedelta(days=1)


def sunrise_after(
    start: datetime,
    location: ObserverLocation,
    *,
    provider: EphemerisProvider | None = None,
    window: timedelta = DEFAULT_SEARCH_WINDOW,
) -> datetime | None:
    """Return the first sunrise within ``window`` after ``start`` or ``None``."""

    provider = provider or default_provider()
    jd_start = provider.julian_day(start)
    jd_rise = provider.next_sunrise(jd_start, location)
    if jd_rise is None:
        return None
    if jd_rise - jd_start > window.total_seconds() / 86_400.0:
        return None
    return provider.from_julian_day(jd_rise)


def most_recent_sunrise(
    moment: datetime,
    location: ObserverLocation,
    *,
    provider: EphemerisProvider | None = None,
    window: timedelta = DEFAULT_SEARCH_WINDOW,
) -> datetime:
    """Return the latest sunrise at or before ``moment``.

    The search starts at local midnight of ``moment``'s calendar day and
    steps back one day when that sunrise is still in the future.  When
    neither day has a sunrise (polar day or night) the epoch falls back to
    local midnight of ``moment``'s day; the result is always UTC.
    """

    provider = provider or default_provider()
    now = ensure_utc(moment)
    midnight = local_midnight(moment)

    sunrise = sunrise_after(midnight, location, provider=provider, window=window)
    if sunrise is None or sunrise > now:
        sunrise = sunrise_after(
            local_midnight(moment, days=-1), location, provider=provider, window=window
        )
    if sunrise is not None and sunrise <= now:
        return sunrise

    LOG.warning(
        "No sunrise found near %s at lat=%.4f lon=%.4f; using local midnight",
        now.isoformat(),
        location.latitude,
        location.longitude,
    )
    return ensure_utc(midnight)

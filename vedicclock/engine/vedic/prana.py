"""Prana helpers: 21,600 four-second breath cycles per sunrise-to-sunrise day."""

from __future__ import annotations

import math
from datetime import datetime, timedelta
from typing import Final

from ...core.location import ObserverLocation
from ...core.time import elapsed_seconds, ensure_utc
from ...ephemeris.provider import EphemerisProvider
from ..observational.sun import DEFAULT_SEARCH_WINDOW, most_recent_sunrise
from .models import BreathPhase, PranaResult

__all__ = [
    "PRANAS_PER_DAY",
    "PRANAS_PER_MUHURTA",
    "SECONDS_PER_PRANA",
    "breath_phase",
    "breath_phase_progress",
    "prana_for_moment",
    "prana_from_elapsed",
    "prana_number",
    "prana_time_string",
    "pranas_to_next_muhurta",
]

SECONDS_PER_PRANA: Final[float] = 4.0
PRANAS_PER_DAY: Final[int] = 21_600
PRANAS_PER_MUHURTA: Final[int] = 720


def prana_number(seconds_since_sunrise: float) -> int:
    return math.floor(seconds_since_sunrise / SECONDS_PER_PRANA) % PRANAS_PER_DAY


def breath_phase(cycle_progress: float) -> BreathPhase:
    """Inhale during the first half of a prana, exhale during the second."""

    return "inhale" if cycle_progress < 50.0 else "exhale"


def breath_phase_progress(cycle_progress: float) -> float:
    """Map prana progress onto 0–100% of the active breath phase."""

    if cycle_progress < 50.0:
        return cycle_progress / 50.0 * 100.0
    return (cycle_progress - 50.0) / 50.0 * 100.0


def pranas_to_next_muhurta(number: int) -> int:
    return PRANAS_PER_MUHURTA - number % PRANAS_PER_MUHURTA


def prana_time_string(number: int) -> str:
    """Return ``HH:MM:SS`` elapsed since sunrise at the start of prana ``number``."""

    total = int(number * SECONDS_PER_PRANA)
    hours, rest = divmod(total, 3600)
    minutes, seconds = divmod(rest, 60)
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}"


def prana_from_elapsed(seconds_since_sunrise: float, sunrise: datetime) -> PranaResult:
    number = prana_number(seconds_since_sunrise)
    cycle = (seconds_since_sunrise % SECONDS_PER_PRANA) / SECONDS_PER_PRANA * 100.0
    return PranaResult(
        number=number,
        angle_degrees=number / PRANAS_PER_DAY * 360.0,
        breath_phase=breath_phase(cycle),
        phase_progress_percent=breath_phase_progress(cycle),
        cycle_progress_percent=cycle,
        seconds_since_sunrise=seconds_since_sunrise,
        pranas_to_next_muhurta=pranas_to_next_muhurta(number),
        sunrise=ensure_utc(sunrise),
    )


def prana_for_moment(
    moment: datetime,
    location: ObserverLocation,
    *,
    provider: EphemerisProvider | None = None,
    sunrise: datetime | None = None,
    window: timedelta = DEFAULT_SEARCH_WINDOW,
) -> PranaResult:
    if sunrise is None:
        sunrise = most_recent_sunrise(moment, location, provider=provider, window=window)
    return prana_from_elapsed(elapsed_seconds(sunrise, moment), sunrise)

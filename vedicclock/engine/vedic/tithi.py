"""Tithi (lunar day) helpers derived from Sun–Moon elongation."""

from __future__ import annotations

import logging
from datetime import datetime, timedelta
from typing import Final

from ...core.angles import normalize_degrees
from ...core.location import ObserverLocation
from ...data.tables import TITHI_DEFINITIONS, TithiDefinition
from ...ephemeris.provider import EphemerisProvider
from ...errors import DegenerateRateError
from ..lunar.elongation import DEFAULT_PROBE, elongation, elongation_rate
from ..lunar.positions import default_provider
from .models import Paksha, TithiResult

__all__ = [
    "MIN_RATE_DEG_PER_HOUR",
    "TITHI_ARC_DEGREES",
    "is_amavasya",
    "is_ekadashi",
    "is_purnima",
    "minutes_to_next_tithi",
    "paksha",
    "tithi_definition",
    "tithi_for_elongation",
    "tithi_for_moment",
    "tithi_name",
    "tithi_number",
    "tithi_progress",
]

LOG = logging.getLogger(__name__)

TITHI_ARC_DEGREES: Final[float] = 360.0 / 30.0
"""Angular span of a single tithi in degrees."""

MIN_RATE_DEG_PER_HOUR: Final[float] = 1e-9


def tithi_number(elongation_deg: float) -> int:
    """Return the tithi 1–30 for ``elongation_deg``."""

    return int(normalize_degrees(elongation_deg) // TITHI_ARC_DEGREES) % 30 + 1


def paksha(elongation_deg: float) -> Paksha:
    return "Shukla" if normalize_degrees(elongation_deg) < 180.0 else "Krishna"


def tithi_progress(elongation_deg: float) -> float:
    """Return the percentage of the current tithi already elapsed."""

    return (normalize_degrees(elongation_deg) % TITHI_ARC_DEGREES) / TITHI_ARC_DEGREES * 100.0


def minutes_to_next_tithi(elongation_deg: float, rate_deg_per_hour: float) -> float:
    """Estimate minutes until elongation reaches the next 12° boundary.

    Raises :class:`DegenerateRateError` for a zero or negative rate.
    """

    if rate_deg_per_hour <= MIN_RATE_DEG_PER_HOUR:
        raise DegenerateRateError(
            f"elongation rate {rate_deg_per_hour!r} deg/h cannot reach the next tithi"
        )
    remaining = TITHI_ARC_DEGREES - (normalize_degrees(elongation_deg) % TITHI_ARC_DEGREES)
    return remaining / rate_deg_per_hour * 60.0


def tithi_definition(number: int) -> TithiDefinition:
    if not 1 <= number <= 30:
        raise ValueError(f"tithi number must lie within 1..30, got {number}")
    if number == 15:
        return TITHI_DEFINITIONS[14]
    if number == 30:
        return TITHI_DEFINITIONS[15]
    return TITHI_DEFINITIONS[(number - 1) % 15]


def tithi_name(number: int) -> str:
    """Return the tithi name; 15 is Purnima and 30 is Amavasya."""

    return tithi_definition(number).name


def is_purnima(elongation_deg: float) -> bool:
    return tithi_number(elongation_deg) == 15 and paksha(elongation_deg) == "Shukla"


def is_amavasya(elongation_deg: float) -> bool:
    # Both branches kept: sources differ on whether the new-moon day is
    # counted as tithi 30 or as the fifteenth day of Krishna paksha.
    number = tithi_number(elongation_deg)
    return number == 30 or (number == 15 and paksha(elongation_deg) == "Krishna")


def is_ekadashi(elongation_deg: float) -> bool:
    return tithi_number(elongation_deg) in (11, 26)


def tithi_for_elongation(elongation_deg: float, rate_deg_per_hour: float) -> TithiResult:
    """Assemble a :class:`TithiResult` from elongation and its rate."""

    delta = normalize_degrees(elongation_deg)
    number = tithi_number(delta)
    definition = tithi_definition(number)
    try:
        minutes: float | None = minutes_to_next_tithi(delta, rate_deg_per_hour)
    except DegenerateRateError:
        LOG.warning("Degenerate elongation rate %r; tithi end time unavailable", rate_deg_per_hour)
        minutes = None
    return TithiResult(
        number=number,
        name=definition.name,
        name_sanskrit=definition.sanskrit,
        paksha=paksha(delta),
        progress_percent=tithi_progress(delta),
        minutes_to_next=minutes,
        elongation=delta,
    )


def tithi_for_moment(
    moment: datetime,
    location: ObserverLocation | None = None,
    *,
    provider: EphemerisProvider | None = None,
    probe: timedelta = DEFAULT_PROBE,
) -> TithiResult:
    """Return the tithi running at ``moment``."""

    provider = provider or default_provider()
    delta = elongation(moment, location, provider=provider)
    rate = elongation_rate(moment, location, provider=provider, probe=probe, current=delta)
    return tithi_for_elongation(delta, rate)

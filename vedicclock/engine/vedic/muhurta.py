"""Muhurta helpers: thirty 48-minute divisions of the sunrise-to-sunrise day."""

from __future__ import annotations

import math
from datetime import datetime, timedelta
from typing import Final

from ...core.location import ObserverLocation
from ...core.time import elapsed_seconds, ensure_utc
from ...data.tables import MUHURTA_DEFINITIONS, MuhurtaCategory, MuhurtaDefinition, lookup
from ...ephemeris.provider import EphemerisProvider
from ..observational.sun import DEFAULT_SEARCH_WINDOW, most_recent_sunrise
from .models import MuhurtaResult

__all__ = [
    "MINUTES_PER_MUHURTA",
    "MUHURTAS_PER_DAY",
    "muhurta_definition",
    "muhurta_for_moment",
    "muhurta_from_elapsed",
    "muhurta_name",
    "muhurta_number",
    "muhurtas_by_category",
]

MINUTES_PER_MUHURTA: Final[float] = 48.0
MUHURTAS_PER_DAY: Final[int] = 30


def muhurta_number(minutes_since_sunrise: float) -> int:
    return math.floor(minutes_since_sunrise / MINUTES_PER_MUHURTA) % MUHURTAS_PER_DAY + 1


def muhurta_definition(number: int) -> MuhurtaDefinition:
    return lookup(MUHURTA_DEFINITIONS, number)


def muhurta_name(number: int) -> str:
    return muhurta_definition(number).name


def muhurtas_by_category(category: MuhurtaCategory) -> tuple[int, ...]:
    """Return the muhurta numbers tagged with ``category``."""

    return tuple(
        index
        for index, definition in enumerate(MUHURTA_DEFINITIONS, start=1)
        if definition.category == category
    )


def muhurta_from_elapsed(minutes_since_sunrise: float, sunrise: datetime) -> MuhurtaResult:
    """Build the muhurta for a given offset from ``sunrise``."""

    number = muhurta_number(minutes_since_sunrise)
    into = minutes_since_sunrise % MINUTES_PER_MUHURTA
    definition = muhurta_definition(number)
    return MuhurtaResult(
        number=number,
        name=definition.name,
        name_sanskrit=definition.sanskrit,
        category=definition.category,
        significance=definition.significance,
        best_for=definition.best_for,
        ruling_deity=definition.ruling_deity,
        notes=definition.notes,
        progress_percent=into / MINUTES_PER_MUHURTA * 100.0,
        minutes_remaining=MINUTES_PER_MUHURTA - into,
        sunrise=ensure_utc(sunrise),
    )


def muhurta_for_moment(
    moment: datetime,
    location: ObserverLocation,
    *,
    provider: EphemerisProvider | None = None,
    sunrise: datetime | None = None,
    window: timedelta = DEFAULT_SEARCH_WINDOW,
) -> MuhurtaResult:
    """Return the muhurta running at ``moment``.

    Pass ``sunrise`` to share one epoch with the prana counter.
    """

    if sunrise is None:
        sunrise = most_recent_sunrise(moment, location, provider=provider, window=window)
    return muhurta_from_elapsed(elapsed_seconds(sunrise, moment) / 60.0, sunrise)

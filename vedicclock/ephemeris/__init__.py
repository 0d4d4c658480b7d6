"""Ephemeris access for the calendar core."""

from __future__ import annotations

from .provider import EphemerisProvider
from .swe import has_swe
from .swisseph_adapter import RiseTransitResult, SwissEphemerisAdapter, swe_calc
from .utils import get_se_ephe_path

__all__ = [
    "EphemerisProvider",
    "RiseTransitResult",
    "SwissEphemerisAdapter",
    "get_se_ephe_path",
    "has_swe",
    "swe_calc",
]

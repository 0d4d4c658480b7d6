"""Astronomical-to-calendrical core of a Vedic lunisolar clock."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version as _get_version

from .config import Settings, load_settings
from .core import ObserverLocation
from .engine.lunar import CelestialSnapshot, MasaInfo, RashiInfo
from .engine.vedic import (
    MuhurtaResult,
    NakshatraResult,
    PranaResult,
    TithiResult,
    VedicTimeAssembler,
    VedicTimeSnapshot,
    compute_vedic_time,
)
from .ephemeris import EphemerisProvider, SwissEphemerisAdapter
from .errors import (
    DegenerateRateError,
    EphemerisError,
    InvalidLocationError,
    VedicClockError,
)

try:
    __version__ = _get_version("vedic-clock")
except PackageNotFoundError:  # pragma: no cover - running from a source checkout
    __version__ = "0.0.0"


def get_version() -> str:
    """Return the resolved package version."""

    return __version__


__all__ = [
    "__version__",
    "get_version",
    "CelestialSnapshot",
    "DegenerateRateError",
    "EphemerisError",
    "EphemerisProvider",
    "InvalidLocationError",
    "MasaInfo",
    "MuhurtaResult",
    "NakshatraResult",
    "ObserverLocation",
    "PranaResult",
    "RashiInfo",
    "Settings",
    "SwissEphemerisAdapter",
    "TithiResult",
    "VedicClockError",
    "VedicTimeAssembler",
    "VedicTimeSnapshot",
    "compute_vedic_time",
    "load_settings",
]

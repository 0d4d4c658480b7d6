"""Exception hierarchy raised by :mod:`vedicclock`."""

from __future__ import annotations

__all__ = [
    "VedicClockError",
    "InvalidLocationError",
    "EphemerisError",
    "DegenerateRateError",
]


class VedicClockError(Exception):
    """Base class for calendar computation failures."""


class InvalidLocationError(VedicClockError, ValueError):
    """Observer latitude/longitude outside the valid geodetic range."""


class EphemerisError(VedicClockError, RuntimeError):
    """Ephemeris provider could not produce a value for the requested instant."""


class DegenerateRateError(VedicClockError, ArithmeticError):
    """Angular rate is zero so the time to the next boundary is undefined."""

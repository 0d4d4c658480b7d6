"""Luminary geometry and lunar month helpers."""

from .calendar import (
    MasaInfo,
    RashiInfo,
    masa_for_longitude,
    masa_number,
    moon_rashi,
    rashi_for_longitude,
    rashi_number,
)
from .elongation import (
    DEFAULT_PROBE,
    elongation,
    elongation_from_longitudes,
    elongation_rate,
    moon_longitude_rate,
    moon_phase_fraction,
)
from .positions import (
    CelestialSnapshot,
    celestial_snapshot,
    moon_illumination_percent,
    moon_longitude,
    sun_longitude,
)

__all__ = [
    "CelestialSnapshot",
    "DEFAULT_PROBE",
    "MasaInfo",
    "RashiInfo",
    "celestial_snapshot",
    "elongation",
    "elongation_from_longitudes",
    "elongation_rate",
    "masa_for_longitude",
    "masa_number",
    "moon_rashi",
    "moon_illumination_percent",
    "moon_longitude",
    "moon_longitude_rate",
    "moon_phase_fraction",
    "rashi_for_longitude",
    "rashi_number",
    "sun_longitude",
]

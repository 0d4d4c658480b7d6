"""Vedic time units: tithi, nakshatra, muhurta and prana."""

from __future__ import annotations

from .assembler import VedicTimeAssembler, compute_vedic_time
from .models import (
    BreathPhase,
    MuhurtaResult,
    NakshatraResult,
    Paksha,
    PranaResult,
    TithiResult,
    VedicTimeSnapshot,
)
from .muhurta import (
    MINUTES_PER_MUHURTA,
    MUHURTAS_PER_DAY,
    muhurta_definition,
    muhurta_for_moment,
    muhurta_from_elapsed,
    muhurta_name,
    muhurta_number,
    muhurtas_by_category,
)
from .nakshatra import (
    NAKSHATRA_ARC_DEGREES,
    PADA_ARC_DEGREES,
    minutes_to_next_nakshatra,
    nakshatra_definition,
    nakshatra_for_longitude,
    nakshatra_for_moment,
    nakshatra_number,
    nakshatra_pada,
    nakshatra_progress,
)
from .prana import (
    PRANAS_PER_DAY,
    PRANAS_PER_MUHURTA,
    SECONDS_PER_PRANA,
    breath_phase,
    breath_phase_progress,
    prana_for_moment,
    prana_from_elapsed,
    prana_number,
    prana_time_string,
    pranas_to_next_muhurta,
)
from .tithi import (
    TITHI_ARC_DEGREES,
    is_amavasya,
    is_ekadashi,
    is_purnima,
    minutes_to_next_tithi,
    paksha,
    tithi_definition,
    tithi_for_elongation,
    tithi_for_moment,
    tithi_name,
    tithi_number,
    tithi_progress,
)

__all__ = [
    "BreathPhase",
    "MINUTES_PER_MUHURTA",
    "MUHURTAS_PER_DAY",
    "MuhurtaResult",
    "NAKSHATRA_ARC_DEGREES",
    "NakshatraResult",
    "PADA_ARC_DEGREES",
    "PRANAS_PER_DAY",
    "PRANAS_PER_MUHURTA",
    "Paksha",
    "PranaResult",
    "SECONDS_PER_PRANA",
    "TITHI_ARC_DEGREES",
    "TithiResult",
    "VedicTimeAssembler",
    "VedicTimeSnapshot",
    "breath_phase",
    "breath_phase_progress",
    "compute_vedic_time",
    "is_amavasya",
    "is_ekadashi",
    "is_purnima",
    "minutes_to_next_nakshatra",
    "minutes_to_next_tithi",
    "muhurta_definition",
    "muhurta_for_moment",
    "muhurta_from_elapsed",
    "muhurta_name",
    "muhurta_number",
    "muhurtas_by_category",
    "nakshatra_definition",
    "nakshatra_for_longitude",
    "nakshatra_for_moment",
    "nakshatra_number",
    "nakshatra_pada",
    "nakshatra_progress",
    "paksha",
    "prana_for_moment",
    "prana_from_elapsed",
    "prana_number",
    "prana_time_string",
    "pranas_to_next_muhurta",
    "tithi_definition",
    "tithi_for_elongation",
    "tithi_for_moment",
    "tithi_name",
    "tithi_number",
    "tithi_progress",
]

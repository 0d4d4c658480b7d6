"""Result records produced by the Vedic time calculators."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import asdict, dataclass
from datetime import datetime
from typing import Any, Literal

from ...core.location import ObserverLocation
from ..lunar.calendar import MasaInfo, RashiInfo
from ..lunar.positions import CelestialSnapshot

__all__ = [
    "BreathPhase",
    "MuhurtaResult",
    "NakshatraResult",
    "Paksha",
    "PranaResult",
    "TithiResult",
    "VedicTimeSnapshot",
]

Paksha = Literal["Shukla", "Krishna"]
BreathPhase = Literal["inhale", "exhale"]


@dataclass(frozen=True, slots=True)
class TithiResult:
    """Lunar day derived from Sun–Moon elongation.

    ``minutes_to_next`` is ``None`` when the elongation rate was degenerate.
    """

    number: int
    name: str
    name_sanskrit: str
    paksha: Paksha
    progress_percent: float
    minutes_to_next: float | None
    elongation: float

    @property
    def is_purnima(self) -> bool:
        return self.number == 15 and self.paksha == "Shukla"

    @property
    def is_amavasya(self) -> bool:
        return self.number == 30 or (self.number == 15 and self.paksha == "Krishna")

    @property
    def is_ekadashi(self) -> bool:
        return self.number in (11, 26)


@dataclass(frozen=True, slots=True)
class NakshatraResult:
    """Lunar mansion occupied by the Moon."""

    number: int
    name: str
    name_sanskrit: str
    deity: str
    symbol: str
    pada: int
    progress_percent: float
    minutes_to_next: float | None
    moon_longitude: float
    rashi: RashiInfo


@dataclass(frozen=True, slots=True)
class MuhurtaResult:
    number: int
    name: str
    name_sanskrit: str
    category: str
    significance: str
    best_for: tuple[str, ...]
    ruling_deity: str | None
    notes: str
    progress_percent: float
    minutes_remaining: float
    sunrise: datetime


@dataclass(frozen=True, slots=True)
class PranaResult:
    number: int
    angle_degrees: float
    breath_phase: BreathPhase
    phase_progress_percent: float
    cycle_progress_percent: float
    seconds_since_sunrise: float
    pranas_to_next_muhurta: int
    sunrise: datetime


@dataclass(frozen=True, slots=True)
class VedicTimeSnapshot:
    """Everything the clock displays for one instant.

    Built once per recomputation and replaced, never updated, by the next.
    """

    calculated_for: datetime
    location: ObserverLocation
    celestial: CelestialSnapshot
    tithi: TithiResult
    nakshatra: NakshatraResult
    masa: MasaInfo
    muhurta: MuhurtaResult
    prana: PranaResult

    @property
    def tithi_number(self) -> int:
        return self.tithi.number

    @property
    def paksha(self) -> Paksha:
        return self.tithi.paksha

    @property
    def nakshatra_number(self) -> int:
        return self.nakshatra.number

    @property
    def masa_number(self) -> int:
        return self.masa.number

    @property
    def muhurta_number(self) -> int:
        return self.muhurta.number

    @property
    def sun_longitude(self) -> float:
        return self.celestial.sun_longitude

    @property
    def moon_longitude(self) -> float:
        return self.celestial.moon_longitude

    @property
    def elongation(self) -> float:
        return self.celestial.elongation

    @property
    def moon_phase_fraction(self) -> float:
        return self.celestial.moon_phase_fraction

    @property
    def illumination_percent(self) -> float:
        return self.celestial.illumination_percent

    def to_dict(self) -> Mapping[str, Any]:
        """Return a JSON-serialisable mapping of the snapshot."""

        payload = asdict(self)
        payload["calculated_for"] = self.calculated_for.isoformat()
        payload["muhurta"]["sunrise"] = self.muhurta.sunrise.isoformat()
        payload["prana"]["sunrise"] = self.prana.sunrise.isoformat()
        payload["tithi"]["is_purnima"] = self.tithi.is_purnima
        payload["tithi"]["is_amavasya"] = self.tithi.is_amavasya
        payload["tithi"]["is_ekadashi"] = self.tithi.is_ekadashi
        return payload

"""pyswisseph-backed ephemeris provider for the calendar calculators."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from functools import lru_cache
from typing import ClassVar, Final

from ..config.settings import Settings
from ..core.angles import normalize_degrees
from ..core.location import ObserverLocation
from ..core.time import ensure_utc
from ..errors import EphemerisError
from .swe import swe as _swe
from .utils import get_se_ephe_path

LOG = logging.getLogger(__name__)

__all__ = [
    "RiseTransitResult",
    "SwissEphemerisAdapter",
    "swe_calc",
]


_CIRCUMPOLAR_STATUS: Final[int] = -2


@lru_cache(maxsize=1)
def _ayanamsha_modes() -> Mapping[str, int]:
    swe = _swe()
    modes: dict[str, int] = {}
    for key, attr in (
        ("lahiri", "SIDM_LAHIRI"),
        ("fagan_bradley", "SIDM_FAGAN_BRADLEY"),
        ("krishnamurti", "SIDM_KRISHNAMURTI"),
        ("raman", "SIDM_RAMAN"),
        ("deluce", "SIDM_DELUCE"),
    ):
        value = getattr(swe, attr, None)
        if value is not None:
            modes[key] = int(value)
    return modes


@dataclass(frozen=True, slots=True)
class RiseTransitResult:
    """Outcome of a single Swiss ``rise_trans`` search."""

    body: str
    julian_day: float | None
    status: int
    flags: int

    @property
    def found(self) -> bool:
        return self.julian_day is not None


class SwissEphemerisAdapter:
    """High level wrapper around :mod:`pyswisseph` for the calendar core.

    Positions are geocentric apparent ecliptic longitudes.  The adapter
    first asks for Swiss data files and retries with the analytical Moshier
    theory when those files are missing, so a bare ``pip install`` works.
    """

    _DEFAULT_ADAPTER: ClassVar[SwissEphemerisAdapter | None] = None

    def __init__(
        self,
        ephemeris_path: str | os.PathLike[str] | None = None,
        *,
        zodiac: str = "tropical",
        ayanamsha: str | None = None,
    ) -> None:
        zodiac_key = (zodiac or "tropical").strip().lower()
        if zodiac_key not in {"tropical", "sidereal"}:
            raise ValueError(f"Unsupported zodiac '{zodiac}'. Options: sidereal, tropical")
        self.zodiac = zodiac_key
        self._is_sidereal = zodiac_key == "sidereal"
        self.ayanamsha: str | None = None
        self._sidereal_mode: int | None = None
        if self._is_sidereal:
            self.ayanamsha = (ayanamsha or "lahiri").strip().lower()
            self._sidereal_mode = self._resolve_sidereal_mode(self.ayanamsha)

        swe = _swe()
        self._calc_flags = swe.FLG_SWIEPH
        self._fallback_flags = swe.FLG_MOSEPH
        if self._is_sidereal:
            self._calc_flags |= swe.FLG_SIDEREAL
            self._fallback_flags |= swe.FLG_SIDEREAL

        self.ephemeris_path = self._configure_ephemeris_path(ephemeris_path)

    # ------------------------------------------------------------------
    # Class helpers
    # ------------------------------------------------------------------
    @classmethod
    def from_settings(cls, settings: Settings) -> SwissEphemerisAdapter:
        """Build an adapter from the ``ephemeris`` section of ``settings``."""

        cfg = settings.ephemeris
        return cls(
            cfg.path,
            zodiac=cfg.zodiac,
            ayanamsha=cfg.ayanamsha if cfg.zodiac == "sidereal" else None,
        )

    @classmethod
    def get_default_adapter(cls) -> SwissEphemerisAdapter:
        """Return a shared tropical adapter."""

        if cls._DEFAULT_ADAPTER is None:
            cls._DEFAULT_ADAPTER = cls()
        return cls._DEFAULT_ADAPTER

    @staticmethod
    def _resolve_sidereal_mode(ayanamsha: str) -> int:
        modes = _ayanamsha_modes()
        try:
            return modes[ayanamsha]
        except KeyError as exc:
            options = ", ".join(sorted(modes))
            raise ValueError(
                f"Unsupported ayanamsha '{ayanamsha}'. Options: {options}"
            ) from exc

    def _apply_sidereal_mode(self) -> None:
        # The sidereal mode lives in global C state; re-assert before each query.
        if self._sidereal_mode is not None:
            _swe().set_sid_mode(self._sidereal_mode, 0, 0)

    @staticmethod
    def _configure_ephemeris_path(
        ephemeris_path: str | os.PathLike[str] | None,
    ) -> str | None:
        resolved = get_se_ephe_path(ephemeris_path)
        if resolved is None:
            LOG.debug("No Swiss ephemeris data directory found; using Moshier theory")
            return None
        _swe().set_ephe_path(resolved)
        LOG.debug("Swiss ephemeris path set to %s", resolved)
        return resolved

    @property
    def is_sidereal(self) -> bool:
        return self._is_sidereal

    # ------------------------------------------------------------------
    # Time conversion
    # ------------------------------------------------------------------
    @staticmethod
    def julian_day(moment: datetime) -> float:
        """Return the UT Julian day for ``moment`` (naive values are UTC)."""

        moment_utc = ensure_utc(moment)
        hour = (
            moment_utc.hour
            + moment_utc.minute / 60.0
            + moment_utc.second / 3600.0
            + moment_utc.microsecond / 3.6e9
        )
        swe = _swe()
        return swe.julday(moment_utc.year, moment_utc.month, moment_utc.day, hour, swe.GREG_CAL)

    @staticmethod
    def from_julian_day(jd_ut: float) -> datetime:
        """Return the UTC datetime for the UT Julian day ``jd_ut``."""

        swe = _swe()
        year, month, day, hour = swe.revjul(jd_ut, swe.GREG_CAL)
        base = datetime(year, month, day, tzinfo=UTC)
        return base + timedelta(seconds=hour * 3600.0)

    # ------------------------------------------------------------------
    # Positions
    # ------------------------------------------------------------------
    def body_longitude(self, jd_ut: float, body_code: int, body_name: str | None = None) -> float:
        """Return the normalised ecliptic longitude of ``body_code``."""

        self._apply_sidereal_mode()
        try:
            xx, _, _ = swe_calc(jd_ut=jd_ut, planet_index=body_code, flag=self._calc_flags)
        except EphemerisError as primary:
            LOG.debug(
                "Swiss data lookup failed for %s at JD %s (%s); retrying with Moshier",
                body_name or body_code,
                jd_ut,
                primary,
            )
            xx, _, _ = swe_calc(jd_ut=jd_ut, planet_index=body_code, flag=self._fallback_flags)
        return normalize_degrees(xx[0])

    def sun_longitude(self, jd_ut: float) -> float:
        return self.body_longitude(jd_ut, _swe().SUN, body_name="Sun")

    def moon_longitude(self, jd_ut: float) -> float:
        return self.body_longitude(jd_ut, _swe().MOON, body_name="Moon")

    def moon_illuminated_fraction(self, jd_ut: float) -> float:
        """Return the illuminated fraction of the lunar disc in ``[0, 1]``."""

        swe = _swe()
        attr: tuple[float, ...] | None = None
        last_exc: Exception | None = None
        for flags in (swe.FLG_SWIEPH, swe.FLG_MOSEPH):
            try:
                result = swe.pheno_ut(jd_ut, swe.MOON, flags)
            except Exception as exc:  # swisseph.Error carries the C error string
                last_exc = exc
                continue
            # Older pyswisseph builds wrap the attribute vector in a (attr, flag) pair.
            attr = tuple(result[0]) if isinstance(result[0], (tuple, list)) else tuple(result)
            break
        if attr is None:
            raise EphemerisError(
                f"Swiss ephemeris could not compute lunar phase at JD {jd_ut}: {last_exc}"
            ) from last_exc
        return min(1.0, max(0.0, float(attr[1])))

    # ------------------------------------------------------------------
    # Rise/set
    # ------------------------------------------------------------------
    def rise_transit(
        self,
        jd_ut: float,
        body: int,
        location: ObserverLocation,
        *,
        body_name: str | None = None,
        pressure_hpa: float = 0.0,
        temperature_c: float = 0.0,
    ) -> RiseTransitResult:
        """Search for the next rise of ``body`` after ``jd_ut``."""

        swe = _swe()
        label = body_name or str(body)
        last_exc: Exception | None = None
        for flags in (swe.FLG_SWIEPH, swe.FLG_MOSEPH):
            try:
                status, tret = swe.rise_trans(
                    jd_ut,
                    body,
                    swe.CALC_RISE,
                    location.as_geopos(),
                    pressure_hpa,
                    temperature_c,
                    flags,
                )
            except Exception as exc:  # swisseph.Error carries the C error string
                last_exc = exc
                continue
            event_jd = tret[0] if tret else None
            if status != 0 or not event_jd:
                event_jd = None
            return RiseTransitResult(body=label, julian_day=event_jd, status=status, flags=flags)
        raise EphemerisError(
            f"Swiss ephemeris rise search failed for {label} at JD {jd_ut}: {last_exc}"
        ) from last_exc

    def next_sunrise(self, jd_ut: float, location: ObserverLocation) -> float | None:
        result = self.rise_transit(jd_ut, _swe().SUN, location, body_name="Sun")
        if result.status == _CIRCUMPOLAR_STATUS:
            LOG.debug(
                "Sun is circumpolar at lat=%.4f lon=%.4f after JD %s",
                location.latitude,
                location.longitude,
                jd_ut,
            )
        return result.julian_day


def swe_calc(
    *, jd_ut: float, planet_index: int, flag: int
) -> tuple[tuple[float, ...], int, str]:
    """Call ``swe.calc_ut`` and turn every failure into :class:`EphemerisError`."""

    swe = _swe()
    try:
        xx, ret_flag = swe.calc_ut(jd_ut, planet_index, flag)
    except Exception as exc:  # swisseph.Error carries the C error string
        raise EphemerisError(
            f"Swiss ephemeris failed for body index {planet_index} at JD {jd_ut}: {exc}"
        ) from exc

    if ret_flag < 0:
        raise EphemerisError(f"Swiss ephemeris returned error code {ret_flag}")
    return tuple(xx), ret_flag, ""

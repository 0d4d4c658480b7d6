"""Deferred import of the :mod:`swisseph` C extension.

``vedicclock`` stays importable without pyswisseph; only the Swiss adapter
needs it, and only once it is first queried.
"""

from __future__ import annotations

import importlib
import importlib.util
from functools import lru_cache
from types import ModuleType

from ..errors import EphemerisError

__all__ = ["has_swe", "reset_swe", "swe"]


@lru_cache(maxsize=1)
def swe() -> ModuleType:
    """Return the imported :mod:`swisseph` module.

    Raises :class:`EphemerisError` when the extension is not installed.
    Failed imports are not cached, so installing pyswisseph mid-session works.
    """

    try:
        return importlib.import_module("swisseph")
    except ImportError as exc:  # pragma: no cover - depends on the environment
        raise EphemerisError(
            "pyswisseph is required for Swiss Ephemeris calculations (pip install pyswisseph)"
        ) from exc


def reset_swe() -> None:
    swe.cache_clear()


def has_swe() -> bool:
    """Return ``True`` when pyswisseph is loaded or importable."""

    return swe.cache_info().currsize > 0 or importlib.util.find_spec("swisseph") is not None

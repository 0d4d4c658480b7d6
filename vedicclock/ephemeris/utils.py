"""Locate Swiss Ephemeris data files (``*.se1``) when they are installed."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterator

__all__ = [
    "DEFAULT_ENV_KEYS",
    "get_se_ephe_path",
    "iter_candidate_paths",
]

DEFAULT_ENV_KEYS: tuple[str, ...] = (
    "SE_EPHE_PATH",
    "SWE_EPH_PATH",
    "VEDICCLOCK_EPHEMERIS_PATH",
)
"""Environment variables consulted, first match wins."""

_SYSTEM_DIRS: tuple[Path, ...] = (
    Path("~/.sweph"),
    Path("/usr/share/sweph"),
    Path("/usr/share/libswisseph"),
)


def _raw_candidates(explicit: str | os.PathLike[str] | None) -> Iterator[str | os.PathLike[str]]:
    if explicit:
        yield explicit
    env_value = next((os.environ[key] for key in DEFAULT_ENV_KEYS if os.environ.get(key)), None)
    if env_value:
        yield env_value
    yield from _SYSTEM_DIRS


def iter_candidate_paths(explicit: str | os.PathLike[str] | None = None) -> Iterator[str]:
    """Yield existing data directories: ``explicit``, then env, then system dirs."""

    seen: set[str] = set()
    for raw in _raw_candidates(explicit):
        path = Path(raw).expanduser()
        key = str(path)
        if key in seen or not path.is_dir():
            continue
        seen.add(key)
        yield key


def get_se_ephe_path(explicit: str | os.PathLike[str] | None = None) -> str | None:
    """Return the first data directory found or ``None``.

    ``None`` is a valid outcome: pyswisseph then falls back to its built-in
    Moshier theory, which is ample for calendar work.
    """

    return next(iter_candidate_paths(explicit), None)

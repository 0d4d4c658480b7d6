"""Configuration models and helpers for vedicclock settings."""

from __future__ import annotations

import logging
import os
from copy import deepcopy
from pathlib import Path
from typing import Literal, Optional

import yaml
from pydantic import BaseModel, Field, field_validator

__all__ = [
    "CONFIG_FILENAME",
    "CURRENT_SETTINGS_SCHEMA_VERSION",
    "EphemerisCfg",
    "RateCfg",
    "Settings",
    "SunriseCfg",
    "config_path",
    "default_settings",
    "get_config_home",
    "load_settings",
    "save_settings",
]

LOG = logging.getLogger(__name__)

CURRENT_SETTINGS_SCHEMA_VERSION = 1

# -------------------- Settings Schema --------------------


class EphemerisCfg(BaseModel):
    """Ephemeris backend and zodiac selection."""

    path: Optional[str] = None
    zodiac: Literal["tropical", "sidereal"] = "tropical"
    ayanamsha: Literal[
        "lahiri",
        "fagan_bradley",
        "krishnamurti",
        "raman",
        "deluce",
    ] = "lahiri"

    @field_validator("path", mode="before")
    @classmethod
    def _blank_path_is_none(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            return None
        return value


class RateCfg(BaseModel):
    """Finite-difference probe used for the time-to-next-boundary estimates."""

    probe_minutes: float = Field(default=60.0, gt=0.0, le=24 * 60.0)


class SunriseCfg(BaseModel):
    """Sunrise search options."""

    search_window_days: float = Field(default=1.0, gt=0.0, le=3.0)


class Settings(BaseModel):
    """Root settings object."""

    schema_version: int = CURRENT_SETTINGS_SCHEMA_VERSION
    ephemeris: EphemerisCfg = Field(default_factory=EphemerisCfg)
    rates: RateCfg = Field(default_factory=RateCfg)
    sunrise: SunriseCfg = Field(default_factory=SunriseCfg)


# -------------------- I/O Helpers --------------------

CONFIG_FILENAME = "config.yaml"


def get_config_home() -> Path:
    """Return the directory where settings are looked up."""

    return Path(os.environ.get("VEDICCLOCK_HOME", str(Path.home() / ".vedicclock")))


def config_path() -> Path:
    """Return the full path to the configuration file."""

    return get_config_home() / CONFIG_FILENAME


def default_settings() -> Settings:
    """Return a fresh :class:`Settings` with every default applied."""

    return Settings()


def save_settings(settings: Settings, path: Optional[Path] = None) -> Path:
    """Write ``settings`` as YAML and return the path written."""

    target_path = Path(path) if path else config_path()
    target_path.parent.mkdir(parents=True, exist_ok=True)
    data = settings.model_dump()
    with target_path.open("w", encoding="utf-8") as handle:
        yaml.safe_dump(data, handle, sort_keys=False, allow_unicode=True)
    return target_path


def _coerce_schema_version(raw: object) -> int:
    """Coerce a raw ``schema_version`` to an int no lower than 1."""

    try:
        value = int(raw)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return 1
    return max(1, value)


def load_settings(path: Optional[Path] = None) -> Settings:
    """Load settings from disk, falling back to defaults if the file is missing.

    Unlike a desktop app the library never writes a config file on its own;
    a missing file simply means "use defaults".
    """

    source_path = Path(path) if path else config_path()
    if not source_path.exists():
        LOG.debug("No settings file at %s; using defaults", source_path)
        return default_settings()
    with source_path.open("r", encoding="utf-8") as handle:
        raw = yaml.safe_load(handle) or {}
    if not isinstance(raw, dict):
        LOG.warning("Ignoring malformed settings file %s", source_path)
        raw = {}
    data = deepcopy(raw)
    data["schema_version"] = min(
        _coerce_schema_version(raw.get("schema_version")),
        CURRENT_SETTINGS_SCHEMA_VERSION,
    )
    return Settings(**data)

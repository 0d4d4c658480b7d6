"""Settings for the calendar core."""

from .settings import (
    EphemerisCfg,
    RateCfg,
    Settings,
    SunriseCfg,
    config_path,
    default_settings,
    load_settings,
    save_settings,
)

__all__ = [
    "EphemerisCfg",
    "RateCfg",
    "Settings",
    "SunriseCfg",
    "config_path",
    "default_settings",
    "load_settings",
    "save_settings",
]

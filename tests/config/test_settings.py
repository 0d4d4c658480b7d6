from __future__ import annotations

from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

from vedicclock.config.settings import (
    CURRENT_SETTINGS_SCHEMA_VERSION,
    Settings,
    config_path,
    default_settings,
    get_config_home,
    load_settings,
    save_settings,
)


def test_defaults() -> None:
    settings = default_settings()
    assert settings.schema_version == CURRENT_SETTINGS_SCHEMA_VERSION
    assert settings.ephemeris.zodiac == "tropical"
    assert settings.ephemeris.ayanamsha == "lahiri"
    assert settings.rates.probe_minutes == 60.0
    assert settings.sunrise.search_window_days == 1.0


def test_config_home_follows_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("VEDICCLOCK_HOME", str(tmp_path))
    assert get_config_home() == tmp_path
    assert config_path() == tmp_path / "config.yaml"


def test_missing_file_returns_defaults_without_writing(tmp_path: Path) -> None:
    target = tmp_path / "absent.yaml"
    assert load_settings(target) == default_settings()
    assert not target.exists()


def test_round_trip(tmp_path: Path) -> None:
    settings = Settings.model_validate(
        {
            "ephemeris": {"zodiac": "sidereal", "ayanamsha": "krishnamurti", "path": "   "},
            "rates": {"probe_minutes": 30},
        }
    )
    assert settings.ephemeris.path is None

    target = save_settings(settings, tmp_path / "nested" / "config.yaml")
    assert target.exists()
    loaded = load_settings(target)
    assert loaded == settings
    assert loaded.rates.probe_minutes == 30.0


def test_schema_version_is_clamped(tmp_path: Path) -> None:
    target = tmp_path / "config.yaml"
    target.write_text(yaml.safe_dump({"schema_version": 99}), encoding="utf-8")
    assert load_settings(target).schema_version == CURRENT_SETTINGS_SCHEMA_VERSION

    target.write_text(yaml.safe_dump({"schema_version": "bogus"}), encoding="utf-8")
    assert load_settings(target).schema_version == 1


def test_malformed_file_falls_back(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    target = tmp_path / "config.yaml"
    target.write_text("- just\n- a list\n", encoding="utf-8")
    assert load_settings(target) == default_settings()
    assert "malformed" in caplog.text


@pytest.mark.parametrize(
    "payload",
    [
        {"rates": {"probe_minutes": 0}},
        {"sunrise": {"search_window_days": 5}},
        {"ephemeris": {"zodiac": "draconic"}},
    ],
)
def test_invalid_values_rejected(payload: dict) -> None:
    with pytest.raises(ValidationError):
        Settings.model_validate(payload)

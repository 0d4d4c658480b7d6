from __future__ import annotations

import importlib.util
import warnings

import pytest

from tests.fakes import FakeProvider
from vedicclock.core.location import ObserverLocation

if importlib.util.find_spec("swisseph") is None:
    warnings.warn(
        "pyswisseph not installed; Swiss Ephemeris tests will be skipped.",
        RuntimeWarning,
        stacklevel=1,
    )


@pytest.fixture
def fake_provider() -> FakeProvider:
    return FakeProvider()


@pytest.fixture
def new_delhi() -> ObserverLocation:
    return ObserverLocation(latitude=28.6139, longitude=77.2090)


@pytest.fixture(autouse=True)
def _isolated_config_home(tmp_path, monkeypatch) -> None:
    monkeypatch.setenv("VEDICCLOCK_HOME", str(tmp_path / "vedicclock-home"))

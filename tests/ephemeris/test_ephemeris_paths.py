from __future__ import annotations

from pathlib import Path

import pytest

from tests.fakes import FakeProvider
from vedicclock.ephemeris import EphemerisProvider
from vedicclock.ephemeris.utils import DEFAULT_ENV_KEYS, get_se_ephe_path, iter_candidate_paths


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in DEFAULT_ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


def test_explicit_directory_wins(tmp_path: Path, clean_env: None) -> None:
    assert get_se_ephe_path(tmp_path) == str(tmp_path)


def test_environment_directory_used(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, clean_env: None
) -> None:
    monkeypatch.setenv("SE_EPHE_PATH", str(tmp_path))
    assert get_se_ephe_path() == str(tmp_path)


def test_missing_directories_skipped(tmp_path: Path, clean_env: None) -> None:
    missing = tmp_path / "does-not-exist"
    assert str(missing) not in list(iter_candidate_paths(missing))


def test_candidates_are_unique(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SE_EPHE_PATH", str(tmp_path))
    candidates = list(iter_candidate_paths(tmp_path))
    assert candidates.count(str(tmp_path)) == 1


def test_fake_provider_satisfies_protocol() -> None:
    assert isinstance(FakeProvider(), EphemerisProvider)

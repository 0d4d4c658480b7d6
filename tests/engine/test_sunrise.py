from __future__ import annotations

import logging
from datetime import UTC, datetime, timedelta, timezone

import pytest

from tests.fakes import FakeProvider
from vedicclock.core.location import ObserverLocation
from vedicclock.engine.observational.sun import most_recent_sunrise, sunrise_after

LOCATION = ObserverLocation(latitude=28.6139, longitude=77.2090)
IST = timezone(timedelta(hours=5, minutes=30))


def test_sunrise_after_midnight(fake_provider: FakeProvider) -> None:
    rise = sunrise_after(datetime(2024, 1, 1, tzinfo=UTC), LOCATION, provider=fake_provider)
    assert rise == datetime(2024, 1, 1, 6, 0, tzinfo=UTC)


def test_sunrise_outside_window_is_ignored(fake_provider: FakeProvider) -> None:
    start = datetime(2024, 1, 1, tzinfo=UTC)
    assert sunrise_after(start, LOCATION, provider=fake_provider, window=timedelta(hours=2)) is None


def test_most_recent_sunrise_same_day(fake_provider: FakeProvider) -> None:
    moment = datetime(2024, 1, 1, 9, 0, tzinfo=UTC)
    assert most_recent_sunrise(moment, LOCATION, provider=fake_provider) == datetime(
        2024, 1, 1, 6, 0, tzinfo=UTC
    )


def test_most_recent_sunrise_before_dawn_uses_previous_day(fake_provider: FakeProvider) -> None:
    moment = datetime(2024, 1, 1, 3, 0, tzinfo=UTC)
    assert most_recent_sunrise(moment, LOCATION, provider=fake_provider) == datetime(
        2023, 12, 31, 6, 0, tzinfo=UTC
    )


def test_sunrise_exactly_now_counts(fake_provider: FakeProvider) -> None:
    moment = datetime(2024, 1, 1, 6, 0, tzinfo=UTC)
    assert most_recent_sunrise(moment, LOCATION, provider=fake_provider) == moment


def test_local_midnight_follows_instant_offset(fake_provider: FakeProvider) -> None:
    # 03:00 IST on Jan 1 is 21:30 UTC on Dec 31, after that day's 06:00 UTC sunrise.
    moment = datetime(2024, 1, 1, 3, 0, tzinfo=IST)
    rise = most_recent_sunrise(moment, LOCATION, provider=fake_provider)
    assert rise == datetime(2023, 12, 31, 6, 0, tzinfo=UTC)
    assert rise.tzinfo is UTC


def test_naive_instants_are_utc(fake_provider: FakeProvider) -> None:
    rise = most_recent_sunrise(datetime(2024, 1, 1, 9, 0), LOCATION, provider=fake_provider)
    assert rise == datetime(2024, 1, 1, 6, 0, tzinfo=UTC)


def test_polar_fallback_is_local_midnight(caplog: pytest.LogCaptureFixture) -> None:
    provider = FakeProvider(sunrise_hour=None)
    moment = datetime(2024, 1, 1, 3, 0, tzinfo=IST)
    with caplog.at_level(logging.WARNING, logger="vedicclock.engine.observational.sun"):
        rise = most_recent_sunrise(moment, LOCATION, provider=provider)
    assert rise == datetime(2024, 1, 1, 0, 0, tzinfo=IST)
    assert rise.tzinfo is UTC
    assert "using local midnight" in caplog.text

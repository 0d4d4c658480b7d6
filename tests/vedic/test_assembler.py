from __future__ import annotations

import logging
from datetime import UTC, datetime, timedelta, timezone

import pytest

from tests.fakes import FakeProvider
from vedicclock.config.settings import Settings
from vedicclock.core.location import ObserverLocation
from vedicclock.engine.vedic.assembler import VedicTimeAssembler, compute_vedic_time
from vedicclock.engine.vedic.nakshatra import NAKSHATRA_ARC_DEGREES
from vedicclock.errors import EphemerisError, InvalidLocationError

MOMENT = datetime(2024, 1, 1, 9, 0, tzinfo=UTC)


def test_snapshot_from_fake_ephemeris(fake_provider: FakeProvider, new_delhi: ObserverLocation) -> None:
    snapshot = compute_vedic_time(MOMENT, new_delhi, provider=fake_provider)

    assert snapshot.calculated_for == MOMENT
    assert snapshot.location == new_delhi

    # Elongation 100 deg at midnight plus 9 h of relative motion.
    assert snapshot.elongation == pytest.approx(100.0 + (13.176 - 0.9856) * 0.375)
    assert snapshot.tithi_number == 9
    assert snapshot.paksha == "Shukla"
    assert snapshot.tithi.name == "Navami"

    assert snapshot.moon_longitude == pytest.approx(20.0 + 13.176 * 0.375)
    assert snapshot.nakshatra_number == 2
    assert snapshot.nakshatra.name == "Bharani"
    assert snapshot.nakshatra.rashi.name == "Mesha"

    assert snapshot.sun_longitude == pytest.approx(280.0 + 0.9856 * 0.375)
    assert snapshot.masa_number == 10
    assert snapshot.masa.name == "Pausha"

    # Three hours after the 06:00 sunrise.
    assert snapshot.muhurta.sunrise == datetime(2024, 1, 1, 6, 0, tzinfo=UTC)
    assert snapshot.muhurta_number == 4
    assert snapshot.muhurta.name == "Pitri"
    assert snapshot.prana.number == 2700
    assert snapshot.prana.pranas_to_next_muhurta == 180
    assert snapshot.prana.sunrise == snapshot.muhurta.sunrise

    assert snapshot.moon_phase_fraction == pytest.approx(snapshot.elongation / 360.0)
    assert 0.0 <= snapshot.illumination_percent <= 100.0


def test_minutes_to_next_boundaries(fake_provider: FakeProvider, new_delhi: ObserverLocation) -> None:
    snapshot = compute_vedic_time(MOMENT, new_delhi, provider=fake_provider)
    elongation_rate = (13.176 - 0.9856) / 24.0
    moon_rate = 13.176 / 24.0

    expected_tithi = (108.0 - snapshot.elongation) / elongation_rate * 60.0
    assert snapshot.tithi.minutes_to_next == pytest.approx(expected_tithi, rel=1e-6)

    expected_nakshatra = (2 * NAKSHATRA_ARC_DEGREES - snapshot.moon_longitude) / moon_rate * 60.0
    assert snapshot.nakshatra.minutes_to_next == pytest.approx(expected_nakshatra, rel=1e-6)


def test_location_call_shapes_agree(fake_provider: FakeProvider) -> None:
    by_tuple = compute_vedic_time(MOMENT, (28.6139, 77.2090), provider=fake_provider)
    by_keywords = compute_vedic_time(
        MOMENT, latitude=28.6139, longitude=77.2090, provider=fake_provider
    )
    assert by_tuple == by_keywords


def test_repeated_computation_is_deterministic(
    fake_provider: FakeProvider, new_delhi: ObserverLocation
) -> None:
    assembler = VedicTimeAssembler(provider=fake_provider)
    assert assembler.compute(MOMENT, new_delhi) == assembler.compute(MOMENT, new_delhi)


def test_aware_instant_is_reported_in_utc(
    fake_provider: FakeProvider, new_delhi: ObserverLocation
) -> None:
    ist = timezone(timedelta(hours=5, minutes=30))
    snapshot = compute_vedic_time(
        datetime(2024, 1, 1, 14, 30, tzinfo=ist), new_delhi, provider=fake_provider
    )
    assert snapshot.calculated_for == MOMENT
    assert snapshot.calculated_for.tzinfo is UTC


def test_ephemeris_failure_propagates(new_delhi: ObserverLocation) -> None:
    with pytest.raises(EphemerisError):
        compute_vedic_time(MOMENT, new_delhi, provider=FakeProvider(fail=True))


def test_invalid_location_rejected_before_ephemeris(fake_provider: FakeProvider) -> None:
    with pytest.raises(InvalidLocationError):
        compute_vedic_time(MOMENT, (95.0, 0.0), provider=fake_provider)


def test_stationary_luminaries_leave_end_times_unknown(
    new_delhi: ObserverLocation, caplog: pytest.LogCaptureFixture
) -> None:
    provider = FakeProvider(sun_rate=0.0, moon_rate=0.0)
    with caplog.at_level(logging.WARNING):
        snapshot = compute_vedic_time(MOMENT, new_delhi, provider=provider)
    assert snapshot.tithi.minutes_to_next is None
    assert snapshot.nakshatra.minutes_to_next is None
    assert snapshot.tithi_number == 9


def test_polar_conditions_count_from_midnight(new_delhi: ObserverLocation) -> None:
    snapshot = compute_vedic_time(MOMENT, new_delhi, provider=FakeProvider(sunrise_hour=None))
    assert snapshot.muhurta.sunrise == datetime(2024, 1, 1, tzinfo=UTC)
    # 540 minutes after midnight.
    assert snapshot.muhurta_number == 12
    assert snapshot.prana.number == 8100


def test_probe_comes_from_settings(new_delhi: ObserverLocation) -> None:
    settings = Settings.model_validate({"rates": {"probe_minutes": 10}})
    assembler = VedicTimeAssembler(provider=FakeProvider(), settings=settings)
    assert assembler.probe == timedelta(minutes=10)
    assert assembler.sunrise_window == timedelta(days=1)
    snapshot = assembler.compute(MOMENT, new_delhi)
    assert snapshot.tithi.minutes_to_next is not None


def test_to_dict(fake_provider: FakeProvider, new_delhi: ObserverLocation) -> None:
    payload = compute_vedic_time(MOMENT, new_delhi, provider=fake_provider).to_dict()
    assert payload["calculated_for"] == "2024-01-01T09:00:00+00:00"
    assert payload["tithi"]["number"] == 9
    assert payload["tithi"]["is_purnima"] is False
    assert payload["muhurta"]["sunrise"] == "2024-01-01T06:00:00+00:00"
    assert payload["nakshatra"]["rashi"]["name"] == "Mesha"
    assert payload["location"]["latitude"] == pytest.approx(28.6139)

from __future__ import annotations

import pytest

from vedicclock.core.angles import EPSILON_DEG, forward_delta, normalize_degrees
from vedicclock.engine.vedic.nakshatra import (
    NAKSHATRA_ARC_DEGREES,
    nakshatra_number,
    nakshatra_pada,
)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (0.0, 0.0),
        (360.0, 0.0),
        (-10.0, 350.0),
        (725.5, 5.5),
        (-720.0, 0.0),
        (359.5, 359.5),
    ],
)
def test_normalize_degrees(value: float, expected: float) -> None:
    assert normalize_degrees(value) == pytest.approx(expected)


def test_normalize_degrees_collapses_values_just_below_full_circle() -> None:
    assert normalize_degrees(360.0 - EPSILON_DEG / 2.0) == 0.0
    assert normalize_degrees(-1e-12) == 0.0


@pytest.mark.parametrize(
    ("start", "end", "expected"),
    [
        (10.0, 20.0, 10.0),
        (350.0, 5.0, 15.0),
        (20.0, 10.0, 350.0),
        (0.0, 0.0, 0.0),
    ],
)
def test_forward_delta_is_counter_clockwise(start: float, end: float, expected: float) -> None:
    assert forward_delta(start, end) == pytest.approx(expected)


def test_normalize_degrees_keeps_in_range_values() -> None:
    for step in range(3600):
        value = step / 10.0
        assert normalize_degrees(value) == value


@pytest.mark.parametrize("k", range(27))
def test_nakshatra_boundaries_survive_normalization(k: int) -> None:
    boundary = k * NAKSHATRA_ARC_DEGREES
    assert normalize_degrees(boundary) == boundary
    assert nakshatra_number(boundary) == int(boundary // NAKSHATRA_ARC_DEGREES) + 1


def test_first_nakshatra_boundary_starts_bharani() -> None:
    assert nakshatra_number(NAKSHATRA_ARC_DEGREES) == 2
    assert nakshatra_pada(NAKSHATRA_ARC_DEGREES) == 1
    assert nakshatra_number(4 * NAKSHATRA_ARC_DEGREES) == int(
        (4 * NAKSHATRA_ARC_DEGREES) // NAKSHATRA_ARC_DEGREES
    ) + 1

from __future__ import annotations

import math

import pytest

from vedicclock.core.location import ObserverLocation, coerce_location
from vedicclock.errors import InvalidLocationError, VedicClockError


def test_valid_location() -> None:
    location = ObserverLocation(latitude=28.6139, longitude=77.2090)
    assert location.as_geopos() == (77.2090, 28.6139, 0.0)


@pytest.mark.parametrize(
    ("latitude", "longitude"),
    [
        (90.5, 0.0),
        (-91.0, 0.0),
        (0.0, 180.1),
        (0.0, -200.0),
        (math.nan, 0.0),
        (0.0, math.nan),
        ("north", 0.0),
    ],
)
def test_invalid_location_rejected(latitude: object, longitude: object) -> None:
    with pytest.raises(InvalidLocationError):
        ObserverLocation(latitude=latitude, longitude=longitude)  # type: ignore[arg-type]


def test_invalid_location_is_value_error() -> None:
    with pytest.raises(ValueError):
        ObserverLocation(latitude=100.0, longitude=0.0)
    assert issubclass(InvalidLocationError, VedicClockError)


def test_poles_and_antimeridian_are_valid() -> None:
    ObserverLocation(latitude=90.0, longitude=180.0)
    ObserverLocation(latitude=-90.0, longitude=-180.0)


def test_coerce_location_shapes() -> None:
    expected = ObserverLocation(latitude=10.0, longitude=20.0)
    assert coerce_location(expected) is expected
    assert coerce_location((10.0, 20.0)) == expected
    assert coerce_location(latitude=10.0, longitude=20.0) == expected


def test_coerce_location_requires_both_coordinates() -> None:
    with pytest.raises(InvalidLocationError):
        coerce_location(latitude=10.0)
    with pytest.raises(InvalidLocationError):
        coerce_location((1.0, 2.0, 3.0))  # type: ignore[arg-type]

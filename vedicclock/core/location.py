"""Observer location record."""

from __future__ import annotations

import math
from dataclasses import dataclass

from ..errors import InvalidLocationError

__all__ = ["ObserverLocation", "coerce_location"]


@dataclass(frozen=True, slots=True)
class ObserverLocation:
    """Geodetic observer position in decimal degrees.

    Out-of-range coordinates are rejected rather than wrapped: a latitude
    of 95° is a data entry error, not a point on the globe.
    """

    latitude: float
    longitude: float
    elevation_m: float = 0.0

    def __post_init__(self) -> None:
        try:
            lat = float(self.latitude)
            lon = float(self.longitude)
        except (TypeError, ValueError) as exc:
            raise InvalidLocationError("latitude and longitude must be numeric") from exc
        if math.isnan(lat) or not -90.0 <= lat <= 90.0:
            raise InvalidLocationError(f"latitude must lie within [-90, 90], got {self.latitude!r}")
        if math.isnan(lon) or not -180.0 <= lon <= 180.0:
            raise InvalidLocationError(
                f"longitude must lie within [-180, 180], got {self.longitude!r}"
            )
        object.__setattr__(self, "latitude", lat)
        object.__setattr__(self, "longitude", lon)
        object.__setattr__(self, "elevation_m", float(self.elevation_m))

    def as_geopos(self) -> tuple[float, float, float]:
        """Return ``(longitude, latitude, elevation)`` as Swiss Ephemeris expects."""

        return (self.longitude, self.latitude, self.elevation_m)


def coerce_location(
    location: ObserverLocation | tuple[float, float] | None = None,
    *,
    latitude: float | None = None,
    longitude: float | None = None,
) -> ObserverLocation:
    """Return an :class:`ObserverLocation` from the accepted call shapes."""

    if isinstance(location, ObserverLocation):
        return location
    if location is not None:
        try:
            lat, lon = location
        except (TypeError, ValueError) as exc:
            raise InvalidLocationError(
                "location must be an ObserverLocation or a (latitude, longitude) pair"
            ) from exc
        return ObserverLocation(latitude=lat, longitude=lon)
    if latitude is None or longitude is None:
        raise InvalidLocationError("latitude and longitude are both required")
    return ObserverLocation(latitude=latitude, longitude=longitude)

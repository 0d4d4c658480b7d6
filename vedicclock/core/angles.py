"""Angular utilities shared by every calendar calculator.

Ecliptic longitudes and Sun–Moon separations are compared across the
0°/360° seam constantly.  Raw modulo arithmetic behaves differently for
negative operands across languages and leaves values a hair below 360°
after floating point round-off, so the helpers here centralise the
wrap-around contract used by the tithi, nakshatra and masa partitions.
"""

from __future__ import annotations

import math
from typing import Final

__all__ = [
    "EPSILON_DEG",
    "FULL_CIRCLE_DEG",
    "forward_delta",
    "normalize_degrees",
]


FULL_CIRCLE_DEG: Final[float] = 360.0
EPSILON_DEG: Final[float] = 1e-9


def normalize_degrees(angle: float) -> float:
    """Return ``angle`` normalised to the ``[0, 360)`` interval.

    In-range inputs are returned unchanged, so partition boundaries such
    as ``k * 360 / 27`` classify exactly as ``floor(angle / span)`` says.

    Parameters
    ----------
    angle:
        Value in **degrees**. Inputs outside the canonical range are
        wrapped by multiples of 360°.

    Returns
    -------
    float
        A degree value in ``[0, 360)``. Values within ``1e-9`` of
        ``360`` are coerced to ``0`` so partition helpers never produce
        a thirty-first tithi or a twenty-eighth nakshatra.
    """

    wrapped = math.fmod(float(angle), FULL_CIRCLE_DEG)
    if wrapped < 0.0:
        wrapped += FULL_CIRCLE_DEG
    if wrapped >= FULL_CIRCLE_DEG - EPSILON_DEG:
        wrapped = 0.0
    return wrapped


def forward_delta(start: float, end: float) -> float:
    """Return the forward separation travelled from ``start`` to ``end``.

    Both bodies used by the calendar only move forward in longitude on the
    timescales probed here, so a negative raw difference means the angle
    crossed 0° and is wrapped by adding a full turn.
    """

    return normalize_degrees(float(end) - float(start))

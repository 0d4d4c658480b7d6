"""Core math and time helpers."""

from .angles import EPSILON_DEG, FULL_CIRCLE_DEG, forward_delta, normalize_degrees
from .location import ObserverLocation
from .time import SECONDS_PER_DAY, elapsed_seconds, ensure_utc, local_midnight

__all__ = [
    "EPSILON_DEG",
    "FULL_CIRCLE_DEG",
    "ObserverLocation",
    "SECONDS_PER_DAY",
    "elapsed_seconds",
    "ensure_utc",
    "forward_delta",
    "local_midnight",
    "normalize_degrees",
]

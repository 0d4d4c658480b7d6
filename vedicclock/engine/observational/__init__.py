"""Observer-dependent events such as sunrise."""

from .sun import DEFAULT_SEARCH_WINDOW, most_recent_sunrise, sunrise_after

__all__ = ["DEFAULT_SEARCH_WINDOW", "most_recent_sunrise", "sunrise_after"]

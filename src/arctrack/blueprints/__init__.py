"""Blueprint exports."""

from . import daily, profile, reviews, stats

__all__ = [
    "daily",
    "profile",
    "reviews",
    "stats",
]

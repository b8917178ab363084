"""Shared constants."""

from .targets import (
    CATEGORIES,
    DAILY_MAX_SCORE,
    DAYS_PER_WEEK,
    DEFAULT_TIMEZONE,
    PUSHUP_SETS,
    STUDY_BLOCKS_COUNT,
    TOTAL_DAYS,
    TOTAL_WEEKS,
    WATER_BOTTLES_COUNT,
)

__all__ = [
    "CATEGORIES",
    "DAILY_MAX_SCORE",
    "DAYS_PER_WEEK",
    "DEFAULT_TIMEZONE",
    "PUSHUP_SETS",
    "STUDY_BLOCKS_COUNT",
    "TOTAL_DAYS",
    "TOTAL_WEEKS",
    "WATER_BOTTLES_COUNT",
]

"""SQLModel repository implementations."""

from .daily_entry import SQLModelDailyEntryRepository
from .profile import SQLModelProfileRepository
from .review import SQLModelWeeklyReviewRepository

__all__ = [
    "SQLModelDailyEntryRepository",
    "SQLModelProfileRepository",
    "SQLModelWeeklyReviewRepository",
]

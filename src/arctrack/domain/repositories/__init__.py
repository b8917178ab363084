"""Repository protocols for the persistence collaborator."""

from .daily_entry import DailyEntryRepository
from .profile import ProfileRepository
from .review import WeeklyReviewRepository

__all__ = ["DailyEntryRepository", "ProfileRepository", "WeeklyReviewRepository"]

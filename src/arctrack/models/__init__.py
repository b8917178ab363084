"""SQLModel table exports."""

from .daily_entry import DailyEntry, default_entry_payload
from .profile import Profile
from .review import WeeklyReview

__all__ = [
    "DailyEntry",
    "Profile",
    "WeeklyReview",
    "default_entry_payload",
]

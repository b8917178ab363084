"""Domain layer: normalised records and repository protocols."""

from .records import HabitRecord, Meditation, Pushups, Reading, StudyBlock

__all__ = ["HabitRecord", "Meditation", "Pushups", "Reading", "StudyBlock"]

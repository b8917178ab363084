"""Core habit targets for the 90-day arc.

Every target is worth exactly one point; a perfect day scores DAILY_MAX_SCORE.
"""

TOTAL_DAYS = 90
TOTAL_WEEKS = 13
DAYS_PER_WEEK = 7
DAILY_MAX_SCORE = 5

STUDY_BLOCKS_COUNT = 4
WATER_BOTTLES_COUNT = 8
PUSHUP_SETS = ("set1", "set2", "set3")

DEFAULT_TIMEZONE = "Asia/Kolkata"

# Category keys accepted by the completion aggregator
CATEGORIES = ("study", "reading", "pushups", "meditation", "water")

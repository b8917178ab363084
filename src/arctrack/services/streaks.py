"""Current and longest perfect-day streaks."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import Any, Iterable, Optional

from ..constants import DAILY_MAX_SCORE
from .dates import to_date

logger = logging.getLogger("arctrack.services.streaks")

STRONG_STREAK_DAYS = 7


@dataclass(frozen=True, slots=True)
class StreakSummary:
    current_streak: int = 0
    longest_streak: int = 0

    def to_dict(self) -> dict[str, int]:
        return {"currentStreak": self.current_streak, "longestStreak": self.longest_streak}


@dataclass(frozen=True, slots=True)
class _DayScore:
    day: date
    score: Any
    updated_at: Optional[datetime]


def _field(entry: Any, name: str) -> Any:
    if isinstance(entry, Mapping):
        return entry.get(name)
    return getattr(entry, name, None)


def _collect(entries: Iterable[Any]) -> list[_DayScore]:
    """Index entries by date, keeping one record per date.

    When a date appears twice the record with the latest ``updated_at`` wins;
    without timestamps the last one seen wins.
    """

    by_day: dict[date, _DayScore] = {}
    for entry in entries:
        raw_date = _field(entry, "entry_date")
        try:
            day = to_date(raw_date)
        except (TypeError, ValueError):
            logger.warning("Skipping entry with unreadable date", extra={"entry_date": raw_date})
            continue
        updated_at = _field(entry, "updated_at")
        if not isinstance(updated_at, datetime):
            updated_at = None
        elif updated_at.tzinfo is None:
            # SQLite hands back naive UTC timestamps
            updated_at = updated_at.replace(tzinfo=timezone.utc)
        candidate = _DayScore(day=day, score=_field(entry, "daily_score"), updated_at=updated_at)

        existing = by_day.get(day)
        if existing is not None:
            logger.warning("Duplicate entry for date", extra={"entry_date": day.isoformat()})
            if (
                existing.updated_at is not None
                and candidate.updated_at is not None
                and candidate.updated_at < existing.updated_at
            ):
                continue
        by_day[day] = candidate
    return list(by_day.values())


def _is_perfect(score: Any) -> bool:
    return not isinstance(score, bool) and score == DAILY_MAX_SCORE


def calculate_streaks(entries: Iterable[Any]) -> StreakSummary:
    """Compute current and longest streaks of perfect (5/5) days.

    The current streak walks back from the most recent record and stops at the
    first non-perfect one. Date gaps are not checked: callers are expected to
    supply one record per calendar date.
    """

    days = sorted(_collect(entries), key=lambda item: item.day, reverse=True)
    if not days:
        return StreakSummary()

    current = 0
    for item in days:
        if not _is_perfect(item.score):
            break
        current += 1

    longest = 0
    running = 0
    for item in reversed(days):
        if _is_perfect(item.score):
            running += 1
            longest = max(longest, running)
        else:
            running = 0

    return StreakSummary(current_streak=current, longest_streak=max(longest, current))


def streak_tier(streak: int) -> str:
    """Bucket a streak length for display: ``none``, ``building`` or ``strong``."""

    if streak <= 0:
        return "none"
    if streak < STRONG_STREAK_DAYS:
        return "building"
    return "strong"


__all__ = ["StreakSummary", "calculate_streaks", "streak_tier"]

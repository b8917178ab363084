"""Aggregated progress metrics for the dashboard and heatmap views."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Iterable

from ..constants import DAILY_MAX_SCORE, TOTAL_DAYS
from .dates import DateLike, date_range, to_date
from .scoring import calculate_all_target_completions
from .streaks import calculate_streaks

TREND_WINDOW_DAYS = 30


def _field(entry: Any, name: str) -> Any:
    if isinstance(entry, Mapping):
        return entry.get(name)
    return getattr(entry, name, None)


def _score(entry: Any) -> int:
    value = _field(entry, "daily_score")
    return value if isinstance(value, int) and not isinstance(value, bool) else 0


@dataclass(slots=True)
class DashboardStats:
    total_days: int = 0
    completed_days: int = 0
    completion_percentage: int = 0
    current_streak: int = 0
    longest_streak: int = 0
    target_completion_rates: dict[str, int] = field(default_factory=dict)
    weekly_average_score: float = 0.0
    trend_data: list[dict[str, Any]] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "totalDays": self.total_days,
            "completedDays": self.completed_days,
            "completionPercentage": self.completion_percentage,
            "currentStreak": self.current_streak,
            "longestStreak": self.longest_streak,
            "targetCompletionRates": dict(self.target_completion_rates),
            "weeklyAverageScore": self.weekly_average_score,
            "trendData": list(self.trend_data),
        }


def elapsed_arc_days(arc_start_date: DateLike, today: DateLike) -> int:
    """Whole days since the arc started, within ``[0, 90]``."""

    elapsed = (to_date(today) - to_date(arc_start_date)).days
    return max(0, min(elapsed, TOTAL_DAYS))


def build_dashboard_stats(
    entries: Iterable[Any], arc_start_date: DateLike, *, today: DateLike
) -> DashboardStats:
    """Summarise an arc's entries into the dashboard payload."""

    rows = sorted(entries, key=lambda entry: to_date(_field(entry, "entry_date")))
    total_days = elapsed_arc_days(arc_start_date, today)
    completed_days = sum(1 for entry in rows if _score(entry) == DAILY_MAX_SCORE)
    completion = (
        (200 * completed_days + total_days) // (2 * total_days) if total_days > 0 else 0
    )
    streaks = calculate_streaks(rows)
    average = round(sum(_score(entry) for entry in rows) / len(rows), 2) if rows else 0.0

    return DashboardStats(
        total_days=total_days,
        completed_days=completed_days,
        completion_percentage=completion,
        current_streak=streaks.current_streak,
        longest_streak=streaks.longest_streak,
        target_completion_rates=calculate_all_target_completions(rows),
        weekly_average_score=average,
        trend_data=[
            {"date": to_date(_field(entry, "entry_date")).isoformat(), "score": _score(entry)}
            for entry in rows[-TREND_WINDOW_DAYS:]
        ],
    )


def build_heatmap(entries: Iterable[Any], *, start: DateLike, end: DateLike) -> list[dict[str, Any]]:
    """One cell per day in ``[start, end]``; days without an entry score 0."""

    by_day: dict[date, Any] = {to_date(_field(entry, "entry_date")): entry for entry in entries}
    cells: list[dict[str, Any]] = []
    for day in date_range(start, end):
        entry = by_day.get(day)
        cells.append(
            {
                "date": day.isoformat(),
                "score": _score(entry) if entry is not None else 0,
                "isComplete": bool(_field(entry, "is_complete")) if entry is not None else False,
            }
        )
    return cells


__all__ = ["DashboardStats", "build_dashboard_stats", "build_heatmap", "elapsed_arc_days"]

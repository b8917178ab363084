"""Pure computational services: dates, scoring, streaks, scorecard and summaries.

``services.daily_entries`` touches the models and is imported explicitly.
"""

from .dashboard import DashboardStats, build_dashboard_stats, build_heatmap
from .dates import day_number, is_future_date, today_in_timezone, week_number
from .scorecard import Scorecard, build_scorecard
from .scoring import (
    calculate_all_target_completions,
    calculate_daily_score,
    calculate_target_completion,
    is_day_complete,
)
from .streaks import StreakSummary, calculate_streaks
from .tasks import IncompleteTask, get_incomplete_tasks

__all__ = [
    "DashboardStats",
    "IncompleteTask",
    "Scorecard",
    "StreakSummary",
    "build_dashboard_stats",
    "build_heatmap",
    "build_scorecard",
    "calculate_all_target_completions",
    "calculate_daily_score",
    "calculate_streaks",
    "calculate_target_completion",
    "day_number",
    "get_incomplete_tasks",
    "is_day_complete",
    "is_future_date",
    "today_in_timezone",
    "week_number",
]

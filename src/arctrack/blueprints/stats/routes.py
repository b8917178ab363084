"""Statistics routes: streaks, scorecard, dashboard and heatmap."""

from __future__ import annotations

from datetime import timedelta

from flask import jsonify, request

from ...errors import ValidationError
from ...extensions import entry_repository
from ...identity import current_profile
from ...services.dashboard import build_dashboard_stats, build_heatmap
from ...services.dates import to_date, today_in_timezone
from ...services.scorecard import build_scorecard
from ...services.streaks import calculate_streaks, streak_tier
from . import bp

DEFAULT_HEATMAP_DAYS = 90
MAX_HEATMAP_DAYS = 365


@bp.get("/streak")
def streak():
    """Current and longest perfect-day streaks over the full history."""

    profile = current_profile()
    summary = calculate_streaks(entry_repository().list_all(profile.id))
    payload = summary.to_dict()
    payload["tier"] = streak_tier(summary.current_streak)
    return jsonify(payload)


@bp.get("/scorecard")
def scorecard():
    """Week-aligned grid of daily scores across the arc."""

    profile = current_profile()
    last_day = profile.arc_end_date - timedelta(days=1)
    scores = entry_repository().score_map(profile.id, profile.arc_start_date, last_day)
    grid = build_scorecard(profile.arc_start_date, profile.timezone, scores)
    return jsonify(grid.to_dict())


@bp.get("/dashboard")
def dashboard():
    """Aggregated arc progress metrics."""

    profile = current_profile()
    today = today_in_timezone(profile.timezone)
    entries = entry_repository().list_since(profile.id, profile.arc_start_date)
    stats = build_dashboard_stats(entries, profile.arc_start_date, today=today)
    return jsonify(stats.to_dict())


@bp.get("/heatmap")
def heatmap():
    """Daily scores for the last ``days`` days, one cell per day."""

    raw_days = request.args.get("days", str(DEFAULT_HEATMAP_DAYS))
    try:
        days = int(raw_days)
    except ValueError as exc:
        raise ValidationError("days must be an integer", field="days") from exc
    if not 1 <= days <= MAX_HEATMAP_DAYS:
        raise ValidationError(f"days must be between 1 and {MAX_HEATMAP_DAYS}", field="days")

    profile = current_profile()
    end = to_date(today_in_timezone(profile.timezone))
    start = end - timedelta(days=days)
    entries = entry_repository().list_range(profile.id, start, end)
    return jsonify(
        {
            "startDate": start.isoformat(),
            "endDate": end.isoformat(),
            "days": days,
            "data": build_heatmap(entries, start=start, end=end),
        }
    )

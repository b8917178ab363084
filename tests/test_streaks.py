"""Tests for perfect-day streak calculations.

These tests verify current and longest streaks, including edge cases like:
- Empty history
- A broken run followed by a new one
- Unsorted input and duplicate dates
"""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone

from arctrack.services.streaks import StreakSummary, calculate_streaks, streak_tier

from helpers import scored

D1 = date(2024, 1, 1)


def history(*scores: int) -> list[dict]:
    return [scored(D1 + timedelta(days=index), score) for index, score in enumerate(scores)]


class TestCurrentStreak:
    def test_empty_history(self):
        assert calculate_streaks([]) == StreakSummary(0, 0)

    def test_single_perfect_day(self):
        assert calculate_streaks(history(5)) == StreakSummary(1, 1)

    def test_all_imperfect_history(self):
        assert calculate_streaks(history(3, 4, 2)) == StreakSummary(0, 0)

    def test_recent_run_after_imperfect_day(self):
        summary = calculate_streaks(history(3, 5, 5, 5))

        assert summary.current_streak == 3
        assert summary.longest_streak == 3

    def test_longest_run_in_the_past(self):
        summary = calculate_streaks(history(5, 5, 5, 5, 5, 3, 5, 5))

        assert summary.current_streak == 2
        assert summary.longest_streak == 5

    def test_imperfect_latest_day_breaks_current(self):
        summary = calculate_streaks(history(5, 5, 4))

        assert summary.current_streak == 0
        assert summary.longest_streak == 2

    def test_input_order_does_not_matter(self):
        records = history(5, 5, 5, 5, 5, 3, 5, 5)
        assert calculate_streaks(list(reversed(records))) == calculate_streaks(records)

    def test_gaps_are_not_checked(self):
        records = [scored(date(2024, 1, 1), 5), scored(date(2024, 1, 10), 5)]
        assert calculate_streaks(records).current_streak == 2

    def test_appending_perfect_day_extends_or_starts_streak(self):
        for scores in [(), (5,), (5, 5), (3,), (5, 3), (5, 5, 2, 5)]:
            before = calculate_streaks(history(*scores))
            after = calculate_streaks(history(*scores, 5))
            if not scores or scores[-1] == 5:
                assert after.current_streak == before.current_streak + 1
            else:
                assert after.current_streak == 1
            assert after.longest_streak >= after.current_streak


class TestMalformedInput:
    def test_bool_score_is_not_perfect(self):
        assert calculate_streaks([scored(D1, True)]).current_streak == 0

    def test_missing_score_is_not_perfect(self):
        assert calculate_streaks([{"entry_date": D1}]).current_streak == 0

    def test_unreadable_dates_are_skipped(self):
        records = history(5, 5) + [{"entry_date": "not-a-date", "daily_score": 5}]
        assert calculate_streaks(records).current_streak == 2

    def test_accepts_iso_strings(self):
        records = [scored("2024-01-01", 5), scored("2024-01-02", 5)]
        assert calculate_streaks(records).longest_streak == 2


class TestDuplicateDates:
    def test_latest_update_wins(self):
        early = datetime(2024, 1, 2, 8, tzinfo=timezone.utc)
        late = datetime(2024, 1, 2, 20, tzinfo=timezone.utc)
        records = [
            scored(D1, 5),
            scored(D1 + timedelta(days=1), 5, updated_at=late),
            scored(D1 + timedelta(days=1), 2, updated_at=early),
        ]

        assert calculate_streaks(records).current_streak == 2

    def test_naive_and_aware_timestamps_mix(self):
        records = [
            scored(D1, 2, updated_at=datetime(2024, 1, 1, 23)),
            scored(D1, 5, updated_at=datetime(2024, 1, 1, 8, tzinfo=timezone.utc)),
        ]

        assert calculate_streaks(records).current_streak == 0

    def test_last_seen_wins_without_timestamps(self):
        records = [scored(D1, 2), scored(D1, 5)]
        assert calculate_streaks(records).current_streak == 1


def test_summary_to_dict():
    assert StreakSummary(2, 5).to_dict() == {"currentStreak": 2, "longestStreak": 5}


def test_streak_tiers():
    assert streak_tier(0) == "none"
    assert streak_tier(3) == "building"
    assert streak_tier(7) == "strong"

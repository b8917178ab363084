"""Tests for date and timezone resolution."""

from __future__ import annotations

from datetime import date, datetime, timezone

import pytest

from arctrack.errors import AppError, InvalidTimezoneError
from arctrack.services.dates import (
    add_days,
    arc_end_date,
    date_range,
    day_number,
    is_future_date,
    is_local_hour,
    local_hour,
    resolve_timezone,
    to_date,
    today_in_timezone,
    week_date_range,
    week_number,
)


class TestTimezones:
    def test_today_differs_across_zones(self):
        now = datetime(2024, 1, 1, 20, 0, tzinfo=timezone.utc)

        assert today_in_timezone("UTC", now=now) == "2024-01-01"
        assert today_in_timezone("Asia/Kolkata", now=now) == "2024-01-02"
        assert today_in_timezone("America/Los_Angeles", now=now) == "2024-01-01"

    def test_naive_now_is_read_as_utc(self):
        now = datetime(2024, 1, 1, 20, 0)
        assert today_in_timezone("Asia/Kolkata", now=now) == "2024-01-02"

    def test_spring_forward_shifts_offset(self):
        # EST is UTC-5 before 2024-03-10 07:00 UTC and EDT (UTC-4) after it.
        before = datetime(2024, 3, 10, 4, 30, tzinfo=timezone.utc)
        after = datetime(2024, 3, 11, 3, 30, tzinfo=timezone.utc)

        assert today_in_timezone("America/New_York", now=before) == "2024-03-09"
        assert local_hour("America/New_York", now=before) == 23
        assert today_in_timezone("America/New_York", now=after) == "2024-03-10"
        assert local_hour("America/New_York", now=after) == 23

    def test_fall_back_shifts_offset(self):
        # EDT ends at 2024-11-03 06:00 UTC.
        before = datetime(2024, 11, 3, 3, 30, tzinfo=timezone.utc)
        after = datetime(2024, 11, 4, 4, 30, tzinfo=timezone.utc)

        assert today_in_timezone("America/New_York", now=before) == "2024-11-02"
        assert today_in_timezone("America/New_York", now=after) == "2024-11-03"
        assert local_hour("America/New_York", now=after) == 23

    @pytest.mark.parametrize("bad", ["Mars/Olympus", "", "   ", None, 42])
    def test_invalid_timezone_raises(self, bad):
        with pytest.raises(InvalidTimezoneError) as excinfo:
            today_in_timezone(bad)

        assert excinfo.value.status_code == 400
        assert excinfo.value.code == "INVALID_TIMEZONE"

    def test_invalid_timezone_is_value_and_app_error(self):
        with pytest.raises(ValueError):
            resolve_timezone("Nowhere/Land")
        with pytest.raises(AppError):
            resolve_timezone("Nowhere/Land")

    def test_local_hour(self):
        now = datetime(2024, 1, 1, 22, 30, tzinfo=timezone.utc)

        assert local_hour("Asia/Kolkata", now=now) == 4
        assert is_local_hour("Asia/Kolkata", 4, now=now)
        assert not is_local_hour("UTC", 4, now=now)


class TestArcPosition:
    def test_day_zero_on_start_date(self):
        assert day_number("2024-01-01", "2024-01-01") == 0
        assert week_number("2024-01-01", "2024-01-01") == 1

    def test_day_and_week_numbers(self):
        start = date(2024, 1, 1)

        assert day_number(start, date(2024, 1, 2)) == 1
        assert week_number(start, date(2024, 1, 2)) == 1
        assert day_number(start, date(2024, 1, 8)) == 7
        assert week_number(start, date(2024, 1, 8)) == 1
        assert week_number(start, date(2024, 1, 9)) == 2

    def test_numbers_clamp_at_arc_end(self):
        start = date(2024, 1, 1)

        assert day_number(start, date(2024, 12, 31)) == 90
        assert week_number(start, date(2024, 12, 31)) == 13

    def test_partial_day_rounds_up(self):
        start = datetime(2024, 1, 1, 0, 0, tzinfo=timezone.utc)
        assert day_number(start, datetime(2024, 1, 1, 1, 0, tzinfo=timezone.utc)) == 1

    def test_before_start_uses_absolute_difference(self):
        assert day_number("2024-01-10", "2024-01-07") == 3

    def test_arc_end_is_exclusive_bound(self):
        assert arc_end_date("2024-01-01") == date(2024, 3, 31)


class TestDateHelpers:
    def test_is_future_date(self):
        assert is_future_date("2024-01-02", "2024-01-01")
        assert not is_future_date("2024-01-01", "2024-01-01")
        assert not is_future_date(datetime(2024, 1, 1, 23, 59), date(2024, 1, 1))

    def test_to_date_rejects_unknown_types(self):
        with pytest.raises(TypeError):
            to_date(20240101)

    def test_add_days_crosses_month(self):
        assert add_days("2024-01-31", 1) == "2024-02-01"

    def test_week_date_range(self):
        assert week_date_range("2024-01-01", 2) == (date(2024, 1, 8), date(2024, 1, 14))

    def test_date_range_inclusive(self):
        days = date_range("2024-01-01", "2024-01-03")
        assert days == [date(2024, 1, 1), date(2024, 1, 2), date(2024, 1, 3)]
        assert date_range("2024-01-03", "2024-01-01") == []

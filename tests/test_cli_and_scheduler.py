"""Tests for the Flask CLI commands and the daily reset scheduler."""

from __future__ import annotations

import json

from arctrack import scheduler as scheduler_module
from arctrack.extensions import profile_repository
from arctrack.scheduler import DAILY_RESET_JOB_ID, create_scheduler

from helpers import ARC_START


def create_profile(app, external_id="cli-user", timezone="UTC"):
    with app.app_context():
        return profile_repository().get_or_create(
            external_id, timezone=timezone, arc_start_date=ARC_START
        )


class TestCli:
    def test_ensure_today_creates_entries_once(self, app):
        create_profile(app)
        runner = app.test_cli_runner()

        first = runner.invoke(args=["arctrack-ensure-today"])
        second = runner.invoke(args=["arctrack-ensure-today"])

        assert first.exit_code == 0
        assert "Created 1 daily entry." in first.output
        assert "Created 0 daily entries." in second.output

    def test_ensure_today_rejects_bad_hour(self, app):
        result = app.test_cli_runner().invoke(args=["arctrack-ensure-today", "--hour", "25"])
        assert result.exit_code != 0

    def test_scorecard_prints_grid(self, app):
        create_profile(app)

        result = app.test_cli_runner().invoke(args=["arctrack-scorecard", "cli-user"])

        assert result.exit_code == 0
        grid = json.loads(result.output)
        real = [day for week in grid["weeks"] for day in week["days"] if not day.get("isEmpty")]
        assert len(real) == 90
        assert real[0]["date"] == ARC_START.isoformat()

    def test_scorecard_unknown_user(self, app):
        result = app.test_cli_runner().invoke(args=["arctrack-scorecard", "ghost"])

        assert result.exit_code != 0
        assert "No profile" in result.output


class TestScheduler:
    def test_daily_reset_uses_configured_hour(self, app, monkeypatch):
        calls = []

        def fake_reset(profiles, entries, *, hour=None, now=None):
            calls.append(hour)
            return 3

        monkeypatch.setattr(scheduler_module, "ensure_today_entries", fake_reset)
        app.config["ARCTRACK_CONFIG"].DAILY_RESET_HOUR = 5

        assert create_scheduler(app).run_daily_reset() == 3
        assert calls == [5]

    def test_daily_reset_failure_is_logged(self, app, monkeypatch, caplog):
        def broken_reset(*args, **kwargs):
            raise RuntimeError("db down")

        monkeypatch.setattr(scheduler_module, "ensure_today_entries", broken_reset)

        assert create_scheduler(app).run_daily_reset() == 0
        assert "Daily reset failed" in caplog.text

    def test_start_registers_hourly_job(self, app):
        scheduler = create_scheduler(app, auto_start=True)
        try:
            assert scheduler.running
            job = scheduler.scheduler.get_job(DAILY_RESET_JOB_ID)
            assert job is not None
            assert job.name == "Daily Entry Reset"
        finally:
            scheduler.stop()

        assert not scheduler.running

    def test_app_does_not_start_scheduler_under_tests(self, app):
        assert "arctrack_scheduler" not in app.extensions

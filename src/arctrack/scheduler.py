"""Background scheduler for the daily entry reset."""

from __future__ import annotations

import logging
from typing import Optional

from apscheduler.schedulers.background import BackgroundScheduler
from apscheduler.triggers.cron import CronTrigger
from flask import Flask

from .config import BaseConfig
from .extensions import EXTENSION_KEY
from .infra.repositories import SQLModelDailyEntryRepository, SQLModelProfileRepository
from .services.daily_entries import ensure_today_entries

logger = logging.getLogger("arctrack.scheduler")

DAILY_RESET_JOB_ID = "daily_reset"


class DailyResetScheduler:
    """Runs the hourly job that creates each user's entry at their local reset hour."""

    def __init__(self, app: Flask):
        """Initialize the scheduler for a configured Flask app.

        Args:
            app: Application whose database state is already initialized
        """
        self.app = app
        self.config: BaseConfig = app.config["ARCTRACK_CONFIG"]
        self.scheduler: Optional[BackgroundScheduler] = None

    def start(self) -> None:
        """Start the background scheduler."""
        if self.scheduler is not None:
            logger.warning("Scheduler already running")
            return

        self.scheduler = BackgroundScheduler(timezone="UTC")

        # Every user's local reset hour starts on some UTC hour boundary.
        self.scheduler.add_job(
            func=self.run_daily_reset,
            trigger=CronTrigger(minute=0, timezone="UTC"),
            id=DAILY_RESET_JOB_ID,
            name="Daily Entry Reset",
            replace_existing=True,
        )
        logger.info(
            "Scheduled daily reset",
            extra={"reset_hour": self.config.DAILY_RESET_HOUR},
        )

        self.scheduler.start()
        logger.info("Background scheduler started")

    def stop(self) -> None:
        """Stop the background scheduler gracefully."""
        if self.scheduler is not None:
            self.scheduler.shutdown(wait=True)
            self.scheduler = None
            logger.info("Background scheduler stopped")

    @property
    def running(self) -> bool:
        return self.scheduler is not None

    def run_daily_reset(self) -> int:
        """Create today's entry for every profile whose local hour is the reset hour."""
        session_factory = self.app.extensions[EXTENSION_KEY]["session_factory"]
        profiles = SQLModelProfileRepository(
            session_factory, default_timezone=self.config.DEFAULT_TIMEZONE
        )
        entries = SQLModelDailyEntryRepository(session_factory)
        try:
            return ensure_today_entries(profiles, entries, hour=self.config.DAILY_RESET_HOUR)
        except Exception as exc:
            # The next hourly run retries.
            logger.error(f"Daily reset failed: {exc}", exc_info=True)
            return 0


def create_scheduler(app: Flask, *, auto_start: bool = False) -> DailyResetScheduler:
    """Create and optionally start the daily reset scheduler.

    Args:
        app: Flask application
        auto_start: Whether to start the scheduler immediately

    Returns:
        DailyResetScheduler instance
    """
    scheduler = DailyResetScheduler(app)
    if auto_start:
        scheduler.start()
    return scheduler

"""Daily entry lifecycle: creation of today's entry and partial updates."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import datetime
from typing import Any, Optional

from sqlalchemy.exc import IntegrityError

from ..domain.repositories import DailyEntryRepository, ProfileRepository
from ..errors import InvalidTimezoneError
from ..models.daily_entry import HABIT_COLUMNS, DailyEntry
from ..models.profile import Profile
from .dates import is_local_hour, to_date, today_in_timezone

logger = logging.getLogger("arctrack.services.daily_entries")


def apply_entry_update(entry: DailyEntry, updates: Mapping[str, Any]) -> DailyEntry:
    """Merge a partial update into ``entry`` and recompute its score.

    Keys other than the habit columns are ignored; the cached score is never
    taken from the update.
    """

    for column in HABIT_COLUMNS:
        if column in updates:
            setattr(entry, column, updates[column])
    entry.refresh_score()
    return entry


def ensure_today_entry(
    entries: DailyEntryRepository, profile: Profile, *, now: Optional[datetime] = None
) -> bool:
    """Create the default entry for the profile's local today if it is missing.

    Returns True when an entry was created.
    """

    if profile.id is None:
        raise ValueError("Profile must be saved before its entries")
    today = to_date(today_in_timezone(profile.timezone, now=now))
    if entries.get_by_date(profile.id, today) is not None:
        return False

    try:
        entries.upsert(DailyEntry.new_default(profile.id, today))
    except IntegrityError:
        logger.info(
            "Entry created concurrently",
            extra={"user_id": profile.id, "entry_date": today.isoformat()},
        )
        return False
    logger.info("Created daily entry", extra={"user_id": profile.id, "entry_date": today.isoformat()})
    return True


def ensure_today_entries(
    profiles: ProfileRepository,
    entries: DailyEntryRepository,
    *,
    now: Optional[datetime] = None,
    hour: Optional[int] = None,
) -> int:
    """Daily reset: make sure every profile has an entry for its local today.

    When ``hour`` is given only profiles whose local wall-clock hour equals it
    are processed, so an hourly job resets each user at the same local time.
    Returns the number of entries created.
    """

    created = 0
    for profile in profiles.list_all():
        try:
            if hour is not None and not is_local_hour(profile.timezone, hour, now=now):
                continue
            if ensure_today_entry(entries, profile, now=now):
                created += 1
        except InvalidTimezoneError:
            logger.error(
                "Profile has an invalid timezone; skipping daily reset",
                extra={"user_id": profile.id, "timezone": profile.timezone},
            )
    logger.info("Daily reset finished", extra={"created_count": created, "hour": hour})
    return created


__all__ = ["apply_entry_update", "ensure_today_entries", "ensure_today_entry"]

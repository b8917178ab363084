"""Daily entry routes."""

from __future__ import annotations

import logging
from datetime import date, datetime, timezone

from flask import jsonify, request

from ...errors import NotFoundError, ValidationError
from ...extensions import entry_repository
from ...identity import current_profile
from ...services.daily_entries import apply_entry_update, ensure_today_entry
from ...services.dates import parse_date, today_in_timezone, to_date
from ..forms import parse_form
from . import bp
from .forms import DailyEntryUpdateForm

logger = logging.getLogger("arctrack.blueprints.daily")


def _parse_date_param(value: str | None, name: str) -> date:
    if not value:
        raise ValidationError(f"Missing {name} date parameter", field=name)
    try:
        return parse_date(value)
    except ValueError as exc:
        raise ValidationError("Invalid date format, expected YYYY-MM-DD", field=name) from exc


@bp.get("/today")
def today_entry():
    """Return today's entry, creating the default one on first visit."""

    profile = current_profile()
    entries = entry_repository()
    now = datetime.now(timezone.utc)
    ensure_today_entry(entries, profile, now=now)

    today = to_date(today_in_timezone(profile.timezone, now=now))
    entry = entries.get_by_date(profile.id, today)
    if entry is None:  # pragma: no cover - created above
        raise NotFoundError("Entry")
    return jsonify(entry.to_dict())


@bp.get("/range")
def entries_in_range():
    """Return entries between ``start`` and ``end`` (inclusive), oldest first."""

    start = _parse_date_param(request.args.get("start"), "start")
    end = _parse_date_param(request.args.get("end"), "end")
    if start > end:
        raise ValidationError("start must not be after end", field="start")

    profile = current_profile()
    rows = entry_repository().list_range(profile.id, start, end)
    return jsonify([row.to_dict() for row in rows])


@bp.get("/<entry_date>")
def get_entry(entry_date: str):
    """Return the entry for one date."""

    day = _parse_date_param(entry_date, "date")
    profile = current_profile()
    entry = entry_repository().get_by_date(profile.id, day)
    if entry is None:
        raise NotFoundError("Entry")
    return jsonify(entry.to_dict())


@bp.patch("/<entry_date>")
def update_entry(entry_date: str):
    """Apply a partial update and recompute the day's score."""

    day = _parse_date_param(entry_date, "date")
    form = parse_form(DailyEntryUpdateForm, request.get_json(silent=True))

    profile = current_profile()
    entries = entry_repository()
    entry = entries.get_by_date(profile.id, day)
    if entry is None:
        raise NotFoundError("Entry")

    apply_entry_update(entry, form.updates())
    saved = entries.upsert(entry)
    logger.info(
        "Updated daily entry",
        extra={"user_id": profile.id, "entry_date": day.isoformat(), "daily_score": saved.daily_score},
    )
    return jsonify(saved.to_dict())

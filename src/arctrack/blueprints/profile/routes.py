"""Profile routes."""

from __future__ import annotations

import logging

from flask import g, jsonify, request

from ...extensions import profile_repository
from ...identity import current_profile
from ...services.dates import day_number, today_in_timezone, week_number
from ..forms import parse_form
from . import bp
from .forms import ProfileUpdateForm

logger = logging.getLogger("arctrack.blueprints.profile")


def _profile_payload(profile) -> dict:
    today = today_in_timezone(profile.timezone)
    payload = profile.to_dict()
    payload.update(
        {
            "today": today,
            "day_number": day_number(profile.arc_start_date, today),
            "week_number": week_number(profile.arc_start_date, today),
        }
    )
    return payload


@bp.get("")
def get_profile():
    """Return the caller's profile with their current arc position."""

    return jsonify(_profile_payload(current_profile()))


@bp.patch("")
def update_profile():
    """Change the timezone or arc start date."""

    form = parse_form(ProfileUpdateForm, request.get_json(silent=True))
    profile = current_profile()

    changes = form.model_dump(exclude_unset=True, exclude_none=True)
    for name, value in changes.items():
        setattr(profile, name, value)

    saved = profile_repository().update(profile)
    g.arctrack_profile = saved
    logger.info(
        "Updated profile",
        extra={"user_id": saved.id, "fields": sorted(changes)},
    )
    return jsonify(_profile_payload(saved))

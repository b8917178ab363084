"""Weekly review routes."""

from __future__ import annotations

import logging

from flask import jsonify, request

from ...constants import TOTAL_WEEKS
from ...errors import NotFoundError, ValidationError
from ...extensions import review_repository
from ...identity import current_profile
from ...models.review import WeeklyReview
from ..forms import parse_form
from . import bp
from .forms import WeeklyReviewForm

logger = logging.getLogger("arctrack.blueprints.reviews")


@bp.get("")
def list_reviews():
    profile = current_profile()
    reviews = review_repository().list_for_user(profile.id)
    return jsonify([review.to_dict() for review in reviews])


@bp.post("")
def save_review():
    """Create the review for a week, or replace it when one exists."""

    form = parse_form(WeeklyReviewForm, request.get_json(silent=True))
    profile = current_profile()

    review = WeeklyReview(user_id=profile.id, **form.model_dump())
    saved, created = review_repository().upsert(review)
    logger.info(
        "Saved weekly review",
        extra={"user_id": profile.id, "week_number": saved.week_number, "was_created": created},
    )
    return jsonify(saved.to_dict()), 201 if created else 200


@bp.get("/<int:week>")
def get_review(week: int):
    if not 1 <= week <= TOTAL_WEEKS:
        raise ValidationError(f"week must be between 1 and {TOTAL_WEEKS}", field="week")

    profile = current_profile()
    review = review_repository().get_for_week(profile.id, week)
    if review is None:
        raise NotFoundError("Review")
    return jsonify(review.to_dict())

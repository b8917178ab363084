"""Weekly review blueprint package."""

from __future__ import annotations

from flask import Blueprint

bp = Blueprint("reviews", __name__, url_prefix="/api/reviews")

from . import routes  # noqa: E402,F401 - import routes for registration

__all__ = ["bp"]

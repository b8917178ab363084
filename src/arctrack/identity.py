"""Resolve the requesting user's profile from identity headers.

Authentication itself happens upstream; the gateway forwards the verified
user id in ``X-User-Id`` (and optionally ``X-User-Email``).
"""

from __future__ import annotations

from flask import g, request

from .errors import AuthenticationError
from .extensions import profile_repository
from .models.profile import Profile

USER_ID_HEADER = "X-User-Id"
USER_EMAIL_HEADER = "X-User-Email"


def current_profile() -> Profile:
    """Return (creating on first sight) the profile of the requesting user."""

    cached = g.get("arctrack_profile")
    if cached is not None:
        return cached

    external_id = (request.headers.get(USER_ID_HEADER) or "").strip()
    if not external_id:
        raise AuthenticationError()

    email = (request.headers.get(USER_EMAIL_HEADER) or "").strip()
    profile = profile_repository().get_or_create(external_id, email)
    g.arctrack_profile = profile
    return profile

"""SQLModel implementation of the profile repository."""

from __future__ import annotations

import logging
from datetime import date, datetime, timezone
from typing import Callable, Optional

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from ...constants import DEFAULT_TIMEZONE
from ...models.profile import Profile
from ...services.dates import to_date, today_in_timezone

logger = logging.getLogger("arctrack.infra.profile")


class SQLModelProfileRepository:
    """SQLModel-based profile repository implementation."""

    def __init__(self, session_factory: Callable[[], Session], *, default_timezone: str = DEFAULT_TIMEZONE):
        """Initialize with a session factory."""
        self.session_factory = session_factory
        self.default_timezone = default_timezone

    def get_by_external_id(self, external_id: str) -> Optional[Profile]:
        """Retrieve a profile by the identity supplied by the auth layer."""
        with self.session_factory() as session:
            obj = session.exec(select(Profile).where(Profile.external_id == external_id)).first()
            if obj:
                session.expunge(obj)
            return obj

    def get_or_create(
        self,
        external_id: str,
        email: str = "",
        *,
        timezone: Optional[str] = None,
        arc_start_date: Optional[date] = None,
    ) -> Profile:
        """Return the existing profile or create one with defaults."""
        existing = self.get_by_external_id(external_id)
        if existing is not None:
            return existing

        tz = timezone or self.default_timezone
        profile = Profile(
            external_id=external_id,
            email=email,
            timezone=tz,
            arc_start_date=arc_start_date or to_date(today_in_timezone(tz)),
        )
        with self.session_factory() as session:
            session.add(profile)
            try:
                session.commit()
            except IntegrityError:
                # Created concurrently by another request.
                session.rollback()
                logger.info("Profile created concurrently", extra={"external_id": external_id})
                obj = session.exec(select(Profile).where(Profile.external_id == external_id)).one()
                session.expunge(obj)
                return obj
            session.refresh(profile)
            session.expunge(profile)
            logger.info("Created profile", extra={"external_id": external_id})
            return profile

    def update(self, profile: Profile) -> Profile:
        """Persist changes to a profile."""
        with self.session_factory() as session:
            profile.updated_at = datetime.now(timezone.utc)
            session.add(profile)
            session.commit()
            session.refresh(profile)
            session.expunge(profile)
            return profile

    def list_all(self) -> list[Profile]:
        """List every profile."""
        with self.session_factory() as session:
            rows = list(session.exec(select(Profile).order_by(Profile.id)).all())  # type: ignore
            session.expunge_all()
            return rows

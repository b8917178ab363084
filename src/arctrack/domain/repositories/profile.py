"""Profile repository protocol."""

from __future__ import annotations

from datetime import date
from typing import Optional, Protocol

from ...models.profile import Profile


class ProfileRepository(Protocol):
    """Repository for user profiles."""

    def get_by_external_id(self, external_id: str) -> Optional[Profile]:
        """Retrieve a profile by the identity supplied by the auth layer."""
        ...

    def get_or_create(
        self,
        external_id: str,
        email: str = "",
        *,
        timezone: Optional[str] = None,
        arc_start_date: Optional[date] = None,
    ) -> Profile:
        """Return the existing profile or create one with defaults."""
        ...

    def update(self, profile: Profile) -> Profile:
        """Persist changes to a profile."""
        ...

    def list_all(self) -> list[Profile]:
        """List every profile."""
        ...

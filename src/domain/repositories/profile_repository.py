"""Profile repository protocol."""

from collections.abc import Iterable
from typing import Protocol
from uuid import UUID

from domain.entities.profile import Profile


class IProfileRepository(Protocol):
    """Repository interface for the Profile aggregate."""

    async def get(self, id: UUID) -> Profile | None:
        """Get a profile by its own ID."""
        ...

    async def get_by_user(self, user_id: UUID) -> Profile | None:
        """Get the profile owned by a user."""
        ...

    async def get_all(self) -> list[Profile]:
        """Get all profiles."""
        ...

    async def upsert(self, profile: Profile, fields: Iterable[str]) -> tuple[Profile, bool]:
        """Atomically insert the profile or overwrite ``fields`` of the user's
        existing one.

        Returns the stored profile and whether it was newly created.
        """
        ...

    async def update(self, profile: Profile) -> Profile:
        """Persist the whole aggregate, including experience and education."""
        ...

    async def delete_by_user(self, user_id: UUID) -> bool:
        """Delete the profile owned by a user and return success status."""
        ...

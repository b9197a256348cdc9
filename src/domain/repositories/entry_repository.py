"""Volunteer entry repository protocol."""

from typing import Protocol
from uuid import UUID

from domain.entities.entry import VolunteerEntry


class IEntryRepository(Protocol):
    """Repository interface for VolunteerEntry entities."""

    async def get(self, id: UUID) -> VolunteerEntry | None:
        """Get an entry by ID."""
        ...

    async def get_all_for_profile(self, profile_id: UUID) -> list[VolunteerEntry]:
        """Get all entries belonging to a profile, in no particular order."""
        ...

    async def create(self, entry: VolunteerEntry) -> VolunteerEntry:
        """Create a new entry."""
        ...

    async def update(self, entry: VolunteerEntry) -> VolunteerEntry:
        """Update an existing entry."""
        ...

    async def delete(self, id: UUID) -> bool:
        """Delete an entry and return success status."""
        ...

    async def delete_all_for_profile(self, profile_id: UUID) -> int:
        """Delete every entry of a profile and return how many were removed."""
        ...

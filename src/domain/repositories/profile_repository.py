"""Profile repository protocol."""

from typing import Protocol
from uuid import UUID

from domain.entities.profile import Profile


class IProfileRepository(Protocol):
    """Repository interface for Profile entities."""

    async def get(self, id: UUID) -> Profile | None:
        """Get a profile by ID."""
        ...

    async def get_by_name(self, name: str) -> Profile | None:
        """Get a profile by its exact name."""
        ...

    async def get_all(self) -> list[Profile]:
        """Get all profiles ordered by name."""
        ...

    async def count(self) -> int:
        """Count stored profiles."""
        ...

    async def create(self, profile: Profile) -> Profile:
        """Create a new profile."""
        ...

    async def delete(self, id: UUID) -> bool:
        """Delete a profile and return success status."""
        ...

"""Profile service layer."""

from collections.abc import Callable
from typing import Any
from uuid import UUID

import structlog

from core.exceptions import DuplicateProfileError, ProfileNotFoundError
from domain.entities.profile import Profile
from domain.repositories.unit_of_work import IUnitOfWork
from domain.validation import clean_profile_name

logger = structlog.get_logger()


class ProfileService:
    """Service layer for Profile business logic."""

    def __init__(self, uow_factory: Callable[[], IUnitOfWork]) -> None:
        self._uow_factory = uow_factory

    async def list_profiles(self) -> list[Profile]:
        """Get all profiles ordered by name, case-sensitive ascending."""
        async with self._uow_factory() as uow:
            return await uow.profiles.get_all()  # type: ignore[no-any-return]

    async def get_profile(self, profile_id: UUID) -> Profile:
        async with self._uow_factory() as uow:
            profile = await uow.profiles.get(profile_id)
            if not profile:
                raise ProfileNotFoundError(str(profile_id))
            return profile

    async def create_profile(self, name: Any) -> Profile:
        """Create a profile. Names are trimmed and must be unique."""
        name = clean_profile_name(name)

        async with self._uow_factory() as uow:
            existing = await uow.profiles.get_by_name(name)
            if existing:
                raise DuplicateProfileError(name)

            created = await uow.profiles.create(Profile(name=name))
            await uow.commit()

        logger.info("profile_created", profile_id=str(created.id), name=name)
        return created  # type: ignore[no-any-return]

    async def delete_profile(self, profile_id: UUID) -> None:
        """Delete a profile together with all of its entries.

        Entries go first, then the profile row, inside a single transaction:
        either both are gone afterwards or neither is.
        """
        async with self._uow_factory() as uow:
            profile = await uow.profiles.get(profile_id)
            if not profile:
                raise ProfileNotFoundError(str(profile_id))

            removed = await uow.entries.delete_all_for_profile(profile_id)
            await uow.profiles.delete(profile_id)
            await uow.commit()

        logger.info(
            "profile_deleted",
            profile_id=str(profile_id),
            name=profile.name,
            entries_deleted=removed,
        )

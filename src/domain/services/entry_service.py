"""Entry service layer: the profile-scoped store of volunteer entries."""

from collections.abc import Callable
from typing import Any
from uuid import UUID

import structlog

from core.exceptions import EntryNotFoundError, ProfileNotFoundError
from domain.entities.entry import VolunteerEntry
from domain.repositories.unit_of_work import IUnitOfWork
from domain.validation import clean_notes, clean_place, parse_entry_date, parse_hours

logger = structlog.get_logger()


class EntryService:
    """Service layer for VolunteerEntry business logic.

    Every mutating call commits before returning, so a following
    ``list_entries`` always reflects it.
    """

    def __init__(self, uow_factory: Callable[[], IUnitOfWork]) -> None:
        self._uow_factory = uow_factory

    async def list_entries(self, profile_id: UUID) -> list[VolunteerEntry]:
        """Get all entries of a profile. Unknown profiles raise ProfileNotFoundError."""
        async with self._uow_factory() as uow:
            await self._require_profile(uow, profile_id)
            return await uow.entries.get_all_for_profile(profile_id)  # type: ignore[no-any-return]

    async def get_entry(self, entry_id: UUID) -> VolunteerEntry:
        async with self._uow_factory() as uow:
            entry = await uow.entries.get(entry_id)
            if not entry:
                raise EntryNotFoundError(str(entry_id))
            return entry

    async def create_entry(
        self,
        profile_id: UUID,
        place: Any,
        date: Any,
        hours: Any,
        notes: Any = "",
    ) -> VolunteerEntry:
        """Validate the fields and store a new entry with a fresh id."""
        entry = VolunteerEntry(
            profile_id=profile_id,
            place=clean_place(place),
            date=parse_entry_date(date),
            hours=parse_hours(hours),
            notes=clean_notes(notes),
        )

        async with self._uow_factory() as uow:
            await self._require_profile(uow, profile_id)
            created = await uow.entries.create(entry)
            await uow.commit()

        logger.info(
            "entry_created",
            entry_id=str(created.id),
            profile_id=str(profile_id),
            date=created.date,
            hours=created.hours,
        )
        return created  # type: ignore[no-any-return]

    async def update_entry(
        self,
        entry_id: UUID,
        place: Any,
        date: Any,
        hours: Any,
        notes: Any = "",
    ) -> VolunteerEntry:
        """Replace the place, date, hours and notes of an existing entry."""
        place = clean_place(place)
        date = parse_entry_date(date)
        hours = parse_hours(hours)
        notes = clean_notes(notes)

        async with self._uow_factory() as uow:
            entry = await uow.entries.get(entry_id)
            if not entry:
                raise EntryNotFoundError(str(entry_id))

            entry.replace_details(place=place, date=date, hours=hours, notes=notes)
            updated = await uow.entries.update(entry)
            await uow.commit()

        logger.info("entry_updated", entry_id=str(entry_id), date=date, hours=hours)
        return updated  # type: ignore[no-any-return]

    async def delete_entry(self, entry_id: UUID) -> bool:
        """Delete an entry. Unknown ids are a no-op and return False."""
        async with self._uow_factory() as uow:
            deleted = await uow.entries.delete(entry_id)
            if deleted:
                await uow.commit()

        if deleted:
            logger.info("entry_deleted", entry_id=str(entry_id))
        else:
            logger.debug("entry_delete_skipped", entry_id=str(entry_id))
        return deleted  # type: ignore[no-any-return]

    async def delete_entries_for_profile(self, profile_id: UUID) -> int:
        """Bulk delete every entry of a profile; returns the number removed."""
        async with self._uow_factory() as uow:
            removed = await uow.entries.delete_all_for_profile(profile_id)
            await uow.commit()

        logger.info("profile_entries_deleted", profile_id=str(profile_id), count=removed)
        return removed  # type: ignore[no-any-return]

    async def _require_profile(self, uow: IUnitOfWork, profile_id: UUID) -> None:
        profile = await uow.profiles.get(profile_id)
        if not profile:
            raise ProfileNotFoundError(str(profile_id))

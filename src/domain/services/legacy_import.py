"""Import of the single-person JSON log into the profile-scoped store."""

from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Any
from uuid import UUID

import structlog
from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from core.exceptions import ValidationError
from domain.entities.entry import VolunteerEntry
from domain.entities.profile import Profile
from domain.repositories.unit_of_work import IUnitOfWork
from domain.validation import (
    clean_notes,
    clean_place,
    clean_profile_name,
    parse_entry_date,
    parse_hours,
)

logger = structlog.get_logger()

IMPORTED_SUFFIX = ".imported"

_records_adapter = TypeAdapter(list[dict[str, Any]])


@dataclass(frozen=True, slots=True)
class LegacyImportResult:
    """Outcome of a completed import."""

    profile: Profile
    imported: int
    skipped: int


class LegacyImportService:
    """Moves entries from ``volunteer_log.json`` under a new profile.

    The file holds a JSON array of ``{id, place, date, hours, notes}``
    objects. Import only runs into an empty store; afterwards the file is
    renamed with an ``.imported`` suffix so it is not picked up again.
    """

    def __init__(self, uow_factory: Callable[[], IUnitOfWork]) -> None:
        self._uow_factory = uow_factory

    async def import_file(self, path: Path, profile_name: str) -> LegacyImportResult | None:
        """Import ``path``; returns None when there is nothing to do."""
        if not path.is_file():
            return None

        name = clean_profile_name(profile_name)
        records = self._read_records(path)

        async with self._uow_factory() as uow:
            if await uow.profiles.count() > 0:
                logger.info("legacy_import_skipped", path=str(path), reason="store_not_empty")
                return None

            profile = await uow.profiles.create(Profile(name=name))
            imported = 0
            skipped = 0
            for index, record in enumerate(records):
                try:
                    entry = self._to_entry(profile.id, record)
                except ValidationError as e:
                    skipped += 1
                    logger.warning(
                        "legacy_record_skipped",
                        index=index,
                        field=e.field,
                        reason=e.message,
                    )
                    continue
                await uow.entries.create(entry)
                imported += 1
            await uow.commit()

        path.rename(path.with_name(path.name + IMPORTED_SUFFIX))
        logger.info(
            "legacy_import_completed",
            profile_id=str(profile.id),
            imported=imported,
            skipped=skipped,
        )
        return LegacyImportResult(profile=profile, imported=imported, skipped=skipped)

    def _read_records(self, path: Path) -> list[dict[str, Any]]:
        try:
            return _records_adapter.validate_json(path.read_bytes())
        except PydanticValidationError as e:
            raise ValidationError(
                "file", f"{path.name} is not a JSON array of entries"
            ) from e

    def _to_entry(self, profile_id: UUID, record: dict[str, Any]) -> VolunteerEntry:
        return VolunteerEntry(
            profile_id=profile_id,
            place=clean_place(record.get("place")),
            date=parse_entry_date(record.get("date")),
            hours=parse_hours(record.get("hours")),
            notes=clean_notes(record.get("notes")),
        )

"""SQLAlchemy implementation of VolunteerEntry repository."""

from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities.entry import VolunteerEntry
from infrastructure.database.models import EntryModel


class SQLAlchemyEntryRepository:
    """SQLAlchemy implementation of IEntryRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, id: UUID) -> VolunteerEntry | None:
        """Get an entry by ID."""
        stmt = select(EntryModel).where(EntryModel.id == id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def get_all_for_profile(self, profile_id: UUID) -> list[VolunteerEntry]:
        """Get all entries for a profile in insertion order."""
        stmt = (
            select(EntryModel)
            .where(EntryModel.profile_id == profile_id)
            .order_by(EntryModel.created_at)
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars()]

    async def create(self, entry: VolunteerEntry) -> VolunteerEntry:
        """Create a new entry."""
        model = self._to_model(entry)
        self._session.add(model)
        await self._session.flush()
        await self._session.refresh(model)
        return self._to_entity(model)

    async def update(self, entry: VolunteerEntry) -> VolunteerEntry:
        """Update an existing entry."""
        stmt = select(EntryModel).where(EntryModel.id == entry.id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if not model:
            raise ValueError(f"Entry {entry.id} not found")

        model.place = entry.place
        model.date = entry.date
        model.hours = entry.hours
        model.notes = entry.notes
        model.updated_at = entry.updated_at

        await self._session.flush()
        return self._to_entity(model)

    async def delete(self, id: UUID) -> bool:
        """Delete an entry."""
        stmt = select(EntryModel).where(EntryModel.id == id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if not model:
            return False

        await self._session.delete(model)
        await self._session.flush()
        return True

    async def delete_all_for_profile(self, profile_id: UUID) -> int:
        """Bulk delete every entry of a profile."""
        stmt = delete(EntryModel).where(EntryModel.profile_id == profile_id)
        result = await self._session.execute(stmt)
        await self._session.flush()
        return result.rowcount or 0

    def _to_entity(self, model: EntryModel) -> VolunteerEntry:
        """Convert ORM model to domain entity."""
        return VolunteerEntry(
            id=model.id,
            profile_id=model.profile_id,
            place=model.place,
            date=model.date,
            hours=model.hours,
            notes=model.notes,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _to_model(self, entity: VolunteerEntry) -> EntryModel:
        """Convert domain entity to ORM model."""
        return EntryModel(
            id=entity.id,
            profile_id=entity.profile_id,
            place=entity.place,
            date=entity.date,
            hours=entity.hours,
            notes=entity.notes,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )

"""SQLAlchemy implementation of Profile repository."""

from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities.profile import Profile
from infrastructure.database.models import ProfileModel


class SQLAlchemyProfileRepository:
    """SQLAlchemy implementation of IProfileRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, id: UUID) -> Profile | None:
        """Get a profile by ID."""
        model = await self._session.get(ProfileModel, id)
        return self._to_entity(model) if model else None

    async def get_by_name(self, name: str) -> Profile | None:
        """Get a profile by its exact name."""
        stmt = select(ProfileModel).where(ProfileModel.name == name)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def get_all(self) -> list[Profile]:
        """Get all profiles ordered by name (binary, case-sensitive)."""
        stmt = select(ProfileModel).order_by(ProfileModel.name)
        result = await self._session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars()]

    async def count(self) -> int:
        stmt = select(func.count()).select_from(ProfileModel)
        result = await self._session.execute(stmt)
        return result.scalar() or 0

    async def create(self, profile: Profile) -> Profile:
        """Create a new profile."""
        model = self._to_model(profile)
        self._session.add(model)
        await self._session.flush()
        await self._session.refresh(model)
        return self._to_entity(model)

    async def delete(self, id: UUID) -> bool:
        """Delete a profile."""
        model = await self._session.get(ProfileModel, id)
        if not model:
            return False

        await self._session.delete(model)
        await self._session.flush()
        return True

    def _to_entity(self, model: ProfileModel) -> Profile:
        """Convert ORM model to domain entity."""
        return Profile(
            id=model.id,
            name=model.name,
            created_at=model.created_at,
        )

    def _to_model(self, entity: Profile) -> ProfileModel:
        """Convert domain entity to ORM model."""
        return ProfileModel(
            id=entity.id,
            name=entity.name,
            created_at=entity.created_at,
        )

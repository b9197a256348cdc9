"""Dependency injection factories for API v1."""

from typing import Annotated, Callable

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from domain.services.entry_service import EntryService
from domain.services.profile_service import ProfileService
from domain.services.session_controller import SessionController
from infrastructure.database.sqlalchemy_uow import SQLAlchemyUnitOfWork


def get_uow_factory(
    session_factory: async_sessionmaker[AsyncSession],
) -> Callable[[], SQLAlchemyUnitOfWork]:
    """Factory for creating Unit of Work instances."""

    def factory() -> SQLAlchemyUnitOfWork:
        return SQLAlchemyUnitOfWork(session_factory)

    return factory


def build_session_controller(
    session_factory: async_sessionmaker[AsyncSession],
    per_page: int,
) -> SessionController:
    """Wire the stores into a fresh, not yet loaded, session controller."""
    uow_factory = get_uow_factory(session_factory)
    return SessionController(
        ProfileService(uow_factory),
        EntryService(uow_factory),
        per_page=per_page,
    )


def get_session_controller(request: Request) -> SessionController:
    """The controller owned by this application instance."""
    return request.app.state.session_controller  # type: ignore[no-any-return]


CurrentSession = Annotated[SessionController, Depends(get_session_controller)]

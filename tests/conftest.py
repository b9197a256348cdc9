"""Pytest configuration and fixtures."""

import os
import tempfile
from collections.abc import AsyncGenerator
from datetime import date
from pathlib import Path
from typing import Callable

# Keep the application's default store out of the user's home directory.
os.environ.setdefault("VOLUNTEER_LOG_DATA_DIR", tempfile.mkdtemp(prefix="volunteer-log-"))
os.environ.setdefault("VOLUNTEER_LOG_LEGACY_IMPORT_ENABLED", "false")

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from api.v1.dependencies import get_session_controller, get_uow_factory
from domain.services.entry_service import EntryService
from domain.services.profile_service import ProfileService
from domain.services.session_controller import SessionController
from infrastructure.database.session import (
    build_engine,
    build_session_factory,
    get_async_session,
    init_db,
)
from infrastructure.database.sqlalchemy_uow import SQLAlchemyUnitOfWork

# Fixed "today" so blank drafts are predictable
TODAY = date(2024, 8, 1)


@pytest.fixture
def database_path(tmp_path: Path) -> Path:
    return tmp_path / "volunteer_log.db"


@pytest.fixture
async def engine(database_path: Path) -> AsyncGenerator[AsyncEngine, None]:
    """Create a test engine over a fresh SQLite file."""
    engine = build_engine(f"sqlite+aiosqlite:///{database_path}")
    await init_db(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return build_session_factory(engine)


@pytest.fixture
def uow_factory(
    session_factory: async_sessionmaker[AsyncSession],
) -> Callable[[], SQLAlchemyUnitOfWork]:
    return get_uow_factory(session_factory)


@pytest.fixture
def profile_service(uow_factory: Callable[[], SQLAlchemyUnitOfWork]) -> ProfileService:
    return ProfileService(uow_factory)


@pytest.fixture
def entry_service(uow_factory: Callable[[], SQLAlchemyUnitOfWork]) -> EntryService:
    return EntryService(uow_factory)


@pytest.fixture
def controller(profile_service: ProfileService, entry_service: EntryService) -> SessionController:
    """A session controller over the test store, not yet loaded."""
    return SessionController(profile_service, entry_service, per_page=10, today=lambda: TODAY)


@pytest.fixture
async def client(
    session_factory: async_sessionmaker[AsyncSession],
    controller: SessionController,
) -> AsyncGenerator[AsyncClient, None]:
    """
    Create a test client wired to the test store.

    ASGITransport does not run the lifespan, so the controller is loaded
    here and injected through dependency overrides.
    """
    from main import create_app

    app = create_app()
    await controller.load()

    async def override_get_async_session() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_session_controller] = lambda: controller
    app.dependency_overrides[get_async_session] = override_get_async_session

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c

    app.dependency_overrides.clear()

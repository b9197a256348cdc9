"""Liveness and store probes for the webview shell."""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from pydantic import BaseModel
from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from core.config import settings
from infrastructure.database.models import EntryModel, ProfileModel
from infrastructure.database.session import get_async_session

APP_VERSION = "1.0.0"

router = APIRouter(tags=["health"])


class StoreHealth(BaseModel):
    """Reachability of the SQLite store and how much it holds."""

    status: str
    profiles: int | None = None
    entries: int | None = None
    error: str | None = None


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str
    timestamp: str
    environment: str
    store: StoreHealth | None = None


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


@router.get("/health", response_model=HealthResponse, summary="Basic health check")
async def health_check() -> HealthResponse:
    """The shell polls this until the bridge is up; the store is not touched."""
    return HealthResponse(
        status="healthy",
        version=APP_VERSION,
        timestamp=_now(),
        environment=settings.app_env,
    )


@router.get(
    "/health/detailed",
    response_model=HealthResponse,
    summary="Health check with store probe",
)
async def detailed_health_check(
    db: AsyncSession = Depends(get_async_session),
) -> HealthResponse:
    try:
        profiles = await db.scalar(select(func.count()).select_from(ProfileModel))
        entries = await db.scalar(select(func.count()).select_from(EntryModel))
        store = StoreHealth(status="healthy", profiles=profiles, entries=entries)
    except SQLAlchemyError as e:
        store = StoreHealth(status="unhealthy", error=str(e))

    return HealthResponse(
        status="healthy" if store.status == "healthy" else "degraded",
        version=APP_VERSION,
        timestamp=_now(),
        environment=settings.app_env,
        store=store,
    )

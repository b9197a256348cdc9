"""Entry API routes."""

from uuid import UUID

from fastapi import APIRouter

from api.v1.dependencies import CurrentSession
from api.v1.schemas.session import SessionResponse, SessionState

router = APIRouter(prefix="/entries", tags=["entries"])


@router.delete("/{entry_id}", response_model=SessionResponse, summary="Delete an entry")
async def delete_entry(entry_id: UUID, session: CurrentSession) -> SessionResponse:
    """Delete an entry. Deleting an unknown entry is a no-op."""
    await session.delete_entry(entry_id)
    return SessionResponse(data=SessionState.from_snapshot(session.snapshot()))

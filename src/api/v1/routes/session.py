"""Session API routes: view filters and the entry form."""

from uuid import UUID

from fastapi import APIRouter

from api.v1.dependencies import CurrentSession
from api.v1.schemas.common import ErrorResponse
from api.v1.schemas.entry import DraftSchema, DraftUpdate
from api.v1.schemas.session import (
    PageUpdate,
    SessionResponse,
    SessionState,
    YearFilterUpdate,
)
from domain.services.session_controller import Draft

router = APIRouter(prefix="/session", tags=["session"])


def _state(session: CurrentSession) -> SessionResponse:
    return SessionResponse(data=SessionState.from_snapshot(session.snapshot()))


@router.get("", response_model=SessionResponse, summary="Get session state")
async def get_session(session: CurrentSession) -> SessionResponse:
    """Current profile, visible entries, totals, filters and form state."""
    return _state(session)


@router.post("/refresh", response_model=SessionResponse, summary="Reload from the store")
async def refresh_session(session: CurrentSession) -> SessionResponse:
    await session.refresh()
    return _state(session)


@router.put("/view/year", response_model=SessionResponse, summary="Set the year filter")
async def set_year_filter(body: YearFilterUpdate, session: CurrentSession) -> SessionResponse:
    """Filter by calendar year or ``"all"``; returns to page 1."""
    session.set_year_filter(body.year)
    return _state(session)


@router.put("/view/page", response_model=SessionResponse, summary="Set the current page")
async def set_page(body: PageUpdate, session: CurrentSession) -> SessionResponse:
    """Pages beyond the last one are clamped to the last page."""
    session.set_page(body.page)
    return _state(session)


@router.patch("/form", response_model=SessionResponse, summary="Edit the form draft")
async def update_draft(body: DraftUpdate, session: CurrentSession) -> SessionResponse:
    session.update_draft(
        place=body.place,
        date=body.date,
        hours=body.hours,
        notes=body.notes,
    )
    return _state(session)


@router.post(
    "/form/submit",
    response_model=SessionResponse,
    summary="Submit the entry form",
    responses={
        400: {"model": ErrorResponse, "description": "Draft failed validation"},
        404: {"model": ErrorResponse, "description": "Edited entry no longer exists"},
        409: {"model": ErrorResponse, "description": "Another action is in progress"},
    },
)
async def submit_form(session: CurrentSession, body: DraftSchema | None = None) -> SessionResponse:
    """Create a new entry, or save the one being edited.

    When a body is given it replaces the stored draft before submission.
    """
    draft = Draft(**body.model_dump()) if body is not None else None
    await session.submit_form(draft)
    return _state(session)


@router.post(
    "/form/edit/{entry_id}",
    response_model=SessionResponse,
    summary="Start editing an entry",
    responses={404: {"model": ErrorResponse, "description": "Entry not found"}},
)
async def start_edit(entry_id: UUID, session: CurrentSession) -> SessionResponse:
    session.start_edit(entry_id)
    return _state(session)


@router.post("/form/cancel", response_model=SessionResponse, summary="Cancel editing")
async def cancel_edit(session: CurrentSession) -> SessionResponse:
    session.cancel_edit()
    return _state(session)

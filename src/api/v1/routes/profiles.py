"""Profile API routes."""

from uuid import UUID

from fastapi import APIRouter, status

from api.v1.dependencies import CurrentSession
from api.v1.schemas.common import ErrorResponse
from api.v1.schemas.profile import ProfileCreate, ProfileListResponse, ProfileResponse
from api.v1.schemas.session import SessionResponse, SessionState

router = APIRouter(prefix="/profiles", tags=["profiles"])


@router.get("", response_model=ProfileListResponse, summary="List all profiles")
async def list_profiles(session: CurrentSession) -> ProfileListResponse:
    """Profiles ordered by name."""
    return ProfileListResponse(
        data=[ProfileResponse.model_validate(p) for p in session.profiles]
    )


@router.post(
    "",
    response_model=SessionResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a profile",
    responses={
        201: {"description": "Profile created and activated"},
        400: {"model": ErrorResponse, "description": "Name is empty"},
        409: {"model": ErrorResponse, "description": "Profile with this name already exists"},
    },
)
async def create_profile(body: ProfileCreate, session: CurrentSession) -> SessionResponse:
    """Create a profile and switch to it."""
    await session.create_profile(body.name)
    return SessionResponse(data=SessionState.from_snapshot(session.snapshot()))


@router.post(
    "/{profile_id}/activate",
    response_model=SessionResponse,
    summary="Switch the active profile",
    responses={404: {"model": ErrorResponse, "description": "Profile not found"}},
)
async def switch_profile(profile_id: UUID, session: CurrentSession) -> SessionResponse:
    """Activate a profile; the year filter and page are reset."""
    await session.switch_profile(profile_id)
    return SessionResponse(data=SessionState.from_snapshot(session.snapshot()))


@router.delete(
    "/{profile_id}",
    response_model=SessionResponse,
    summary="Delete a profile",
    responses={404: {"model": ErrorResponse, "description": "Profile not found"}},
)
async def delete_profile(profile_id: UUID, session: CurrentSession) -> SessionResponse:
    """Delete a profile together with all of its entries."""
    await session.delete_profile(profile_id)
    return SessionResponse(data=SessionState.from_snapshot(session.snapshot()))

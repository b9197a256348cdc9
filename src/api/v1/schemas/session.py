"""Pydantic schemas for the session state exposed to the UI."""

from typing import Literal
from uuid import UUID

from pydantic import BaseModel, Field

from api.v1.schemas.entry import DraftSchema, EntryResponse
from api.v1.schemas.profile import ProfileResponse
from domain.services.session_controller import FormMode, SessionSnapshot


class YearTotal(BaseModel):
    """Hours logged in one calendar year."""

    year: int
    hours: float


class FormState(BaseModel):
    """State of the entry form."""

    mode: FormMode
    editing_entry_id: UUID | None = None
    draft: DraftSchema


class SessionState(BaseModel):
    """Every reactive field the UI renders."""

    profiles: list[ProfileResponse]
    active_profile_id: UUID | None
    entries: list[EntryResponse]
    years: list[int]
    selected_year: int | Literal["all"]
    current_page: int
    total_pages: int
    per_page: int
    entry_count: int
    total_hours: float
    all_time_hours: float
    hours_by_year: list[YearTotal]
    form: FormState
    busy: bool

    @classmethod
    def from_snapshot(cls, snapshot: SessionSnapshot) -> "SessionState":
        return cls(
            profiles=[ProfileResponse.model_validate(p) for p in snapshot.profiles],
            active_profile_id=snapshot.active_profile_id,
            entries=[EntryResponse.model_validate(e) for e in snapshot.entries],
            years=list(snapshot.years),
            selected_year=snapshot.selected_year,
            current_page=snapshot.current_page,
            total_pages=snapshot.total_pages,
            per_page=snapshot.per_page,
            entry_count=snapshot.entry_count,
            total_hours=snapshot.total_hours,
            all_time_hours=snapshot.all_time_hours,
            hours_by_year=[
                YearTotal(year=year, hours=hours)
                for year, hours in snapshot.hours_by_year.items()
            ],
            form=FormState(
                mode=snapshot.form_mode,
                editing_entry_id=snapshot.editing_entry_id,
                draft=DraftSchema.model_validate(snapshot.draft, from_attributes=True),
            ),
            busy=snapshot.busy,
        )


class SessionResponse(BaseModel):
    """Schema for the session state envelope."""

    data: SessionState


class YearFilterUpdate(BaseModel):
    """Schema for changing the year filter."""

    year: int | Literal["all"]


class PageUpdate(BaseModel):
    """Schema for changing the current page."""

    page: int = Field(..., ge=1)

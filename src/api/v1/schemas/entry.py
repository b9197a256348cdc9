"""Pydantic schemas for volunteer entries and the entry form."""

from decimal import Decimal
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _hours_as_text(value: Any) -> Any:
    # Form fields travel as text; numbers are accepted for convenience.
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float, Decimal)):
        return str(value)
    return value


class EntryResponse(BaseModel):
    """Schema for VolunteerEntry response."""

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": "456e4567-e89b-12d3-a456-426614174000",
                "profile_id": "123e4567-e89b-12d3-a456-426614174000",
                "place": "Shelter",
                "date": "2024-03-05",
                "hours": 2.5,
                "notes": "sorted donations",
            }
        },
    )

    id: UUID
    profile_id: UUID
    place: str
    date: str
    hours: float
    notes: str


class DraftSchema(BaseModel):
    """Full contents of the entry form, as typed."""

    place: str = Field("", max_length=255)
    date: str = Field("", max_length=32)
    hours: str = Field("", max_length=32)
    notes: str = ""

    @field_validator("hours", mode="before")
    @classmethod
    def coerce_hours(cls, v: Any) -> Any:
        return _hours_as_text(v)


class DraftUpdate(BaseModel):
    """Partial form edit; omitted fields are left as they are."""

    place: str | None = Field(None, max_length=255)
    date: str | None = Field(None, max_length=32)
    hours: str | None = Field(None, max_length=32)
    notes: str | None = None

    @field_validator("hours", mode="before")
    @classmethod
    def coerce_hours(cls, v: Any) -> Any:
        return _hours_as_text(v)

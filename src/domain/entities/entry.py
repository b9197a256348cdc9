"""Volunteer entry domain entity."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID, uuid4


@dataclass
class VolunteerEntry:
    """Domain entity for one recorded volunteering session."""

    profile_id: UUID
    place: str
    date: str  # canonical YYYY-MM-DD
    hours: float
    notes: str = ""
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=datetime.utcnow)
    updated_at: datetime = field(default_factory=datetime.utcnow)

    @property
    def year(self) -> int:
        """Calendar year of the session."""
        return int(self.date[:4])

    def replace_details(self, place: str, date: str, hours: float, notes: str) -> None:
        """Overwrite every mutable field."""
        self.place = place
        self.date = date
        self.hours = hours
        self.notes = notes
        self.updated_at = datetime.utcnow()

    def __post_init__(self) -> None:
        """Ensure updated_at is always at least as recent as created_at."""
        if self.updated_at < self.created_at:
            self.updated_at = self.created_at

"""Session controller: active profile, entry form and view filters.

One ``SessionController`` instance holds everything the presentation layer
renders. Commands mutate it only after the store call they depend on has
succeeded, so a failed command leaves the visible state untouched.
"""

import asyncio
from collections.abc import AsyncIterator, Callable
from contextlib import asynccontextmanager
from dataclasses import dataclass, replace
from datetime import date
from enum import StrEnum
from uuid import UUID

import structlog

from core.exceptions import (
    ActionInProgressError,
    EntryNotFoundError,
    NotFoundError,
    ProfileNotFoundError,
    ValidationError,
)
from domain.entities.entry import VolunteerEntry
from domain.entities.profile import Profile
from domain.services import entry_queries
from domain.services.entry_queries import ALL_YEARS, DEFAULT_PER_PAGE, YearFilter
from domain.services.entry_service import EntryService
from domain.services.profile_service import ProfileService
from domain.validation import clean_notes, clean_place, parse_entry_date, parse_hours

logger = structlog.get_logger()


class FormMode(StrEnum):
    """State of the entry form."""

    CREATING = "creating"
    EDITING = "editing"


@dataclass
class Draft:
    """Unsaved form contents, kept as the raw text the user typed."""

    place: str = ""
    date: str = ""
    hours: str = ""
    notes: str = ""

    @classmethod
    def blank(cls, today: date) -> "Draft":
        return cls(date=today.isoformat())

    @classmethod
    def from_entry(cls, entry: VolunteerEntry) -> "Draft":
        return cls(
            place=entry.place,
            date=entry.date,
            hours=format_hours(entry.hours),
            notes=entry.notes,
        )


def format_hours(hours: float) -> str:
    """Render hours for the form without a trailing ``.0``."""
    text = repr(float(hours))
    return text[:-2] if text.endswith(".0") else text


@dataclass(frozen=True)
class SessionSnapshot:
    """Read-only copy of every field the UI renders."""

    profiles: tuple[Profile, ...]
    active_profile_id: UUID | None
    entries: tuple[VolunteerEntry, ...]
    years: tuple[int, ...]
    selected_year: YearFilter
    current_page: int
    total_pages: int
    per_page: int
    entry_count: int
    total_hours: float
    all_time_hours: float
    hours_by_year: dict[int, float]
    form_mode: FormMode
    editing_entry_id: UUID | None
    draft: Draft
    busy: bool = False


class SessionController:
    """Mediates between UI commands and the entry and profile stores."""

    def __init__(
        self,
        profile_service: ProfileService,
        entry_service: EntryService,
        per_page: int = DEFAULT_PER_PAGE,
        today: Callable[[], date] = date.today,
    ) -> None:
        if per_page < 1:
            raise ValueError(f"per_page must be positive, got {per_page}")
        self._profile_service = profile_service
        self._entry_service = entry_service
        self._today = today
        self._lock = asyncio.Lock()

        self.per_page = per_page
        self.profiles: list[Profile] = []
        self.active_profile_id: UUID | None = None
        self.entries: list[VolunteerEntry] = []
        self.selected_year: YearFilter = ALL_YEARS
        self.current_page = 1
        self.form_mode = FormMode.CREATING
        self.editing_entry_id: UUID | None = None
        self.draft = Draft.blank(today())

    # --- Derived views ---

    @property
    def busy(self) -> bool:
        """True while a store mutation is running; the UI disables its controls."""
        return self._lock.locked()

    @property
    def active_profile(self) -> Profile | None:
        return next((p for p in self.profiles if p.id == self.active_profile_id), None)

    @property
    def years(self) -> list[int]:
        return sorted(entry_queries.distinct_years(self.entries), reverse=True)

    @property
    def filtered_entries(self) -> list[VolunteerEntry]:
        """Entries matching the year filter, newest first."""
        return entry_queries.sort_by_date_desc(
            entry_queries.filter_by_year(self.entries, self.selected_year)
        )

    @property
    def visible_entries(self) -> list[VolunteerEntry]:
        return entry_queries.paginate(self.filtered_entries, self.current_page, self.per_page)

    @property
    def total_pages(self) -> int:
        return entry_queries.total_pages(len(self.filtered_entries), self.per_page)

    @property
    def total_hours(self) -> float:
        return entry_queries.sum_hours(self.filtered_entries)

    @property
    def all_time_hours(self) -> float:
        return entry_queries.sum_hours(self.entries)

    def snapshot(self) -> SessionSnapshot:
        filtered = self.filtered_entries
        return SessionSnapshot(
            profiles=tuple(self.profiles),
            active_profile_id=self.active_profile_id,
            entries=tuple(entry_queries.paginate(filtered, self.current_page, self.per_page)),
            years=tuple(self.years),
            selected_year=self.selected_year,
            current_page=self.current_page,
            total_pages=entry_queries.total_pages(len(filtered), self.per_page),
            per_page=self.per_page,
            entry_count=len(filtered),
            total_hours=entry_queries.sum_hours(filtered),
            all_time_hours=self.all_time_hours,
            hours_by_year=entry_queries.hours_by_year(self.entries),
            form_mode=self.form_mode,
            editing_entry_id=self.editing_entry_id,
            draft=replace(self.draft),
            busy=self.busy,
        )

    # --- Loading ---

    async def load(self) -> None:
        """Load profiles, pick the active one and load its entries."""
        async with self._action("load"):
            await self._reconcile()

    async def refresh(self) -> None:
        await self.load()

    # --- Profile commands ---

    async def create_profile(self, name: str) -> Profile:
        """Create a profile and make it the active one."""
        async with self._action("create_profile"):
            profile = await self._profile_service.create_profile(name)
            self.profiles = await self._profile_service.list_profiles()
            await self._activate(profile.id)
            return profile

    async def switch_profile(self, profile_id: UUID) -> None:
        async with self._action("switch_profile"):
            await self._activate(profile_id)

    async def delete_profile(self, profile_id: UUID) -> None:
        """Delete a profile and its entries; falls back to the first remaining one."""
        async with self._action("delete_profile"):
            await self._profile_service.delete_profile(profile_id)
            self.profiles = await self._profile_service.list_profiles()
            if profile_id == self.active_profile_id:
                if self.profiles:
                    await self._activate(self.profiles[0].id)
                else:
                    self._clear_active_profile()

    # --- Form commands ---

    def start_edit(self, entry_id: UUID) -> None:
        """Copy an entry into the draft and switch the form to editing it."""
        self._ensure_idle("start_edit")
        entry = next((e for e in self.entries if e.id == entry_id), None)
        if entry is None:
            raise EntryNotFoundError(str(entry_id))
        self.form_mode = FormMode.EDITING
        self.editing_entry_id = entry.id
        self.draft = Draft.from_entry(entry)

    def cancel_edit(self) -> None:
        self._ensure_idle("cancel_edit")
        self._reset_form()

    def update_draft(
        self,
        place: str | None = None,
        date: str | None = None,
        hours: str | None = None,
        notes: str | None = None,
    ) -> Draft:
        """Apply form typing to the draft; ``None`` leaves a field unchanged."""
        self._ensure_idle("update_draft")
        changes = {
            name: value
            for name, value in (
                ("place", place),
                ("date", date),
                ("hours", hours),
                ("notes", notes),
            )
            if value is not None
        }
        self.draft = replace(self.draft, **changes)
        return self.draft

    async def submit_form(self, draft: Draft | None = None) -> VolunteerEntry:
        """Validate the draft and create or update the entry it describes.

        Invalid drafts raise ValidationError before any store call and
        without touching state. If the store call fails the draft is kept so
        the user can retry.
        """
        async with self._action("submit_form"):
            candidate = draft if draft is not None else self.draft
            if self.active_profile_id is None:
                raise ValidationError("profile", "Create a profile before logging hours")
            place, entry_date, hours, notes = self._validate_draft(candidate)

            self.draft = replace(candidate)
            if self.form_mode is FormMode.EDITING and self.editing_entry_id is not None:
                try:
                    saved = await self._entry_service.update_entry(
                        self.editing_entry_id, place, entry_date, hours, notes
                    )
                except EntryNotFoundError:
                    # The edited entry is gone; resubmitting the kept draft creates it.
                    self.form_mode = FormMode.CREATING
                    self.editing_entry_id = None
                    raise
            else:
                saved = await self._entry_service.create_entry(
                    self.active_profile_id, place, entry_date, hours, notes
                )

            self._reset_form()
            await self._reload_entries()
            return saved

    async def delete_entry(self, entry_id: UUID) -> bool:
        """Delete an entry of the active profile and keep the current page non-empty.

        Ids outside the active profile are ignored and return False.
        """
        async with self._action("delete_entry"):
            if all(e.id != entry_id for e in self.entries):
                logger.info("entry_delete_ignored", entry_id=str(entry_id))
                return False
            deleted = await self._entry_service.delete_entry(entry_id)
            if entry_id == self.editing_entry_id:
                self._reset_form()
            await self._reload_entries()

            if self.selected_year != ALL_YEARS and self.selected_year not in self.years:
                self.selected_year = ALL_YEARS
                self.current_page = 1
            if self.current_page > 1 and not self.visible_entries:
                self.current_page -= 1
            return deleted

    # --- View commands ---

    def set_year_filter(self, year: YearFilter) -> None:
        self._ensure_idle("set_year_filter")
        if year != ALL_YEARS and (isinstance(year, bool) or not isinstance(year, int)):
            raise ValidationError("year", f"Year must be an integer or 'all': {year!r}")
        self.selected_year = year
        self.current_page = 1

    def set_page(self, page: int) -> None:
        """Move to ``page``, clamped to the available range."""
        self._ensure_idle("set_page")
        self.current_page = min(max(1, page), self.total_pages)

    # --- Internals ---

    @asynccontextmanager
    async def _action(self, name: str) -> AsyncIterator[None]:
        """Run one store-backed command at a time; reconcile on NotFound."""
        self._ensure_idle(name)
        async with self._lock:
            logger.debug("session_action_started", action=name)
            try:
                yield
            except NotFoundError as e:
                logger.info("session_reconcile", action=name, error_code=e.error_code.value)
                await self._reconcile()
                raise

    def _ensure_idle(self, name: str) -> None:
        if self._lock.locked():
            logger.warning("session_action_rejected", action=name, reason="busy")
            raise ActionInProgressError()

    def _validate_draft(self, draft: Draft) -> tuple[str, str, float, str]:
        place = clean_place(draft.place)
        entry_date = parse_entry_date(draft.date)
        hours = parse_hours(draft.hours)
        if hours == 0:
            raise ValidationError("hours", "Hours must be greater than zero")
        return place, entry_date, hours, clean_notes(draft.notes)

    async def _activate(self, profile_id: UUID) -> None:
        entries = await self._entry_service.list_entries(profile_id)
        if all(p.id != profile_id for p in self.profiles):
            self.profiles = await self._profile_service.list_profiles()
        self.active_profile_id = profile_id
        self.entries = entries
        self.selected_year = ALL_YEARS
        self.current_page = 1
        self._reset_form()
        logger.info("profile_activated", profile_id=str(profile_id), entries=len(entries))

    def _clear_active_profile(self) -> None:
        self.active_profile_id = None
        self.entries = []
        self.selected_year = ALL_YEARS
        self.current_page = 1
        self._reset_form()

    async def _reconcile(self) -> None:
        """Reload profiles and entries from the store."""
        self.profiles = await self._profile_service.list_profiles()
        if any(p.id == self.active_profile_id for p in self.profiles):
            await self._reload_entries()
        elif self.profiles:
            await self._activate(self.profiles[0].id)
        else:
            self._clear_active_profile()

    async def _reload_entries(self) -> None:
        if self.active_profile_id is None:
            self.entries = []
            return
        try:
            self.entries = await self._entry_service.list_entries(self.active_profile_id)
        except ProfileNotFoundError:
            self._clear_active_profile()
            raise

    def _reset_form(self) -> None:
        self.form_mode = FormMode.CREATING
        self.editing_entry_id = None
        self.draft = Draft.blank(self._today())

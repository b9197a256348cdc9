"""Integration tests for SessionController over the real stores."""

import pytest

from domain.services.entry_queries import ALL_YEARS
from domain.services.entry_service import EntryService
from domain.services.profile_service import ProfileService
from domain.services.session_controller import Draft, FormMode, SessionController


async def _log(controller: SessionController, entry_date: str, hours: str = "1") -> None:
    await controller.submit_form(Draft(place="Shelter", date=entry_date, hours=hours))


class TestOnboarding:
    @pytest.mark.asyncio
    async def test_first_profile_becomes_active(self, controller: SessionController):
        await controller.load()
        assert controller.active_profile_id is None

        profile = await controller.create_profile("Alex")

        assert controller.active_profile_id == profile.id
        assert [p.name for p in controller.profiles] == ["Alex"]

    @pytest.mark.asyncio
    async def test_load_picks_first_profile_by_name(
        self, controller: SessionController, profile_service: ProfileService
    ):
        await profile_service.create_profile("Sam")
        alex = await profile_service.create_profile("Alex")

        await controller.load()

        assert controller.active_profile_id == alex.id


class TestProfileSwitching:
    @pytest.mark.asyncio
    async def test_switch_resets_view_and_scopes_entries(self, controller: SessionController):
        await controller.load()
        alex = await controller.create_profile("Alex")
        for day in range(1, 13):
            await _log(controller, f"2024-02-{day:02d}")
        sam = await controller.create_profile("Sam")
        await _log(controller, "2023-05-05", "4")

        await controller.switch_profile(alex.id)
        controller.set_year_filter(2024)
        controller.set_page(2)
        controller.start_edit(controller.visible_entries[0].id)

        await controller.switch_profile(sam.id)

        assert controller.selected_year == ALL_YEARS
        assert controller.current_page == 1
        assert controller.form_mode is FormMode.CREATING
        assert [e.date for e in controller.entries] == ["2023-05-05"]
        assert controller.all_time_hours == 4.0

    @pytest.mark.asyncio
    async def test_delete_ignores_entries_of_other_profiles(
        self, controller: SessionController, entry_service: EntryService
    ):
        await controller.load()
        alex = await controller.create_profile("Alex")
        await _log(controller, "2024-01-01")
        alex_entry = controller.entries[0]
        await controller.create_profile("Sam")

        assert await controller.delete_entry(alex_entry.id) is False

        assert [e.id for e in await entry_service.list_entries(alex.id)] == [alex_entry.id]

    @pytest.mark.asyncio
    async def test_deleting_active_profile_falls_back(self, controller: SessionController):
        await controller.load()
        alex = await controller.create_profile("Alex")
        await _log(controller, "2024-01-01")
        sam = await controller.create_profile("Sam")

        await controller.switch_profile(alex.id)
        await controller.delete_profile(alex.id)

        assert controller.active_profile_id == sam.id
        assert controller.entries == []

        await controller.delete_profile(sam.id)

        assert controller.active_profile_id is None
        assert controller.profiles == []


class TestEntryLifecycle:
    @pytest.mark.asyncio
    async def test_create_edit_and_totals(self, controller: SessionController):
        await controller.load()
        await controller.create_profile("Alex")
        await _log(controller, "2023-06-01", "4")
        await _log(controller, "2024-01-10", "2")
        await _log(controller, "2024-07-20", "3")

        assert controller.years == [2024, 2023]
        assert [e.date for e in controller.visible_entries] == [
            "2024-07-20",
            "2024-01-10",
            "2023-06-01",
        ]

        controller.set_year_filter(2024)
        assert controller.total_hours == 5.0

        target = controller.visible_entries[1]
        controller.start_edit(target.id)
        await controller.submit_form(Draft(place="Shelter", date="2024-01-10", hours="6"))

        assert controller.total_hours == 9.0
        assert controller.all_time_hours == 13.0
        assert len(controller.entries) == 3

    @pytest.mark.asyncio
    async def test_deleting_last_entry_on_page_two_moves_back(
        self, controller: SessionController
    ):
        await controller.load()
        await controller.create_profile("Alex")
        for day in range(1, 12):
            await _log(controller, f"2024-03-{day:02d}")

        controller.set_page(2)
        assert controller.total_pages == 2
        assert len(controller.visible_entries) == 1
        last = controller.visible_entries[0]

        await controller.delete_entry(last.id)

        assert controller.current_page == 1
        assert len(controller.visible_entries) == 10

    @pytest.mark.asyncio
    async def test_deleting_edited_entry_cancels_edit(self, controller: SessionController):
        await controller.load()
        await controller.create_profile("Alex")
        await _log(controller, "2024-03-01")
        entry = controller.entries[0]
        controller.start_edit(entry.id)

        await controller.delete_entry(entry.id)

        assert controller.form_mode is FormMode.CREATING
        assert controller.entries == []

    @pytest.mark.asyncio
    async def test_year_filter_falls_back_when_year_disappears(
        self, controller: SessionController
    ):
        await controller.load()
        await controller.create_profile("Alex")
        await _log(controller, "2023-03-01")
        await _log(controller, "2024-03-01")
        controller.set_year_filter(2023)

        await controller.delete_entry(controller.visible_entries[0].id)

        assert controller.selected_year == ALL_YEARS
        assert controller.years == [2024]

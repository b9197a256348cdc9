"""Integration tests for the session command API."""

from uuid import uuid4

import pytest
from httpx import AsyncClient


async def _create_profile(client: AsyncClient, name: str) -> dict:
    response = await client.post("/api/v1/profiles", json={"name": name})
    assert response.status_code == 201
    return response.json()["data"]


async def _submit(client: AsyncClient, **draft: object) -> dict:
    response = await client.post("/api/v1/session/form/submit", json=draft)
    assert response.status_code == 200, response.text
    return response.json()["data"]


class TestSessionState:
    @pytest.mark.asyncio
    async def test_empty_store(self, client: AsyncClient):
        response = await client.get("/api/v1/session")

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["profiles"] == []
        assert data["active_profile_id"] is None
        assert data["entries"] == []
        assert data["selected_year"] == "all"
        assert data["current_page"] == 1
        assert data["total_pages"] == 1
        assert data["total_hours"] == 0
        assert data["form"]["mode"] == "creating"
        assert data["form"]["draft"]["date"] == "2024-08-01"
        assert data["busy"] is False


class TestEntryForm:
    @pytest.mark.asyncio
    async def test_submit_creates_entry(self, client: AsyncClient):
        profile = await _create_profile(client, "Alex")

        data = await _submit(
            client, place="Shelter", date="2024-03-05", hours=2.5, notes="sorted donations"
        )

        assert data["active_profile_id"] == profile["id"]
        assert len(data["entries"]) == 1
        entry = data["entries"][0]
        assert entry["place"] == "Shelter"
        assert entry["hours"] == 2.5
        assert entry["notes"] == "sorted donations"
        assert data["total_hours"] == 2.5
        assert data["form"]["draft"]["place"] == ""

    @pytest.mark.asyncio
    async def test_submit_uses_stored_draft(self, client: AsyncClient):
        await _create_profile(client, "Alex")
        await client.patch(
            "/api/v1/session/form", json={"place": "Library", "date": "2024-05-01"}
        )
        await client.patch("/api/v1/session/form", json={"hours": "1.5"})

        response = await client.post("/api/v1/session/form/submit")

        assert response.status_code == 200
        assert response.json()["data"]["entries"][0]["place"] == "Library"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "draft, field",
        [
            ({"place": "Shelter", "date": "2024-03-05", "hours": ""}, "hours"),
            ({"place": "", "date": "2024-03-05", "hours": "2"}, "place"),
            ({"place": "Shelter", "date": "not-a-date", "hours": "2"}, "date"),
        ],
    )
    async def test_invalid_draft_rejected(self, client: AsyncClient, draft: dict, field: str):
        await _create_profile(client, "Alex")

        response = await client.post("/api/v1/session/form/submit", json=draft)

        assert response.status_code == 400
        body = response.json()
        assert body["error_code"] == "VALIDATION_ERROR"
        assert body["details"]["field"] == field
        state = (await client.get("/api/v1/session")).json()["data"]
        assert state["entry_count"] == 0

    @pytest.mark.asyncio
    async def test_edit_and_cancel(self, client: AsyncClient):
        await _create_profile(client, "Alex")
        data = await _submit(client, place="Shelter", date="2024-03-05", hours="2.5")
        entry_id = data["entries"][0]["id"]

        response = await client.post(f"/api/v1/session/form/edit/{entry_id}")
        form = response.json()["data"]["form"]
        assert form["mode"] == "editing"
        assert form["editing_entry_id"] == entry_id
        assert form["draft"]["hours"] == "2.5"

        response = await client.post("/api/v1/session/form/cancel")
        form = response.json()["data"]["form"]
        assert form["mode"] == "creating"
        assert form["editing_entry_id"] is None

    @pytest.mark.asyncio
    async def test_edit_updates_in_place(self, client: AsyncClient):
        await _create_profile(client, "Alex")
        data = await _submit(client, place="Shelter", date="2024-03-05", hours="2.5")
        entry_id = data["entries"][0]["id"]

        await client.post(f"/api/v1/session/form/edit/{entry_id}")
        data = await _submit(client, place="Shelter", date="2024-03-05", hours="3")

        assert [e["id"] for e in data["entries"]] == [entry_id]
        assert data["entries"][0]["hours"] == 3.0

    @pytest.mark.asyncio
    async def test_edit_unknown_entry(self, client: AsyncClient):
        await _create_profile(client, "Alex")

        response = await client.post(f"/api/v1/session/form/edit/{uuid4()}")

        assert response.status_code == 404
        assert response.json()["error_code"] == "ENTRY_NOT_FOUND"


class TestViewCommands:
    @pytest.mark.asyncio
    async def test_year_filter_and_pages(self, client: AsyncClient):
        await _create_profile(client, "Alex")
        await _submit(client, place="Shelter", date="2023-06-01", hours="4")
        for day in range(1, 12):
            await _submit(client, place="Shelter", date=f"2024-01-{day:02d}", hours="1")

        data = (await client.get("/api/v1/session")).json()["data"]
        assert data["years"] == [2024, 2023]
        assert data["total_pages"] == 2
        assert data["hours_by_year"] == [
            {"year": 2024, "hours": 11.0},
            {"year": 2023, "hours": 4.0},
        ]

        response = await client.put("/api/v1/session/view/page", json={"page": 2})
        data = response.json()["data"]
        assert data["current_page"] == 2
        assert [e["date"] for e in data["entries"]] == ["2024-01-01", "2023-06-01"]

        response = await client.put("/api/v1/session/view/year", json={"year": 2023})
        data = response.json()["data"]
        assert data["selected_year"] == 2023
        assert data["current_page"] == 1
        assert data["total_hours"] == 4.0
        assert data["all_time_hours"] == 15.0

        response = await client.put("/api/v1/session/view/year", json={"year": "all"})
        assert response.json()["data"]["entry_count"] == 12

    @pytest.mark.asyncio
    async def test_page_must_be_positive(self, client: AsyncClient):
        response = await client.put("/api/v1/session/view/page", json={"page": 0})

        assert response.status_code == 422
        assert response.json()["error_code"] == "VALIDATION_ERROR"

    @pytest.mark.asyncio
    async def test_delete_entry_steps_back_a_page(self, client: AsyncClient):
        await _create_profile(client, "Alex")
        for day in range(1, 12):
            await _submit(client, place="Shelter", date=f"2024-01-{day:02d}", hours="1")
        data = (await client.put("/api/v1/session/view/page", json={"page": 2})).json()["data"]
        last_id = data["entries"][0]["id"]

        response = await client.delete(f"/api/v1/entries/{last_id}")

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["current_page"] == 1
        assert data["entry_count"] == 10

    @pytest.mark.asyncio
    async def test_delete_unknown_entry_is_no_op(self, client: AsyncClient):
        await _create_profile(client, "Alex")

        response = await client.delete(f"/api/v1/entries/{uuid4()}")

        assert response.status_code == 200

"""Tests for the HTTP surface of the planner screen."""
import pytest
from datetime import date
from fastapi.testclient import TestClient
from httpx import ASGITransport, AsyncClient

from trip_planner.config import Settings
from trip_planner.main import create_app
from trip_planner.models.state import AppState


TODAY = date(2024, 6, 15)


def make_app(**overrides):
    settings = Settings(id_strategy="counter", **overrides)
    return create_app(settings, AppState(clock=lambda: TODAY))


@pytest.fixture
def client():
    return TestClient(make_app())


PARIS = {"destination": "Paris", "start_date": "2024-01-01", "end_date": "2024-01-10"}


class TestScreen:
    """Test rendering the planner screen."""

    def test_empty_screen(self, client):
        response = client.get("/api/trips")

        assert response.status_code == 200
        data = response.json()
        assert data["title"] == "Xyross Travel Planner"
        assert data["trips"] == []
        assert data["empty_text"] == "No trips planned yet! Add one above."
        assert data["form"]["submit_label"] == "Add Trip"
        assert data["form"]["start_date"] == "2024-06-15"
        assert data["form"]["start_date_label"] == "Start Date: June 15, 2024"

    def test_screen_lists_trips(self, client):
        client.post("/api/trips", json=PARIS)

        data = client.get("/api/trips").json()

        assert data["empty_text"] is None
        assert data["trips"] == [{
            "id": "trip-1",
            "destination": "Paris",
            "start_date": "2024-01-01",
            "end_date": "2024-01-10",
            "dates": "January 1, 2024 - January 10, 2024",
        }]

    def test_health(self, client):
        assert client.get("/health").json() == {"status": "healthy", "trips": 0}


class TestUpsertEndpoint:
    """Test POST /api/trips."""

    def test_add(self, client):
        response = client.post("/api/trips", json=PARIS)

        assert response.status_code == 200
        data = response.json()
        assert data["notification"] == {"title": "Success", "message": "Trip added!"}
        assert data["trip"]["id"] == "trip-1"
        assert data["form"]["mode"] == "blank"

    def test_update(self, client):
        client.post("/api/trips", json=PARIS)

        response = client.post("/api/trips", json={
            "destination": "Lyon",
            "start_date": "2024-02-01",
            "end_date": "2024-02-05",
            "editing_id": "trip-1",
        })

        assert response.json()["notification"]["message"] == "Trip updated!"
        trips = client.get("/api/trips").json()["trips"]
        assert [(t["id"], t["destination"]) for t in trips] == [("trip-1", "Lyon")]

    def test_empty_destination(self, client):
        response = client.post("/api/trips", json={**PARIS, "destination": "  "})

        assert response.status_code == 400
        assert response.json()["detail"] == {
            "title": "Error",
            "message": "Destination cannot be empty!",
            "code": "EMPTY_DESTINATION",
        }
        assert client.get("/api/trips").json()["trips"] == []

    def test_end_before_start(self, client):
        response = client.post("/api/trips", json={**PARIS, "end_date": "2023-12-31"})

        assert response.status_code == 400
        assert response.json()["detail"]["message"] == "End date cannot be before start date!"

    def test_malformed_date(self, client):
        response = client.post("/api/trips", json={**PARIS, "start_date": "soon"})

        assert response.status_code == 422


class TestFormEndpoints:
    """Test editing through the form."""

    def test_type_then_submit(self, client):
        form = client.patch("/api/form", json={"destination": "Kyoto", "end_date": "2024-06-20"}).json()
        assert form["destination"] == "Kyoto"
        assert form["start_date"] == "2024-06-15"
        assert form["end_date"] == "2024-06-20"

        response = client.post("/api/form/submit")

        assert response.status_code == 200
        assert response.json()["notification"]["message"] == "Trip added!"
        assert response.json()["form"]["destination"] == ""

    def test_submit_blank_form(self, client):
        response = client.post("/api/form/submit")

        assert response.status_code == 400
        assert response.json()["detail"]["code"] == "EMPTY_DESTINATION"

    def test_edit_then_submit(self, client):
        client.post("/api/trips", json=PARIS)

        form = client.post("/api/trips/trip-1/edit").json()
        assert form["mode"] == "editing"
        assert form["submit_label"] == "Update Trip"
        assert form["destination"] == "Paris"

        client.patch("/api/form", json={"destination": "Nice"})
        response = client.post("/api/form/submit")

        assert response.json()["notification"]["message"] == "Trip updated!"
        assert response.json()["trip"]["id"] == "trip-1"

    def test_edit_unknown(self, client):
        assert client.post("/api/trips/ghost/edit").status_code == 404

    def test_reset(self, client):
        client.patch("/api/form", json={"destination": "Kyoto"})

        form = client.post("/api/form/reset").json()

        assert form["destination"] == ""
        assert form["mode"] == "blank"


class TestDeleteEndpoint:
    """Test DELETE /api/trips/{id}."""

    def test_prompt(self, client):
        client.post("/api/trips", json=PARIS)

        prompt = client.get("/api/trips/trip-1/delete-prompt").json()

        assert prompt["title"] == "Delete Trip"
        assert prompt["message"] == "Are you sure you want to delete this trip?"
        assert prompt["actions"] == ["Cancel", "Delete"]

    def test_prompt_unknown(self, client):
        assert client.get("/api/trips/ghost/delete-prompt").status_code == 404

    def test_confirmed(self, client):
        client.post("/api/trips", json=PARIS)

        data = client.delete("/api/trips/trip-1", params={"confirm": "true"}).json()

        assert data["deleted"] is True
        assert data["notification"] == {"title": "Success", "message": "Trip deleted!"}
        assert client.get("/api/trips").json()["trips"] == []

    def test_cancelled(self, client):
        client.post("/api/trips", json=PARIS)

        data = client.delete("/api/trips/trip-1", params={"confirm": "false"}).json()

        assert data["deleted"] is False
        assert data["notification"] is None
        assert len(client.get("/api/trips").json()["trips"]) == 1

    def test_no_answer_uses_setting(self):
        cancelling = TestClient(make_app())
        confirming = TestClient(make_app(confirm_deletes_by_default=True))
        for c in (cancelling, confirming):
            c.post("/api/trips", json=PARIS)

        assert cancelling.delete("/api/trips/trip-1").json()["deleted"] is False
        assert confirming.delete("/api/trips/trip-1").json()["deleted"] is True

    def test_unknown_id(self, client):
        data = client.delete("/api/trips/ghost", params={"confirm": "true"}).json()

        assert data["deleted"] is False

    def test_delete_edited_trip_clears_form(self, client):
        client.post("/api/trips", json=PARIS)
        client.post("/api/trips/trip-1/edit")

        data = client.delete("/api/trips/trip-1", params={"confirm": "true"}).json()

        assert data["form"]["mode"] == "blank"
        assert data["form"]["destination"] == ""


class TestScenarioAsync:
    """Full lifecycle over an async client."""

    @pytest.mark.asyncio
    async def test_paris_lyon_delete(self):
        app = make_app()
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            added = (await ac.post("/api/trips", json=PARIS)).json()
            trip_id = added["trip"]["id"]

            await ac.post(f"/api/trips/{trip_id}/edit")
            await ac.patch("/api/form", json={
                "destination": "Lyon",
                "start_date": "2024-02-01T00:00:00.000Z",
                "end_date": "2024-02-05T00:00:00.000Z",
            })
            updated = (await ac.post("/api/form/submit")).json()
            assert updated["trip"]["id"] == trip_id
            assert updated["trip"]["destination"] == "Lyon"
            assert updated["trip"]["start_date"] == "2024-02-01"

            screen = (await ac.get("/api/trips")).json()
            assert len(screen["trips"]) == 1

            deleted = (await ac.delete(f"/api/trips/{trip_id}", params={"confirm": "true"})).json()
            assert deleted["deleted"] is True

            screen = (await ac.get("/api/trips")).json()
            assert screen["trips"] == []

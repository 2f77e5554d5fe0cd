"""Tests for entry endpoints."""

from uuid import uuid4

from fastapi.testclient import TestClient

from coffee_tracker.api.app import create_app
from coffee_tracker.containers import AppContainer

PASSCODE = {"X-Passcode": "coffee123"}

LATTE = {
    "date": "2024-01-05",
    "time": "08:30",
    "type": "Latte",
    "size": "Medium",
    "brewingMethod": "Espresso Machine",
    "notes": "oat milk",
}


def test_create_entry_requires_passcode(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    response = client.post("/entries", json=LATTE)

    assert response.status_code == 401
    assert container.entry_service.list_entries() == []


def test_create_entry_estimates_caffeine(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    response = client.post("/entries", json=LATTE, headers=PASSCODE)

    assert response.status_code == 201
    data = response.json()
    assert data["caffeine"] == 128
    assert data["brewingMethod"] == "Espresso Machine"
    assert data["time"] == "08:30"
    assert data["id"]


def test_create_entry_rejects_unknown_size(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/entries", json={**LATTE, "size": "Venti"}, headers=PASSCODE
    )

    assert response.status_code == 422


def test_list_and_filter_entries(container: AppContainer) -> None:
    client = TestClient(create_app(container))
    client.post("/entries", json=LATTE, headers=PASSCODE)
    client.post(
        "/entries",
        json={**LATTE, "type": "Espresso", "size": "Small", "time": "10:00"},
        headers=PASSCODE,
    )
    client.post("/entries", json={**LATTE, "date": "2024-01-02"}, headers=PASSCODE)

    listed = client.get("/entries").json()["entries"]
    dates = client.get("/entries/dates").json()["dates"]
    on_day = client.get("/entries/by-date/2024-01-05").json()["entries"]

    assert [entry["time"] for entry in listed] == ["10:00", "08:30", "08:30"]
    assert dates == ["2024-01-05", "2024-01-02"]
    assert len(on_day) == 2
    assert sum(entry["caffeine"] for entry in on_day) == 191


def test_update_entry(container: AppContainer) -> None:
    client = TestClient(create_app(container))
    entry_id = client.post("/entries", json=LATTE, headers=PASSCODE).json()["id"]

    response = client.patch(
        f"/entries/{entry_id}",
        json={"caffeine": 150, "brewingMethod": "Aeropress"},
        headers=PASSCODE,
    )

    assert response.status_code == 200
    entry = client.get("/entries").json()["entries"][0]
    assert entry["caffeine"] == 150
    assert entry["brewingMethod"] == "Aeropress"
    assert entry["type"] == "Latte"


def test_update_missing_entry_returns_404(container: AppContainer) -> None:
    client = TestClient(create_app(container))
    client.post("/entries", json=LATTE, headers=PASSCODE)
    before = client.get("/entries").json()

    response = client.patch(
        f"/entries/{uuid4()}", json={"caffeine": 1}, headers=PASSCODE
    )

    assert response.status_code == 404
    assert client.get("/entries").json() == before


def test_delete_entry_is_idempotent(container: AppContainer) -> None:
    client = TestClient(create_app(container))
    entry_id = client.post("/entries", json=LATTE, headers=PASSCODE).json()["id"]

    first = client.delete(f"/entries/{entry_id}", headers=PASSCODE)
    second = client.delete(f"/entries/{entry_id}", headers=PASSCODE)

    assert first.status_code == 204
    assert second.status_code == 204
    assert client.get("/entries").json() == {"entries": []}

"""
Tests for seat layout reconciliation and the maintenance toggle.
"""

import pytest
from httpx import AsyncClient


def seat(seat_id: str, **fields) -> dict:
    body = {"id": seat_id, "label": seat_id.upper(), "type": "Standard", "x": 0, "y": 0, "rotation": 0}
    body.update(fields)
    return body


@pytest.mark.asyncio
async def test_replace_layout_reconciles(client: AsyncClient):
    """{A,B,C} replaced with [B,C,D] leaves exactly {B,C,D}."""
    await client.post("/api/seats", json=[seat("a"), seat("b"), seat("c")])

    response = await client.post(
        "/api/seats",
        json=[seat("b", label="B-moved", x=5), seat("c"), seat("d", type="PC Station")],
    )
    assert response.status_code == 200
    assert response.json() == {"success": True}

    seats = {s["id"]: s for s in (await client.get("/api/seats")).json()}
    assert set(seats) == {"b", "c", "d"}
    assert seats["b"]["label"] == "B-moved"
    assert seats["b"]["x"] == 5
    assert seats["d"]["type"] == "PC Station"


@pytest.mark.asyncio
async def test_replace_layout_empty_clears_seats(client: AsyncClient):
    await client.post("/api/seats", json=[seat("a"), seat("b")])

    response = await client.post("/api/seats", json=[])
    assert response.status_code == 200
    assert (await client.get("/api/seats")).json() == []


@pytest.mark.asyncio
async def test_replace_layout_duplicate_ids_last_wins(client: AsyncClient):
    await client.post("/api/seats", json=[seat("a", label="first"), seat("a", label="second")])

    seats = (await client.get("/api/seats")).json()
    assert len(seats) == 1
    assert seats[0]["label"] == "second"


@pytest.mark.asyncio
async def test_replace_layout_keeps_maintenance_from_payload(client: AsyncClient):
    await client.post("/api/seats", json=[seat("a", isMaintenance=True)])

    seats = (await client.get("/api/seats")).json()
    assert seats[0]["isMaintenance"] is True


@pytest.mark.asyncio
async def test_replace_layout_rejects_unknown_type(client: AsyncClient):
    response = await client.post("/api/seats", json=[seat("a", type="Sofa")])
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_toggle_maintenance_twice_restores(client: AsyncClient, seat_s1):
    first = await client.post("/api/seats/toggle-maintenance/s1")
    assert first.status_code == 200
    assert first.json()["isMaintenance"] is True

    second = await client.post("/api/seats/toggle-maintenance/s1")
    assert second.status_code == 200
    assert second.json()["isMaintenance"] is False

    seats = (await client.get("/api/seats")).json()
    assert seats[0]["isMaintenance"] is False


@pytest.mark.asyncio
async def test_toggle_maintenance_not_found(client: AsyncClient):
    response = await client.post("/api/seats/toggle-maintenance/nope")
    assert response.status_code == 404
    assert response.json()["detail"] == "Seat not found"


@pytest.mark.asyncio
async def test_list_seats_wire_format(client: AsyncClient, seat_s1):
    seats = (await client.get("/api/seats")).json()
    assert seats == [
        {
            "id": "s1",
            "label": "S1",
            "type": "Standard",
            "isMaintenance": False,
            "x": 1,
            "y": 1,
            "rotation": 0,
        }
    ]


@pytest.mark.asyncio
async def test_replace_layout_keeps_fields_not_sent(client: AsyncClient):
    """Re-saving a seat with only some fields leaves the others as stored."""
    await client.post("/api/seats", json=[seat("a", label="A", x=1, y=2, rotation=90)])
    await client.post("/api/seats/toggle-maintenance/a")

    response = await client.post("/api/seats", json=[{"id": "a", "x": 5}])
    assert response.status_code == 200

    stored = (await client.get("/api/seats")).json()[0]
    assert stored["isMaintenance"] is True
    assert stored["label"] == "A"
    assert stored["x"] == 5
    assert stored["y"] == 2
    assert stored["rotation"] == 90


@pytest.mark.asyncio
async def test_replace_layout_new_seat_defaults(client: AsyncClient):
    """A new seat sent with only an id starts out of maintenance."""
    await client.post("/api/seats", json=[{"id": "fresh"}])

    stored = (await client.get("/api/seats")).json()[0]
    assert stored["id"] == "fresh"
    assert stored["isMaintenance"] is False
    assert stored["label"] is None


@pytest.mark.asyncio
async def test_replace_layout_fractional_coordinates(client: AsyncClient):
    response = await client.post("/api/seats", json=[seat("a", x=1.5, y=2.25, rotation=22.5)])
    assert response.status_code == 200

    stored = (await client.get("/api/seats")).json()[0]
    assert (stored["x"], stored["y"], stored["rotation"]) == (1.5, 2.25, 22.5)

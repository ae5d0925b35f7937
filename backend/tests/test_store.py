"""
Tests for the record store operations.
"""

import pytest

from libbook.models import Seat, User


@pytest.mark.asyncio
async def test_upsert_inserts_then_merges(store):
    created = await store.upsert(User, "u-1", {"name": "Ann", "email": "ann@x.edu", "role": "STUDENT"})
    assert created.id == "u-1"
    assert created.is_blocked is False

    merged = await store.upsert(User, "u-1", {"email": "ann@y.edu"})
    assert merged.name == "Ann"
    assert merged.email == "ann@y.edu"
    assert len(await store.find_all(User)) == 1


@pytest.mark.asyncio
async def test_upsert_ignores_id_in_values(store):
    record = await store.upsert(Seat, "s-1", {"id": "other", "label": "L"})
    assert record.id == "s-1"
    assert await store.get(Seat, "other") is None


@pytest.mark.asyncio
async def test_find_one_absent_returns_none(store):
    assert await store.find_one(Seat, Seat.label == "nope") is None


@pytest.mark.asyncio
async def test_find_one_by_predicate(store):
    await store.upsert(Seat, "s-1", {"label": "A", "type": "Standard"})
    await store.upsert(Seat, "s-2", {"label": "B", "type": "PC Station"})

    found = await store.find_one(Seat, Seat.type == "PC Station")
    assert found.id == "s-2"


@pytest.mark.asyncio
async def test_delete_where_counts(store):
    for seat_id in ("a", "b", "c"):
        await store.upsert(Seat, seat_id, {"label": seat_id})

    removed = await store.delete_where(Seat, Seat.id.not_in(["b"]))
    assert removed == 2
    assert [s.id for s in await store.find_all(Seat)] == ["b"]


@pytest.mark.asyncio
async def test_update_where_reports_matches(store):
    await store.upsert(Seat, "a", {"label": "a"})

    assert await store.update_where(Seat, {"label": "z"}, Seat.id == "a") == 1
    assert await store.update_where(Seat, {"label": "z"}, Seat.id == "missing") == 0
    assert (await store.get(Seat, "a")).label == "z"

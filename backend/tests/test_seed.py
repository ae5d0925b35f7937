"""
Tests for startup seeding.
"""

import pytest
from sqlalchemy.exc import IntegrityError

from libbook.models import Seat, User
from libbook.services.seed_service import INITIAL_SEATS, seed_data


@pytest.mark.asyncio
async def test_seed_empty_store(db_session, store):
    seeded = await seed_data(db_session)
    assert seeded == {"seats": 24, "users": 2}

    seats = await store.find_all(Seat)
    users = await store.find_all(User)
    assert len(seats) == 24
    assert not any(s.is_maintenance for s in seats)
    assert {u.role for u in users} == {"ADMIN", "STUDENT"}


@pytest.mark.asyncio
async def test_seed_is_idempotent(db_session, store):
    await seed_data(db_session)
    second = await seed_data(db_session)

    assert second == {"seats": 0, "users": 0}
    assert len(await store.find_all(Seat)) == 24
    assert len(await store.find_all(User)) == 2


@pytest.mark.asyncio
async def test_seed_leaves_existing_data(db_session, store):
    """A non-empty collection is never touched; an empty one is still seeded."""
    await store.upsert(Seat, "only", {"label": "Only", "type": "Standard"})
    await db_session.commit()

    seeded = await seed_data(db_session)

    assert seeded == {"seats": 0, "users": 2}
    seats = await store.find_all(Seat)
    assert [s.id for s in seats] == ["only"]


@pytest.mark.asyncio
async def test_seed_after_manual_edits_changes_nothing(db_session, store):
    await seed_data(db_session)
    await store.upsert(User, "student-1", {"is_blocked": True})
    await db_session.commit()

    await seed_data(db_session)

    student = await store.get(User, "student-1")
    assert student.is_blocked is True


def test_layout_fixture_shape():
    ids = [s["id"] for s in INITIAL_SEATS]
    assert len(ids) == len(set(ids)) == 24
    assert {s["type"] for s in INITIAL_SEATS} == {"Standard", "PC Station", "Quiet Zone"}
    carrel_c12 = next(s for s in INITIAL_SEATS if s["id"] == "s-c12")
    assert (carrel_c12["x"], carrel_c12["y"], carrel_c12["rotation"]) == (4, 8, 90)


@pytest.mark.asyncio
async def test_seats_survive_failed_user_seed(db_session, store, monkeypatch):
    """Each kind commits on its own: a failing user insert keeps the seats."""
    from libbook.services import seed_service

    monkeypatch.setattr(seed_service, "INITIAL_USERS", [seed_service.ADMIN_USER, seed_service.ADMIN_USER])

    with pytest.raises(IntegrityError):
        await seed_data(db_session)
    await db_session.rollback()

    assert len(await store.find_all(Seat)) == 24
    assert await store.find_all(User) == []

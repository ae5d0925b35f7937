"""
Startup seeding of the floor layout and the two built-in accounts.

Each collection is seeded and committed on its own, and only when it is
empty. A failure seeding users leaves the seeded layout in place. The
routine is safe to run on every start: edits made through the API are never
overwritten.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from libbook.db.store import RecordStore
from libbook.models.seat import Seat
from libbook.models.user import User
from libbook.core.logging import get_logger

logger = get_logger(__name__)


def _seat(seat_id: str, label: str, seat_type: str, x: int, y: int, rotation: int) -> dict:
    return {
        "id": seat_id,
        "label": label,
        "type": seat_type,
        "is_maintenance": False,
        "x": x,
        "y": y,
        "rotation": rotation,
    }


INITIAL_SEATS: list[dict] = [
    # PC stations along the top wall
    _seat("s-pc1", "PC1", "PC Station", 9, 0, 180),
    _seat("s-pc2", "PC2", "PC Station", 10, 0, 180),
    _seat("s-pc3", "PC3", "PC Station", 11, 0, 180),
    _seat("s-pc4", "PC4", "PC Station", 13, 1, 225),
    # Table group 1
    _seat("s-t1-1", "T1-A", "Quiet Zone", 11, 3, 180),
    _seat("s-t1-2", "T1-B", "Quiet Zone", 11, 5, 0),
    _seat("s-t1-3", "T1-C", "Quiet Zone", 10, 4, 90),
    _seat("s-t1-4", "T1-D", "Quiet Zone", 12, 4, 270),
    # Table group 2
    _seat("s-t2-1", "T2-A", "Quiet Zone", 11, 7, 180),
    _seat("s-t2-2", "T2-B", "Quiet Zone", 11, 9, 0),
    _seat("s-t2-3", "T2-C", "Quiet Zone", 10, 8, 90),
    _seat("s-t2-4", "T2-D", "Quiet Zone", 12, 8, 270),
    # Carrels, three rows of four
    *[
        _seat(f"s-c{n}", f"C{n}", "Standard", (n - 1) % 4 + 1, 4 + 2 * ((n - 1) // 4), 90)
        for n in range(1, 13)
    ],
]

ADMIN_USER = {
    "id": "admin-1",
    "name": "Library Admin",
    "email": "admin@library.edu",
    "password": "admin",
    "role": "ADMIN",
    "is_blocked": False,
}

DEMO_STUDENT = {
    "id": "student-1",
    "name": "John Doe",
    "email": "john@student.edu",
    "password": "pass",
    "role": "STUDENT",
    "student_id": "CS2024001",
    "department": "Computer Science",
    "year_section": "3-A",
    "mobile": "5550123456",
    "is_blocked": False,
}

INITIAL_USERS: list[dict] = [ADMIN_USER, DEMO_STUDENT]


async def seed_data(db: AsyncSession) -> dict[str, int]:
    """
    Seed seats and users into empty collections.

    Returns how many records of each kind were inserted (0 when the
    collection already had data).
    """
    store = RecordStore(db)
    seeded = {"seats": 0, "users": 0}

    if not await store.find_all(Seat):
        logger.info("seeding_seats", count=len(INITIAL_SEATS))
        seeded["seats"] = await store.insert_many(Seat, INITIAL_SEATS)
        await db.commit()

    if not await store.find_all(User):
        logger.info("seeding_users", count=len(INITIAL_USERS))
        seeded["users"] = await store.insert_many(User, INITIAL_USERS)
        await db.commit()

    return seeded

"""
Seat service: layout reconciliation and the maintenance flag.

LAYOUT RECONCILIATION
=====================

The admin floor-plan editor posts the complete seat list. We make the stored
seat set equal to that list:

  1. DELETE every seat whose id is not in the payload
  2. UPSERT each payload seat by id (in payload order, so on duplicate ids
     the last occurrence wins)

Both phases run in the request's transaction and commit together. A failing
upsert rolls back the delete as well, so readers only ever see the old
layout or the new one.
"""

from sqlalchemy import not_
from sqlalchemy.ext.asyncio import AsyncSession

from libbook.db.store import RecordStore
from libbook.models.seat import Seat
from libbook.schemas.seat import SeatSchema
from libbook.core.exceptions import NotFoundError
from libbook.core.logging import get_logger
from libbook.core.metrics import record_layout_replaced, record_maintenance_toggle

logger = get_logger(__name__)


async def list_seats(db: AsyncSession) -> list[Seat]:
    return await RecordStore(db).find_all(Seat)


async def replace_seat_layout(db: AsyncSession, seats: list[SeatSchema]) -> int:
    """Reconcile stored seats with ``seats``. Returns the number of seats removed."""
    store = RecordStore(db)
    incoming_ids = [seat.id for seat in seats]

    removed = await store.delete_where(Seat, Seat.id.not_in(incoming_ids))
    for seat in seats:
        # Only fields the client sent; stored values for omitted fields are kept
        await store.upsert(Seat, seat.id, seat.model_dump(exclude_unset=True))
    await db.commit()

    record_layout_replaced()
    logger.info(
        "seat_layout_replaced",
        seats=len(set(incoming_ids)),
        removed=removed,
    )
    return removed


async def toggle_maintenance(db: AsyncSession, seat_id: str) -> Seat:
    """
    Flip is_maintenance in one UPDATE so two concurrent toggles
    cannot both read the same old value.
    """
    store = RecordStore(db)
    matched = await store.update_where(
        Seat,
        {"is_maintenance": not_(Seat.is_maintenance)},
        Seat.id == seat_id,
    )
    if not matched:
        raise NotFoundError("Seat", seat_id)

    seat = await store.get(Seat, seat_id)
    await db.commit()

    record_maintenance_toggle(seat.is_maintenance)
    logger.info("seat_maintenance_toggled", seat_id=seat_id, is_maintenance=seat.is_maintenance)
    return seat

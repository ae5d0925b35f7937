"""
Booking service with slot-level double-booking prevention.

CONCURRENCY STRATEGY: Existence Check + Partial Unique Index
=============================================================

Problem:
  A slot is (seat_id, date, start_time). Two students submit the same slot
  at the same moment. Both check "is there an ACTIVE booking?", both see
  none, both insert. Result: the seat is double-booked.

Solution:
  1. Fast path: look for an ACTIVE booking on the slot and reject with 409
     if one exists. This answers the common case without touching the
     write path.
  2. Safety net: the bookings table carries a partial unique index
     on (seat_id, date, start_time) WHERE status = 'ACTIVE'. When two
     requests race past step 1, the database admits exactly one INSERT and
     the other fails with IntegrityError, which we translate to the same 409.

  CANCELLED rows fall outside the index, so a slot can be booked again
  once its booking is cancelled.

Cancellation is one-way (ACTIVE -> CANCELLED). Re-cancelling rewrites the
same state and succeeds.
"""

import time
import uuid
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from libbook.db.store import RecordStore
from libbook.models.booking import Booking, STATUS_ACTIVE, STATUS_CANCELLED
from libbook.schemas.booking import BookingCreate
from libbook.core.exceptions import ConflictError, NotFoundError
from libbook.core.logging import get_logger
from libbook.core.metrics import booking_latency, record_booking_attempt, record_booking_cancelled

logger = get_logger(__name__)

SLOT_TAKEN = "Seat already booked"


def _now_ms() -> int:
    return int(time.time() * 1000)


async def find_active_booking(
    store: RecordStore,
    seat_id: str,
    date: str,
    start_time: str,
) -> Optional[Booking]:
    return await store.find_one(
        Booking,
        Booking.seat_id == seat_id,
        Booking.date == date,
        Booking.start_time == start_time,
        Booking.status == STATUS_ACTIVE,
    )


async def list_bookings(db: AsyncSession) -> list[Booking]:
    return await RecordStore(db).find_all(Booking)


async def create_booking(db: AsyncSession, booking_data: BookingCreate) -> Booking:
    """Admit a booking for a free slot, or raise ConflictError."""
    store = RecordStore(db)
    slot = {
        "seat_id": booking_data.seat_id,
        "date": booking_data.date,
        "start_time": booking_data.start_time,
    }

    with booking_latency.time():
        existing = await find_active_booking(store, **slot)
        if existing:
            record_booking_attempt("conflict")
            logger.warning("booking_conflict", existing_booking_id=existing.id, **slot)
            raise ConflictError(SLOT_TAKEN)

        values = booking_data.model_dump()
        values["id"] = booking_data.id or str(uuid.uuid4())
        values["timestamp"] = booking_data.timestamp or _now_ms()
        values["status"] = STATUS_ACTIVE

        try:
            booking = await store.insert(Booking, values)
            await db.commit()
        except IntegrityError:
            await db.rollback()
            # Lost the race to a concurrent request for the same slot
            winner = await find_active_booking(store, **slot)
            if winner is None:
                record_booking_attempt("error")
                raise
            record_booking_attempt("conflict")
            logger.warning("booking_conflict_race", existing_booking_id=winner.id, **slot)
            raise ConflictError(SLOT_TAKEN)

    record_booking_attempt("success")
    logger.info(
        "booking_created",
        booking_id=booking.id,
        user_id=booking.user_id,
        **slot,
    )
    return booking


async def cancel_booking(db: AsyncSession, booking_id: str) -> Booking:
    """Move a booking to CANCELLED. Already-cancelled bookings stay cancelled."""
    store = RecordStore(db)
    matched = await store.update_where(
        Booking,
        {"status": STATUS_CANCELLED},
        Booking.id == booking_id,
    )
    if not matched:
        raise NotFoundError("Booking", booking_id)

    booking = await store.get(Booking, booking_id)
    await db.commit()

    record_booking_cancelled()
    logger.info("booking_cancelled", booking_id=booking_id, seat_id=booking.seat_id)
    return booking

"""
Booking endpoints with slot-level double-booking prevention.
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from libbook.db.session import get_db
from libbook.schemas.booking import BookingCreate, BookingResponse
from libbook.services.booking_service import list_bookings, create_booking, cancel_booking

router = APIRouter(prefix="/bookings", tags=["Bookings"])


@router.get("", response_model=list[BookingResponse])
async def list_bookings_endpoint(db: AsyncSession = Depends(get_db)):
    return await list_bookings(db)


@router.post("", response_model=BookingResponse, status_code=status.HTTP_201_CREATED)
async def create_booking_endpoint(
    booking_data: BookingCreate,
    db: AsyncSession = Depends(get_db),
):
    """
    Book a seat for one slot (seatId + date + startTime).

    Returns 409 when the slot already has an ACTIVE booking, including the
    case where a concurrent request for the same slot committed first.
    """
    return await create_booking(db, booking_data)


@router.put("/{booking_id}/cancel", response_model=BookingResponse)
async def cancel_booking_endpoint(booking_id: str, db: AsyncSession = Depends(get_db)):
    """Cancel a booking. Cancelling twice is allowed and changes nothing."""
    return await cancel_booking(db, booking_id)

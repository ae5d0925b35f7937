"""
Seat endpoints: floor layout and maintenance flag.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from libbook.db.session import get_db
from libbook.schemas.seat import SeatSchema, SeatLayoutResult
from libbook.services.seat_service import list_seats, replace_seat_layout, toggle_maintenance

router = APIRouter(prefix="/seats", tags=["Seats"])


@router.get("", response_model=list[SeatSchema])
async def list_seats_endpoint(db: AsyncSession = Depends(get_db)):
    return await list_seats(db)


@router.post("", response_model=SeatLayoutResult)
async def replace_seat_layout_endpoint(
    seats: list[SeatSchema],
    db: AsyncSession = Depends(get_db),
):
    """
    Replace the whole floor layout.
    Seats missing from the body are deleted; the rest are inserted or updated.
    """
    await replace_seat_layout(db, seats)
    return SeatLayoutResult(success=True)


@router.post("/toggle-maintenance/{seat_id}", response_model=SeatSchema)
async def toggle_maintenance_endpoint(seat_id: str, db: AsyncSession = Depends(get_db)):
    """Flip a seat in or out of maintenance. 404 for an unknown id."""
    return await toggle_maintenance(db, seat_id)

from libbook.schemas.user import UserCreate, UserUpdate, UserResponse
from libbook.schemas.seat import SeatSchema, SeatLayoutResult
from libbook.schemas.booking import BookingCreate, BookingResponse

__all__ = [
    "UserCreate", "UserUpdate", "UserResponse",
    "SeatSchema", "SeatLayoutResult",
    "BookingCreate", "BookingResponse",
]

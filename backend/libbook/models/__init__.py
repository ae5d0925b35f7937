from libbook.models.user import User
from libbook.models.seat import Seat
from libbook.models.booking import Booking, STATUS_ACTIVE, STATUS_CANCELLED

__all__ = ["User", "Seat", "Booking", "STATUS_ACTIVE", "STATUS_CANCELLED"]

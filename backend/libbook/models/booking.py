"""
Booking model: one seat reserved for one time slot by one user.

Key design decisions:
- A slot is (seat_id, date, start_time); at most one ACTIVE booking per slot,
  enforced by a partial unique index so concurrent inserts cannot both win
- Cancelling flips status to CANCELLED; rows are never deleted
- seat_id / user_id are plain strings, not foreign keys (seats can be removed
  by a layout replace while their booking history stays)
"""

from sqlalchemy import Column, String, BigInteger, Index, CheckConstraint, text

from libbook.db.base import Base, TimestampMixin

STATUS_ACTIVE = "ACTIVE"
STATUS_CANCELLED = "CANCELLED"

_ACTIVE_ONLY = text("status = 'ACTIVE'")


class Booking(Base, TimestampMixin):
    __tablename__ = "bookings"

    id = Column(String(64), primary_key=True)
    seat_id = Column(String(64), nullable=False, index=True)
    user_id = Column(String(64), nullable=False, index=True)
    user_name = Column(String(255), nullable=True)
    date = Column(String(10), nullable=False)  # YYYY-MM-DD
    start_time = Column(String(5), nullable=False)  # HH:MM
    end_time = Column(String(5), nullable=False)
    timestamp = Column(BigInteger, nullable=False)  # epoch milliseconds
    status = Column(String(20), nullable=False, default=STATUS_ACTIVE)

    __table_args__ = (
        Index(
            "uq_bookings_active_slot",
            "seat_id",
            "date",
            "start_time",
            unique=True,
            postgresql_where=_ACTIVE_ONLY,
            sqlite_where=_ACTIVE_ONLY,
        ),
        CheckConstraint("status IN ('ACTIVE', 'CANCELLED')", name="check_booking_status"),
    )

    def __repr__(self) -> str:
        return f"<Booking(id={self.id}, seat={self.seat_id}, slot={self.date} {self.start_time}, status={self.status})>"

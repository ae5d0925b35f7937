"""
Seat model: one physical, positioned reservable place on the floor plan.

x/y are grid cells on the seat map, rotation is in degrees.
"""

from sqlalchemy import Column, String, Boolean, Float

from libbook.db.base import Base, TimestampMixin


class Seat(Base, TimestampMixin):
    __tablename__ = "seats"

    id = Column(String(64), primary_key=True)
    label = Column(String(64), nullable=True)
    type = Column(String(32), nullable=True)  # Standard, PC Station, Quiet Zone
    is_maintenance = Column(Boolean, nullable=False, default=False)
    x = Column(Float, nullable=True)
    y = Column(Float, nullable=True)
    rotation = Column(Float, nullable=True)

    def __repr__(self) -> str:
        return f"<Seat(id={self.id}, label={self.label}, maintenance={self.is_maintenance})>"

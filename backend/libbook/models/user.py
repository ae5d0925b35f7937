"""
User model: library patrons and staff.

Passwords are stored exactly as submitted. The API has no login flow of its
own; the seat-map frontend compares credentials client-side.
"""

from sqlalchemy import Column, String, Boolean

from libbook.db.base import Base, TimestampMixin


class User(Base, TimestampMixin):
    __tablename__ = "users"

    id = Column(String(64), primary_key=True)
    name = Column(String(255), nullable=True)
    email = Column(String(255), nullable=True, index=True)
    password = Column(String(255), nullable=True)
    role = Column(String(20), nullable=True)  # ADMIN, STUDENT

    # Student-only profile
    student_id = Column(String(64), nullable=True)
    department = Column(String(255), nullable=True)
    year_section = Column(String(32), nullable=True)
    mobile = Column(String(32), nullable=True)

    is_blocked = Column(Boolean, nullable=False, default=False)

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email={self.email}, role={self.role})>"

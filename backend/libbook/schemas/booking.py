"""
Pydantic schemas for booking-related request/response validation.
"""

from typing import Literal, Optional
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

BookingStatus = Literal["ACTIVE", "CANCELLED"]

_camel = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class BookingCreate(BaseModel):
    model_config = _camel

    # Generated when the client does not assign one
    id: Optional[str] = None
    seat_id: str
    user_id: str
    user_name: Optional[str] = None
    date: str
    start_time: str
    end_time: str
    timestamp: Optional[int] = None


class BookingResponse(BaseModel):
    model_config = _camel

    id: str
    seat_id: str
    user_id: str
    user_name: Optional[str] = None
    date: str
    start_time: str
    end_time: str
    timestamp: int
    status: BookingStatus

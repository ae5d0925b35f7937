"""
Pydantic schemas for seats and seat layouts.
"""

from typing import Literal, Optional
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

SeatType = Literal["Standard", "PC Station", "Quiet Zone"]


class SeatSchema(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    id: str
    label: Optional[str] = None
    type: Optional[SeatType] = None
    is_maintenance: bool = False
    x: Optional[float] = None
    y: Optional[float] = None
    rotation: Optional[float] = None


class SeatLayoutResult(BaseModel):
    success: bool = True

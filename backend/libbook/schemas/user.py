"""
Pydantic schemas for user-related request/response validation.
Wire names are camelCase (studentId, yearSection, isBlocked).
"""

from typing import Literal, Optional
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

Role = Literal["ADMIN", "STUDENT"]


class UserFields(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None
    role: Optional[Role] = None
    student_id: Optional[str] = None
    department: Optional[str] = None
    year_section: Optional[str] = None
    mobile: Optional[str] = None


class UserCreate(UserFields):
    id: str
    is_blocked: bool = False


class UserUpdate(UserFields):
    """Partial update: only fields present in the request body are written."""

    is_blocked: Optional[bool] = None


class UserResponse(UserFields):
    id: str
    is_blocked: bool = False

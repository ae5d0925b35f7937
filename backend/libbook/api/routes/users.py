"""
User endpoints: list, create, partial update.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from libbook.db.session import get_db
from libbook.schemas.user import UserCreate, UserUpdate, UserResponse
from libbook.services.user_service import list_users, create_user, update_user

router = APIRouter(prefix="/users", tags=["Users"])


@router.get("", response_model=list[UserResponse])
async def list_users_endpoint(db: AsyncSession = Depends(get_db)):
    return await list_users(db)


@router.post("", response_model=UserResponse)
async def create_user_endpoint(user_data: UserCreate, db: AsyncSession = Depends(get_db)):
    """Create a user under the caller-assigned id."""
    return await create_user(db, user_data)


@router.put("/{user_id}", response_model=UserResponse)
async def update_user_endpoint(
    user_id: str,
    user_data: UserUpdate,
    db: AsyncSession = Depends(get_db),
):
    """Update only the fields present in the body. 404 for an unknown id."""
    return await update_user(db, user_id, user_data)

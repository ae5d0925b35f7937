"""
User service: direct persistence of library accounts.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from libbook.db.store import RecordStore
from libbook.models.user import User
from libbook.schemas.user import UserCreate, UserUpdate
from libbook.core.exceptions import NotFoundError
from libbook.core.logging import get_logger

logger = get_logger(__name__)


async def list_users(db: AsyncSession) -> list[User]:
    """All users, unredacted."""
    return await RecordStore(db).find_all(User)


async def create_user(db: AsyncSession, user_data: UserCreate) -> User:
    """
    Persist a user under the id the caller supplied.
    An existing id is overwritten with the submitted fields.
    """
    user = await RecordStore(db).upsert(User, user_data.id, user_data.model_dump())
    await db.commit()

    logger.info("user_created", user_id=user.id, role=user.role)
    return user


async def update_user(db: AsyncSession, user_id: str, user_data: UserUpdate) -> User:
    """Merge the fields present in the request into an existing user."""
    store = RecordStore(db)
    if await store.get(User, user_id) is None:
        raise NotFoundError("User", user_id)

    changes = user_data.model_dump(exclude_unset=True)
    if changes.get("is_blocked", False) is None:
        del changes["is_blocked"]
    user = await store.upsert(User, user_id, changes)
    await db.commit()

    logger.info("user_updated", user_id=user_id, fields=sorted(changes))
    return user

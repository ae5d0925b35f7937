"""
Record store over an AsyncSession.

Every record kind (User, Seat, Booking) is keyed by a caller-assigned string
``id``. The services only talk to the database through the four operations
below, so no handler builds SQL of its own beyond passing filter criteria.

UPSERT STRATEGY
===============

``upsert`` must be atomic per key. On PostgreSQL and SQLite we issue a single
``INSERT ... ON CONFLICT (id) DO UPDATE`` so two concurrent upserts of the
same id can never both insert. Only the supplied fields are written on the
update branch, which gives merge semantics for partial payloads.

Other dialects fall back to read-modify-write inside the caller's transaction.
"""

from typing import Any, Optional, Sequence, Type, TypeVar

from sqlalchemy import delete, func, select, update
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.ext.asyncio import AsyncSession

from libbook.db.base import Base
from libbook.core.logging import get_logger

logger = get_logger(__name__)

RecordT = TypeVar("RecordT", bound=Base)

_UPSERT_INSERTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


class RecordStore:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def find_all(self, kind: Type[RecordT]) -> list[RecordT]:
        """Every record of a kind. No ordering is guaranteed."""
        result = await self.session.execute(select(kind))
        return list(result.scalars().all())

    async def find_one(self, kind: Type[RecordT], *criteria: Any) -> Optional[RecordT]:
        """First record matching all criteria, or None."""
        result = await self.session.execute(
            select(kind)
            .where(*criteria)
            .limit(1)
            .execution_options(populate_existing=True)
        )
        return result.scalars().first()

    async def get(self, kind: Type[RecordT], key: str) -> Optional[RecordT]:
        return await self.find_one(kind, kind.id == key)

    async def upsert(self, kind: Type[RecordT], key: str, values: dict[str, Any]) -> RecordT:
        """Insert ``key`` if absent, otherwise merge ``values`` into the stored record."""
        fields = {name: value for name, value in values.items() if name != "id"}
        dialect = self.session.get_bind().dialect.name
        insert_fn = _UPSERT_INSERTS.get(dialect)

        if insert_fn is None:
            return await self._merge(kind, key, fields)

        stmt = insert_fn(kind).values(id=key, **fields)
        if fields:
            updates = {name: stmt.excluded[name] for name in fields}
            updates["updated_at"] = func.now()
            stmt = stmt.on_conflict_do_update(index_elements=[kind.id], set_=updates)
        else:
            stmt = stmt.on_conflict_do_nothing(index_elements=[kind.id])
        await self.session.execute(stmt)

        record = await self.get(kind, key)
        logger.debug("record_upserted", kind=kind.__tablename__, id=key)
        return record

    async def delete_where(self, kind: Type[RecordT], *criteria: Any) -> int:
        """Remove all records matching the criteria and return how many went."""
        result = await self.session.execute(
            delete(kind).where(*criteria).execution_options(synchronize_session=False)
        )
        return result.rowcount or 0

    async def update_where(self, kind: Type[RecordT], values: dict[str, Any], *criteria: Any) -> int:
        """Single UPDATE statement; returns the number of matched rows."""
        result = await self.session.execute(
            update(kind)
            .where(*criteria)
            .values(**values)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount or 0

    async def insert(self, kind: Type[RecordT], values: dict[str, Any]) -> RecordT:
        """Plain INSERT. Unique violations surface as IntegrityError on flush."""
        record = kind(**values)
        self.session.add(record)
        await self.session.flush()
        return record

    async def insert_many(self, kind: Type[RecordT], rows: Sequence[dict[str, Any]]) -> int:
        """Bulk insert fresh records (used by the seeder on empty collections)."""
        self.session.add_all([kind(**row) for row in rows])
        await self.session.flush()
        return len(rows)

    async def _merge(self, kind: Type[RecordT], key: str, fields: dict[str, Any]) -> RecordT:
        record = await self.get(kind, key)
        if record is None:
            record = kind(id=key, **fields)
            self.session.add(record)
        else:
            for name, value in fields.items():
                setattr(record, name, value)
        await self.session.flush()
        await self.session.refresh(record)
        return record

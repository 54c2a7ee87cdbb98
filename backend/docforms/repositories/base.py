from typing import TypeVar, Generic, Type, Optional
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, update, delete
from docforms.models.base import TimestampedModel
from datetime import datetime

T = TypeVar('T', bound=TimestampedModel)


class BaseRepository(Generic[T]):
    """Per-model queries; every write commits before returning"""

    def __init__(self, model_class: Type[T]):
        self.model_class = model_class

    async def add(self, db: AsyncSession, record: T) -> T:
        db.add(record)
        await db.commit()
        await db.refresh(record)
        return record

    async def get_by_id(self, db: AsyncSession, id: str) -> Optional[T]:
        result = await db.execute(select(self.model_class).where(self.model_class.id == id))
        return result.scalar_one_or_none()

    async def update(self, db: AsyncSession, id: str, **values) -> Optional[T]:
        """Update one record by id and return its fresh state"""
        await self.update_where(db, self.model_class.id == id, **values)
        return await self.get_by_id(db, id)

    async def update_where(self, db: AsyncSession, *conditions, **values) -> int:
        """
        Conditional bulk update; the WHERE clause is the guard, so callers
        learn from the row count whether the transition happened.
        """
        values.setdefault('updated_at', datetime.utcnow())
        result = await db.execute(
            update(self.model_class)
            .where(*conditions)
            .values(**values)
            .execution_options(synchronize_session="fetch")
        )
        await db.commit()
        return result.rowcount

    async def delete(self, db: AsyncSession, id: str) -> bool:
        return await self.delete_where(db, self.model_class.id == id) > 0

    async def delete_where(self, db: AsyncSession, *conditions) -> int:
        result = await db.execute(delete(self.model_class).where(*conditions))
        await db.commit()
        return result.rowcount

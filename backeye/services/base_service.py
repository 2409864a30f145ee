# backeye/services/base_service.py
"""Base service with common CRUD operations."""
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy import select
from typing import Type, Any, Dict, Optional, List, TypeVar, Generic
import logging

logger = logging.getLogger(__name__)

# Define generic type
T = TypeVar('T')

class BaseService(Generic[T]):
    def __init__(self, model: Type[T], db: AsyncSession):
        self.model = model
        self.db = db

    async def commit(self):
        """Commit the unit of work, rolling back when the store rejects it"""
        try:
            await self.db.commit()
        except SQLAlchemyError as e:
            logger.error(f"Commit failed for {self.model.__name__}: {e}")
            await self.db.rollback()
            raise

    async def get(self, id: Any) -> Optional[T]:
        stmt = select(self.model).where(self.model.id == id)
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def get_multi(self, skip: int = 0, limit: Optional[int] = 100, **filters) -> List[T]:
        stmt = select(self.model).order_by(self.model.id).offset(skip).limit(limit)

        for key, value in filters.items():
            if hasattr(self.model, key) and value is not None:
                stmt = stmt.where(getattr(self.model, key) == value)

        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def add(self, obj: T) -> T:
        self.db.add(obj)
        await self.commit()
        await self.db.refresh(obj)
        return obj

    async def update(self, id: Any, obj_in: Dict) -> Optional[T]:
        obj = await self.get(id)
        if not obj:
            return None
        for key, value in obj_in.items():
            if key != "id" and hasattr(obj, key):
                setattr(obj, key, value)
        await self.commit()
        await self.db.refresh(obj)
        return obj

    async def hard_delete(self, id: Any) -> bool:
        """Permanently delete record from database"""
        obj = await self.get(id)
        if not obj:
            return False
        await self.db.delete(obj)
        await self.commit()
        return True

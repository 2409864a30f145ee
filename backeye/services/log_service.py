# backeye/services/log_service.py
from typing import List, Optional
from datetime import datetime
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from .base_service import BaseService
from ..models.log import Log

class LogService(BaseService[Log]):
    def __init__(self, db: AsyncSession):
        super().__init__(Log, db)

    async def get_log_by_id(self, log_id: int) -> Optional[Log]:
        return await self.get(log_id)

    async def get_logs_by_person_id(self, person_id: int) -> List[Log]:
        """Get all logs written for a person, oldest first"""
        stmt = (
            select(Log)
            .where(Log.person_id == person_id)
            .order_by(Log.creation_date, Log.id)
        )
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def add_log(self, log: Log) -> Log:
        if log.creation_date is None:
            log.creation_date = datetime.now()
        return await self.add(log)

    async def remove_log_by_id(self, log_id: int) -> bool:
        return await self.hard_delete(log_id)

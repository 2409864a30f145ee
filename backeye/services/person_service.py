# backeye/services/person_service.py
from typing import Any, Dict, List, Optional
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, update, delete, func
import logging
from .base_service import BaseService
from .measurement_service import MeasurementService
from .student_lesson_service import StudentLessonService
from ..models.person import Person, PersonType
from ..models.lesson import Lesson
from ..models.log import Log

logger = logging.getLogger(__name__)

class PersonService(BaseService[Person]):
    def __init__(self, db: AsyncSession):
        super().__init__(Person, db)

    async def get_person_by_id(self, person_id: int) -> Optional[Person]:
        return await self.get(person_id)

    async def get_person_by_password(self, password: str) -> Optional[Person]:
        """Students sign in with their password alone"""
        stmt = select(Person).where(Person.password == password).order_by(Person.id)
        result = await self.db.execute(stmt)
        return result.scalars().first()

    async def get_person_by_email_password(self, email: str, password: str) -> Optional[Person]:
        stmt = select(Person).where(
            func.lower(Person.email) == email.strip().lower(),
            Person.password == password
        ).order_by(Person.id)
        result = await self.db.execute(stmt)
        return result.scalars().first()

    async def get_students(self, skip: int = 0, limit: Optional[int] = 100) -> List[Person]:
        return await self.get_multi(skip=skip, limit=limit, type=PersonType.STUDENT)

    async def add_person(self, person: Person) -> Person:
        return await self.add(person)

    async def update_person(self, person_id: int, changes: Dict[str, Any]) -> Optional[Person]:
        """Apply the given fields; an empty password leaves the stored one in place"""
        changes = dict(changes)
        if not changes.get("password"):
            changes.pop("password", None)
        return await self.update(person_id, changes)

    async def delete_person(self, person_id: int) -> bool:
        """Delete a person with their logs, measurements and enrollments.

        Lessons the person teaches are kept and lose their owner.
        """
        person = await self.get(person_id)
        if not person:
            return False

        await MeasurementService(self.db).delete_person_measurements(person_id, commit=False)
        await StudentLessonService(self.db).delete_all_student_lessons(person_id, commit=False)
        await self.db.execute(delete(Log).where(Log.person_id == person_id))
        await self.db.execute(
            update(Lesson).where(Lesson.person_id == person_id).values(person_id=None)
        )
        await self.db.delete(person)
        await self.commit()
        logger.info(f"Person {person_id} deleted")
        return True

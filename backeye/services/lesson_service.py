# backeye/services/lesson_service.py
from typing import Any, Dict, List, Optional
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, delete
from .base_service import BaseService
from ..models.lesson import Lesson
from ..models.measurement import Measurement
from ..models.student_lesson import StudentLesson

class LessonService(BaseService[Lesson]):
    def __init__(self, db: AsyncSession):
        super().__init__(Lesson, db)

    async def get_lesson_by_id(self, lesson_id: int) -> Optional[Lesson]:
        return await self.get(lesson_id)

    async def get_lessons_by_teacher(self, person_id: int) -> List[Lesson]:
        """Get the lessons owned by a teacher"""
        stmt = (
            select(Lesson)
            .where(Lesson.person_id == person_id)
            .order_by(Lesson.start_time, Lesson.id)
        )
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def get_lessons_by_student(self, person_id: int) -> List[Lesson]:
        """Get the lessons a student is enrolled in"""
        stmt = (
            select(Lesson)
            .join(StudentLesson, StudentLesson.lesson_id == Lesson.id)
            .where(StudentLesson.person_id == person_id)
            .order_by(Lesson.start_time, Lesson.id)
        )
        result = await self.db.execute(stmt)
        return list(result.scalars().unique().all())

    async def add_lesson(self, lesson: Lesson) -> Lesson:
        return await self.add(lesson)

    async def update_lesson(self, lesson_id: int, changes: Dict[str, Any]) -> Optional[Lesson]:
        return await self.update(lesson_id, changes)

    async def delete_lesson(self, lesson_id: int) -> bool:
        """Delete a lesson together with its enrollments and measurements"""
        lesson = await self.get(lesson_id)
        if not lesson:
            return False
        await self.db.execute(delete(StudentLesson).where(StudentLesson.lesson_id == lesson_id))
        await self.db.execute(delete(Measurement).where(Measurement.lesson_id == lesson_id))
        await self.db.delete(lesson)
        await self.commit()
        return True

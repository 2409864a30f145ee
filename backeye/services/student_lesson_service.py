# backeye/services/student_lesson_service.py
"""Enrollment of students in lessons."""
from typing import List, Optional
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, delete
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import selectinload
import logging
from .base_service import BaseService
from ..models.student_lesson import StudentLesson
from ..models.person import Person

logger = logging.getLogger(__name__)

class StudentLessonService(BaseService[StudentLesson]):
    def __init__(self, db: AsyncSession):
        super().__init__(StudentLesson, db)

    def _with_relations(self):
        return select(StudentLesson).options(
            selectinload(StudentLesson.lesson),
            selectinload(StudentLesson.person),
        )

    async def get_student_lesson(self, lesson_id: Optional[int], person_id: Optional[int]) -> Optional[StudentLesson]:
        """Get the enrollment row of a person in a lesson, with both sides loaded"""
        stmt = self._with_relations().where(
            StudentLesson.lesson_id == lesson_id,
            StudentLesson.person_id == person_id
        ).order_by(StudentLesson.id)
        result = await self.db.execute(stmt)
        return result.scalars().first()

    async def get_student_lesson_by_id(self, student_lesson_id: int) -> Optional[StudentLesson]:
        stmt = self._with_relations().where(StudentLesson.id == student_lesson_id)
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def add_student_lesson(self, student_lesson: StudentLesson) -> StudentLesson:
        """Enroll a student; an existing (lesson, person) pair is returned as is"""
        lesson_id, person_id = student_lesson.lesson_id, student_lesson.person_id
        existing = await self.get_student_lesson(lesson_id, person_id)
        if existing:
            logger.info(
                f"Student lesson with lesson id: {existing.lesson_id} "
                f"and person id: {existing.person_id} already exists"
            )
            return existing

        try:
            await self.add(student_lesson)
        except IntegrityError:
            # Another request enrolled the same pair between the lookup and the insert
            existing = await self.get_student_lesson(lesson_id, person_id)
            if existing is None:
                raise
            logger.info(f"Student lesson with lesson id: {lesson_id} and person id: {person_id} already exists")
            return existing
        return await self.get_student_lesson(lesson_id, person_id)

    async def delete_student_lesson(self, lesson_id: int, person_id: int) -> bool:
        student_lesson = await self.get_student_lesson(lesson_id, person_id)
        if not student_lesson:
            return False
        await self.db.delete(student_lesson)
        await self.commit()
        return True

    async def delete_student_lesson_by_id(self, student_lesson_id: int) -> bool:
        return await self.hard_delete(student_lesson_id)

    async def get_students_by_lesson_id(self, lesson_id: int) -> List[Person]:
        """Get the persons enrolled in a lesson, in enrollment order"""
        stmt = (
            select(Person)
            .join(StudentLesson, StudentLesson.person_id == Person.id)
            .where(StudentLesson.lesson_id == lesson_id)
            .order_by(StudentLesson.id)
        )
        result = await self.db.execute(stmt)
        return list(result.scalars().unique().all())

    async def delete_all_student_lessons(self, person_id: int, commit: bool = True) -> bool:
        """Remove every enrollment of a person; False when there was none"""
        stmt = delete(StudentLesson).where(StudentLesson.person_id == person_id)
        result = await self.db.execute(stmt)
        if commit:
            await self.commit()
        return result.rowcount > 0

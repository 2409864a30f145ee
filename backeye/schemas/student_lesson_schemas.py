# backeye/schemas/student_lesson_schemas.py
from typing import Optional
from .base import BaseDto
from ..models.student_lesson import StudentLesson

class StudentLessonDto(BaseDto):
    id: int = 0
    lesson_id: Optional[int] = None
    person_id: Optional[int] = None

    def to_model(self) -> StudentLesson:
        return StudentLesson(
            id=self.id or None,
            lesson_id=self.lesson_id,
            person_id=self.person_id,
        )

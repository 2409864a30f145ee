# backeye/models/student_lesson.py
from sqlalchemy import Column, Integer, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from .base import Base


class StudentLesson(Base):
    __tablename__ = "student_lessons"

    lesson_id = Column(Integer, ForeignKey("lessons.id"), nullable=True, index=True)
    person_id = Column(Integer, ForeignKey("persons.id"), nullable=True, index=True)

    # Relationships
    lesson = relationship("Lesson")
    person = relationship("Person")

    __table_args__ = (
        UniqueConstraint('lesson_id', 'person_id', name='uq_student_lesson_pair'),
    )

"""Import all models here, if needed for Alembic migration."""
from .base import Base
from .person import Person, PersonType
from .lesson import Lesson
from .measurement import Measurement
from .log import Log
from .student_lesson import StudentLesson

__all__ = [
    "Base",
    "Person",
    "PersonType",
    "Lesson",
    "Measurement",
    "Log",
    "StudentLesson",
]

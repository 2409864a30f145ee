from .base import BaseDto, to_dtos, naive_utc
from .person_schemas import PersonDto
from .lesson_schemas import LessonDto
from .measurement_schemas import MeasurementDto, StudentAttendanceDto
from .log_schemas import LogDto
from .student_lesson_schemas import StudentLessonDto

__all__ = [
    "BaseDto",
    "to_dtos",
    "naive_utc",
    "PersonDto",
    "LessonDto",
    "MeasurementDto",
    "StudentAttendanceDto",
    "LogDto",
    "StudentLessonDto",
]

from . import health, log, measurement, person, lesson, student_lesson, hub

__all__ = [
    "health",
    "log",
    "measurement",
    "person",
    "lesson",
    "student_lesson",
    "hub",
]

# backeye/routers/student_lesson.py
"""Enrollment of students in lessons."""
from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
import logging

from ..core.database import get_db
from ..core.exceptions import bad_request, not_found, database_error
from ..core.security import require_token
from ..schemas import PersonDto, StudentLessonDto
from ..services.student_lesson_service import StudentLessonService

logger = logging.getLogger(__name__)
router = APIRouter(
    prefix="/api/StudentLesson",
    tags=["StudentLesson"],
    dependencies=[Depends(require_token)]
)

@router.post("", response_model=StudentLessonDto)
async def add_student_lesson(student_lesson_dto: StudentLessonDto, db: AsyncSession = Depends(get_db)):
    """Enroll a student in a lesson; enrolling twice is harmless"""
    lesson_id = student_lesson_dto.lesson_id
    person_id = student_lesson_dto.person_id
    if lesson_id is None or lesson_id < 1 or person_id is None or person_id < 1:
        raise bad_request(f"lesson id: {lesson_id} or person id: {person_id} are invalid")

    service = StudentLessonService(db)
    try:
        student_lesson = await service.add_student_lesson(student_lesson_dto.to_model())
    except Exception as e:
        raise database_error(f"Cannot add student lesson to DB. due to: {e}")

    if student_lesson is None:
        raise database_error("Cannot add student lesson to DB")
    return StudentLessonDto.model_validate(student_lesson)

@router.get("/LessonStudents/{lesson_id}", response_model=List[PersonDto])
async def get_lesson_students(lesson_id: int, db: AsyncSession = Depends(get_db)):
    """Persons enrolled in a lesson"""
    if lesson_id < 1:
        raise bad_request(f"lesson id: {lesson_id} is invalid")

    service = StudentLessonService(db)
    try:
        students = await service.get_students_by_lesson_id(lesson_id)
    except Exception as e:
        raise database_error(f"Cannot get students of lesson from DB. lesson id: {lesson_id}. due to: {e}")
    return [PersonDto.from_person(student) for student in students]

@router.get("/{student_lesson_id}", response_model=StudentLessonDto)
async def get_student_lesson(student_lesson_id: int, db: AsyncSession = Depends(get_db)):
    if student_lesson_id < 1:
        raise bad_request(f"student lesson id: {student_lesson_id} is invalid")

    service = StudentLessonService(db)
    try:
        student_lesson = await service.get_student_lesson_by_id(student_lesson_id)
    except Exception as e:
        raise database_error(f"Cannot get student lesson from DB. studentLessonId: {student_lesson_id} due to: {e}")

    if student_lesson is None:
        raise not_found(f"studentLesson with id: {student_lesson_id} not found in DB")
    return StudentLessonDto.model_validate(student_lesson)

@router.delete("/ById/{student_lesson_id}", response_model=bool)
async def delete_student_lesson_by_id(student_lesson_id: int, db: AsyncSession = Depends(get_db)):
    if student_lesson_id < 1:
        raise bad_request(f"student lesson id: {student_lesson_id} is invalid")

    service = StudentLessonService(db)
    try:
        deleted = await service.delete_student_lesson_by_id(student_lesson_id)
    except Exception as e:
        raise database_error(
            f"Cannot delete studentLesson from DB. student lesson id: {student_lesson_id}. due to: {e}"
        )

    if not deleted:
        raise not_found(f"studentLesson with id: {student_lesson_id} not found in DB")
    return True

@router.delete("/PersonLessons/{person_id}", response_model=bool)
async def delete_person_student_lessons(person_id: int, db: AsyncSession = Depends(get_db)):
    """Remove every enrollment of a person"""
    if person_id < 1:
        raise bad_request(f"person id: {person_id} is invalid")

    service = StudentLessonService(db)
    try:
        deleted = await service.delete_all_student_lessons(person_id)
    except Exception as e:
        raise database_error(f"Cannot delete student lessons from DB. person id: {person_id}. due to: {e}")

    if not deleted:
        raise not_found(f"student lessons of person id: {person_id} not found in DB")
    return True

@router.delete("/{lesson_id}/{person_id}", response_model=bool)
async def delete_student_lesson(lesson_id: int, person_id: int, db: AsyncSession = Depends(get_db)):
    if lesson_id < 1 or person_id < 1:
        raise bad_request(f"lesson id: {lesson_id} or person id: {person_id} are invalid")

    service = StudentLessonService(db)
    try:
        deleted = await service.delete_student_lesson(lesson_id, person_id)
    except Exception as e:
        raise database_error(f"Cannot delete student lesson from DB. due to: {e}")

    if not deleted:
        raise not_found(f"student lesson with lesson id: {lesson_id} and person id: {person_id} not found in DB")
    return True

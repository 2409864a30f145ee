# backeye/routers/lesson.py
"""Lesson schedule maintenance."""
from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
import logging

from ..core.database import get_db
from ..core.exceptions import bad_request, not_found, database_error
from ..core.security import require_token
from ..schemas import LessonDto, to_dtos
from ..services.lesson_service import LessonService

logger = logging.getLogger(__name__)
router = APIRouter(
    prefix="/api/Lesson",
    tags=["Lesson"],
    dependencies=[Depends(require_token)]
)


def validate_windows(lesson_dto: LessonDto):
    if lesson_dto.end_time < lesson_dto.start_time:
        raise bad_request(
            f"lesson end time: {lesson_dto.end_time} is before start time: {lesson_dto.start_time}"
        )
    if (lesson_dto.break_start is None) != (lesson_dto.break_end is None):
        raise bad_request("break start and break end must be given together")
    if lesson_dto.break_start is not None and lesson_dto.break_end < lesson_dto.break_start:
        raise bad_request(
            f"break end: {lesson_dto.break_end} is before break start: {lesson_dto.break_start}"
        )


@router.get("/TeacherLessons/{person_id}", response_model=List[LessonDto])
async def get_teacher_lessons(person_id: int, db: AsyncSession = Depends(get_db)):
    """Lessons taught by a teacher"""
    if person_id < 1:
        raise bad_request(f"person id: {person_id} is invalid")

    service = LessonService(db)
    try:
        lessons = await service.get_lessons_by_teacher(person_id)
    except Exception as e:
        raise database_error(f"cannot get lessons of teacher id: {person_id} from DB. due to: {e}")
    return to_dtos(LessonDto, lessons)

@router.get("/StudentLessons/{person_id}", response_model=List[LessonDto])
async def get_student_lessons(person_id: int, db: AsyncSession = Depends(get_db)):
    """Lessons a student is enrolled in"""
    if person_id < 1:
        raise bad_request(f"person id: {person_id} is invalid")

    service = LessonService(db)
    try:
        lessons = await service.get_lessons_by_student(person_id)
    except Exception as e:
        raise database_error(f"cannot get lessons of student id: {person_id} from DB. due to: {e}")
    return to_dtos(LessonDto, lessons)

@router.get("/{lesson_id}", response_model=LessonDto)
async def get_lesson(lesson_id: int, db: AsyncSession = Depends(get_db)):
    if lesson_id < 1:
        raise bad_request(f"lesson id: {lesson_id} is invalid")

    service = LessonService(db)
    try:
        lesson = await service.get_lesson_by_id(lesson_id)
    except Exception as e:
        raise database_error(f"cannot get lesson with id: {lesson_id}. due to: {e}")

    if lesson is None:
        raise not_found(f"lesson with id: {lesson_id} not found in DB")
    return LessonDto.model_validate(lesson)

@router.post("", response_model=LessonDto)
async def add_lesson(lesson_dto: LessonDto, db: AsyncSession = Depends(get_db)):
    """Create a lesson"""
    if lesson_dto.person_id is not None and lesson_dto.person_id < 1:
        raise bad_request("lessonDto is null or person id is invalid")
    validate_windows(lesson_dto)

    service = LessonService(db)
    try:
        lesson = await service.add_lesson(lesson_dto.to_model())
    except Exception as e:
        raise database_error(f"cannot add lesson to DB. due to: {e}")
    return LessonDto.model_validate(lesson)

@router.put("", response_model=LessonDto)
async def update_lesson(lesson_dto: LessonDto, db: AsyncSession = Depends(get_db)):
    """Change an existing lesson"""
    if lesson_dto.id < 1:
        raise bad_request("lessonDto is null or lesson id is invalid")
    validate_windows(lesson_dto)

    service = LessonService(db)
    changes = lesson_dto.model_dump(exclude_unset=True, exclude={"id"})
    try:
        lesson = await service.update_lesson(lesson_dto.id, changes)
    except Exception as e:
        raise database_error(f"cannot change the lesson with lesson id: {lesson_dto.id}. due to: {e}")

    if lesson is None:
        raise not_found(f"cannot find lesson id: {lesson_dto.id} in DB")
    return LessonDto.model_validate(lesson)

@router.delete("/{lesson_id}", response_model=bool)
async def delete_lesson(lesson_id: int, db: AsyncSession = Depends(get_db)):
    """Delete a lesson with its enrollments and measurements"""
    if lesson_id < 1:
        raise bad_request(f"lesson id: {lesson_id} is invalid")

    service = LessonService(db)
    try:
        deleted = await service.delete_lesson(lesson_id)
    except Exception as e:
        raise database_error(f"cannot delete lesson from DB. due to: {e}")

    if not deleted:
        raise not_found(f"cannot find lesson id: {lesson_id} in DB")
    return True

"""StudentLesson API tests."""

import pytest
from sqlalchemy.exc import IntegrityError

from backeye.models import Person, PersonType, StudentLesson
from backeye.services.student_lesson_service import StudentLessonService
from tests.conftest import persist


async def test_enrolling_twice_keeps_one_row(client, lesson, student):
    payload = {"lessonId": lesson.id, "personId": student.id}

    first = await client.post("/api/StudentLesson", json=payload)
    second = await client.post("/api/StudentLesson", json=payload)

    assert first.status_code == 200
    assert second.status_code == 200
    assert first.json()["id"] == second.json()["id"]

    students = await client.get(f"/api/StudentLesson/LessonStudents/{lesson.id}")
    assert [p["id"] for p in students.json()] == [student.id]


async def test_invalid_ids_are_rejected(client):
    response = await client.post("/api/StudentLesson", json={"lessonId": 0, "personId": 3})
    assert response.status_code == 400


async def test_get_by_id(client, enrollment):
    response = await client.get(f"/api/StudentLesson/{enrollment.id}")

    assert response.status_code == 200
    assert response.json() == {
        "id": enrollment.id,
        "lessonId": enrollment.lesson_id,
        "personId": enrollment.person_id,
    }


async def test_delete_by_pair(client, lesson, student, enrollment):
    response = await client.delete(f"/api/StudentLesson/{lesson.id}/{student.id}")
    assert response.status_code == 200

    again = await client.delete(f"/api/StudentLesson/{lesson.id}/{student.id}")
    assert again.status_code == 404


async def test_delete_by_id(client, enrollment):
    response = await client.delete(f"/api/StudentLesson/ById/{enrollment.id}")
    assert response.status_code == 200
    assert (await client.get(f"/api/StudentLesson/{enrollment.id}")).status_code == 404


async def test_delete_all_person_enrollments(client, student, enrollment):
    response = await client.delete(f"/api/StudentLesson/PersonLessons/{student.id}")
    assert response.status_code == 200

    none_left = await client.delete(f"/api/StudentLesson/PersonLessons/{student.id}")
    assert none_left.status_code == 404


async def test_lesson_students_in_enrollment_order(client, session_factory, lesson, student, enrollment):
    late = await persist(session_factory, Person(
        first_name="Omer", last_name="Adler", type=PersonType.STUDENT, token="stale-token"
    ))
    await persist(session_factory, StudentLesson(lesson_id=lesson.id, person_id=late.id))

    response = await client.get(f"/api/StudentLesson/LessonStudents/{lesson.id}")

    assert response.status_code == 200
    students = response.json()
    assert [p["id"] for p in students] == [student.id, late.id]
    assert [p["token"] for p in students] == [None, None]


async def test_lesson_students_of_empty_lesson(client, lesson):
    response = await client.get(f"/api/StudentLesson/LessonStudents/{lesson.id}")

    assert response.status_code == 200
    assert response.json() == []


async def test_pair_is_unique_in_the_store(session_factory, enrollment):
    with pytest.raises(IntegrityError):
        await persist(session_factory, StudentLesson(lesson_id=enrollment.lesson_id, person_id=enrollment.person_id))


async def test_enrollment_racing_an_insert_returns_stored_row(session_factory, enrollment, monkeypatch):
    lookup = StudentLessonService.get_student_lesson
    calls = []

    async def miss_first_lookup(self, lesson_id, person_id):
        calls.append((lesson_id, person_id))
        if len(calls) == 1:
            return None
        return await lookup(self, lesson_id, person_id)

    monkeypatch.setattr(StudentLessonService, "get_student_lesson", miss_first_lookup)

    async with session_factory() as session:
        row = await StudentLessonService(session).add_student_lesson(
            StudentLesson(lesson_id=enrollment.lesson_id, person_id=enrollment.person_id)
        )

    assert row.id == enrollment.id
    assert len(calls) == 2

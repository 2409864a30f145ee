"""Lesson API tests."""

from sqlalchemy import select

from backeye.models import Measurement, StudentLesson
from tests.conftest import persist, LESSON_START


def lesson_payload(teacher_id, **overrides):
    payload = {
        "personId": teacher_id,
        "name": "Physics",
        "platform": "Teams",
        "link": "https://teams.example/physics",
        "isActive": True,
        "dayOfWeek": "Tuesday",
        "startTime": "2024-03-05T08:00:00",
        "endTime": "2024-03-05T09:30:00",
        "maxLate": 5,
        "classCode": "PHY-2",
    }
    payload.update(overrides)
    return payload


async def test_create_lesson_without_break_reports_null_break(client, teacher):
    response = await client.post("/api/Lesson", json=lesson_payload(teacher.id))

    assert response.status_code == 200
    data = response.json()
    assert data["id"] > 0
    assert data["breakStart"] is None
    assert data["breakEnd"] is None

    fetched = await client.get(f"/api/Lesson/{data['id']}")
    assert fetched.json() == data


async def test_create_lesson_with_break(client, teacher):
    response = await client.post("/api/Lesson", json=lesson_payload(
        teacher.id, breakStart="2024-03-05T08:45:00", breakEnd="2024-03-05T08:50:00"
    ))

    assert response.status_code == 200
    assert response.json()["breakStart"] == "2024-03-05T08:45:00"


async def test_break_needs_both_ends(client, teacher):
    response = await client.post("/api/Lesson", json=lesson_payload(teacher.id, breakStart="2024-03-05T08:45:00"))
    assert response.status_code == 400


async def test_end_before_start_is_rejected(client, teacher):
    response = await client.post("/api/Lesson", json=lesson_payload(teacher.id, endTime="2024-03-05T07:00:00"))
    assert response.status_code == 400


async def test_break_end_before_break_start_is_rejected(client, teacher):
    response = await client.post("/api/Lesson", json=lesson_payload(
        teacher.id, breakStart="2024-03-05T08:50:00", breakEnd="2024-03-05T08:45:00"
    ))
    assert response.status_code == 400


async def test_offset_times_are_stored_as_utc(client, teacher):
    response = await client.post("/api/Lesson", json=lesson_payload(
        teacher.id, startTime="2024-03-05T10:00:00+02:00", endTime="2024-03-05T09:30:00"
    ))

    assert response.status_code == 200
    assert response.json()["startTime"] == "2024-03-05T08:00:00"
    assert response.json()["endTime"] == "2024-03-05T09:30:00"


async def test_mixed_offset_window_is_compared_in_utc(client, teacher):
    response = await client.post("/api/Lesson", json=lesson_payload(
        teacher.id, startTime="2024-03-05T09:00:00Z", endTime="2024-03-05T08:00:00"
    ))
    assert response.status_code == 400


async def test_teacher_lessons(client, teacher, lesson):
    response = await client.get(f"/api/Lesson/TeacherLessons/{teacher.id}")

    assert response.status_code == 200
    assert [item["name"] for item in response.json()] == ["Algebra"]


async def test_student_lessons(client, student, lesson, enrollment):
    response = await client.get(f"/api/Lesson/StudentLessons/{student.id}")

    assert response.status_code == 200
    assert [item["id"] for item in response.json()] == [lesson.id]


async def test_update_lesson(client, teacher, lesson):
    payload = lesson_payload(teacher.id, id=lesson.id, name="Algebra II")

    response = await client.put("/api/Lesson", json=payload)

    assert response.status_code == 200
    assert response.json()["name"] == "Algebra II"
    assert response.json()["startTime"] == "2024-03-05T08:00:00"


async def test_update_keeps_fields_left_out(client, teacher, lesson):
    payload = lesson_payload(teacher.id, id=lesson.id, name="Algebra II")
    del payload["personId"]
    del payload["classCode"]

    response = await client.put("/api/Lesson", json=payload)

    assert response.status_code == 200
    assert response.json()["personId"] == teacher.id
    assert response.json()["classCode"] == "ALG-1"


async def test_update_unknown_lesson_is_not_found(client, teacher):
    response = await client.put("/api/Lesson", json=lesson_payload(teacher.id, id=999))
    assert response.status_code == 404


async def test_delete_lesson_removes_enrollments_and_measurements(client, session_factory, lesson, student, enrollment):
    await persist(session_factory, Measurement(person_id=student.id, lesson_id=lesson.id, date_time=LESSON_START))

    response = await client.delete(f"/api/Lesson/{lesson.id}")
    assert response.status_code == 200

    assert (await client.get(f"/api/Lesson/{lesson.id}")).status_code == 404
    async with session_factory() as session:
        assert (await session.execute(select(StudentLesson))).scalars().all() == []
        assert (await session.execute(select(Measurement))).scalars().all() == []


async def test_zero_id_is_bad_request(client):
    assert (await client.get("/api/Lesson/0")).status_code == 400
    assert (await client.delete("/api/Lesson/0")).status_code == 400

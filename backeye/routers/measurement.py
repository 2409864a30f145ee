# backeye/routers/measurement.py
"""Detector measurements: storage, per-lesson views and live push."""
from typing import List
from datetime import datetime
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
import logging

from ..core.database import get_db
from ..core.dependencies import get_measurements_hub
from ..core.exceptions import bad_request, not_found, database_error, hub_error
from ..core.security import require_token
from ..schemas import MeasurementDto, PersonDto, StudentAttendanceDto, to_dtos
from ..services.hub import MeasurementsHub
from ..services.measurement_service import MeasurementService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/Measurement", tags=["Measurement"])


async def send_measurements_to_clients(hub: MeasurementsHub, measurements: List[MeasurementDto]) -> str:
    """Push measurements to the dashboards; returns an error message or an empty string"""
    try:
        await hub.send(measurements)
    except Exception as e:
        result = f"cannot send measurements to clients. due to: {e}"
        logger.error(result)
        return result
    return ""


@router.get("/TestSignalR")
async def test_signalr(hub: MeasurementsHub = Depends(get_measurements_hub)):
    """Push two sample measurements to the connected dashboards"""
    now = datetime.now()
    measurements = [
        MeasurementDto(
            id=1, lesson_id=1, person_id=17, date_time=now,
            face_recognition=True, sleep_detector=True, on_top=True
        ),
        MeasurementDto(
            id=2, lesson_id=1, person_id=16, date_time=now,
            sound_check=True, head_pose=True, on_top=True
        ),
    ]
    result = await send_measurements_to_clients(hub, measurements)
    if result:
        raise hub_error(result)
    return {"sent": len(measurements)}

@router.post("", response_model=MeasurementDto, dependencies=[Depends(require_token)])
async def add_measurement(
    measurement_dto: MeasurementDto,
    db: AsyncSession = Depends(get_db),
    hub: MeasurementsHub = Depends(get_measurements_hub)
):
    """Store a measurement and push it to the dashboards"""
    if measurement_dto.person_id is None or measurement_dto.person_id < 1:
        raise bad_request("measurementDto is null or person id is invalid")

    service = MeasurementService(db)
    try:
        measurement = await service.add_measurement(measurement_dto.to_model())
    except Exception as e:
        raise database_error(f"cannot add measurement to DB. due to: {e}")

    new_measurement_dto = MeasurementDto.model_validate(measurement)
    await send_measurements_to_clients(hub, [new_measurement_dto])
    return new_measurement_dto

@router.post("/PostMeasurements", response_model=List[MeasurementDto], dependencies=[Depends(require_token)])
async def add_measurements(
    measurements: List[MeasurementDto],
    db: AsyncSession = Depends(get_db),
    hub: MeasurementsHub = Depends(get_measurements_hub)
):
    """Store a batch of measurements and push them in one frame"""
    if not measurements:
        raise bad_request("measurements are null or empty")

    service = MeasurementService(db)
    added: List[MeasurementDto] = []
    try:
        for measurement_dto in measurements:
            measurement = await service.add_measurement(measurement_dto.to_model())
            added.append(MeasurementDto.model_validate(measurement))
    except Exception as e:
        raise database_error(
            f"cannot add measurements to DB. due to: Not all measurements were added. "
            f"measurements to add: {len(measurements)}. measurements added: {len(added)}. {e}"
        )

    await send_measurements_to_clients(hub, added)
    return added

@router.get(
    "/GetStudentsAttendance/{lesson_id}/{lesson_time}",
    response_model=List[StudentAttendanceDto],
    dependencies=[Depends(require_token)]
)
async def get_students_attendance(lesson_id: int, lesson_time: datetime, db: AsyncSession = Depends(get_db)):
    """List the students of a lesson with their entrance time on that day"""
    if lesson_id < 1 or lesson_time == datetime.min:
        raise bad_request(f"lesson id: {lesson_id} or lesson time: {lesson_time} are invalid")

    service = MeasurementService(db)
    try:
        attendance = await service.get_attendance(lesson_id, lesson_time)
    except Exception as e:
        raise database_error(f"cannot get attendance list from DB. due to: {e}")

    return [
        StudentAttendanceDto(person=PersonDto.from_person(person), entrance_time=entrance_time)
        for person, entrance_time in attendance
    ]

@router.get(
    "/GetStudentMeasurements/{lesson_id}/{person_id}/{lesson_time}",
    response_model=List[MeasurementDto],
    dependencies=[Depends(require_token)]
)
async def get_student_measurements(
    lesson_id: int,
    person_id: int,
    lesson_time: datetime,
    db: AsyncSession = Depends(get_db)
):
    """Measurements of one student in a lesson on the given day"""
    if lesson_id < 1 or person_id < 1 or lesson_time == datetime.min:
        raise bad_request(
            f"lesson id: {lesson_id} or person id: {person_id} or lesson time: {lesson_time} are invalid"
        )

    service = MeasurementService(db)
    try:
        measurements = await service.get_student_measurements(lesson_id, person_id, lesson_time)
    except Exception as e:
        raise database_error(f"cannot get measurement from DB. due to: {e}")
    return to_dtos(MeasurementDto, measurements)

@router.get(
    "/GetLessonMeasurements/{lesson_id}/{lesson_time}",
    response_model=List[MeasurementDto],
    dependencies=[Depends(require_token)]
)
async def get_lesson_measurements(lesson_id: int, lesson_time: datetime, db: AsyncSession = Depends(get_db)):
    """Measurements of all students in a lesson on the given day"""
    if lesson_id < 1 or lesson_time == datetime.min:
        raise bad_request(f"lesson id: {lesson_id} or lesson time: {lesson_time} are invalid")

    service = MeasurementService(db)
    try:
        measurements = await service.get_lesson_measurements(lesson_id, lesson_time)
    except Exception as e:
        raise database_error(f"cannot get measurements of lesson id: {lesson_id} from DB. due to: {e}")
    return to_dtos(MeasurementDto, measurements)

@router.get(
    "/GetLessonHistory/{lesson_id}",
    response_model=List[datetime],
    dependencies=[Depends(require_token)]
)
async def get_lesson_history(lesson_id: int, db: AsyncSession = Depends(get_db)):
    """Days on which the lesson has measurements"""
    if lesson_id < 1:
        raise bad_request(f"lesson id: {lesson_id} must be postive")

    service = MeasurementService(db)
    try:
        return await service.get_lesson_dates(lesson_id)
    except Exception as e:
        raise database_error(f"cannot get lesson history from DB. due to: {e}")

@router.delete("/PersonMeasurements/{person_id}", response_model=bool, dependencies=[Depends(require_token)])
async def delete_person_measurements(person_id: int, db: AsyncSession = Depends(get_db)):
    """Delete every measurement of a person"""
    if person_id < 1:
        raise bad_request(f"person id: {person_id} is invalid")

    service = MeasurementService(db)
    try:
        deleted = await service.delete_person_measurements(person_id)
    except Exception as e:
        raise database_error(f"cannot delete measurements of person id: {person_id} from DB. due to: {e}")

    if not deleted:
        raise not_found(f"measurements of person id: {person_id} not found in DB")
    return True

@router.delete("/{measurement_id}", response_model=bool, dependencies=[Depends(require_token)])
async def delete_measurement(measurement_id: int, db: AsyncSession = Depends(get_db)):
    """Delete a measurement by its id"""
    if measurement_id < 0:
        raise bad_request(f"measurement id: {measurement_id} is invalid")

    service = MeasurementService(db)
    try:
        deleted = await service.delete_measurement(measurement_id)
    except Exception as e:
        raise database_error(f"cannot delete measurement  from DB. due to: {e}")

    if not deleted:
        raise not_found(f"cannot find measurement id: {measurement_id} in DB")
    return True

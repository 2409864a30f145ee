# backeye/services/measurement_service.py
"""Detector measurements and the attendance views derived from them."""
from typing import List, Optional, Tuple
from datetime import datetime, time, timedelta
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import Date, select, delete, func
from .base_service import BaseService
from ..models.measurement import Measurement
from ..models.person import Person
from ..models.student_lesson import StudentLesson
from ..schemas.base import naive_utc


def day_bounds(moment: datetime) -> Tuple[datetime, datetime]:
    """Start of the calendar day of ``moment`` and start of the next one"""
    start = datetime.combine(naive_utc(moment).date(), time.min)
    return start, start + timedelta(days=1)


class MeasurementService(BaseService[Measurement]):
    def __init__(self, db: AsyncSession):
        super().__init__(Measurement, db)

    async def add_measurement(self, measurement: Measurement) -> Measurement:
        if measurement.date_time is None:
            measurement.date_time = datetime.now()
        return await self.add(measurement)

    async def get_student_measurements(
        self, lesson_id: int, person_id: int, lesson_time: datetime
    ) -> List[Measurement]:
        """Measurements of one student in a lesson on the day of ``lesson_time``"""
        start, end = day_bounds(lesson_time)
        stmt = (
            select(Measurement)
            .where(
                Measurement.lesson_id == lesson_id,
                Measurement.person_id == person_id,
                Measurement.date_time >= start,
                Measurement.date_time < end
            )
            .order_by(Measurement.date_time, Measurement.id)
        )
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def get_lesson_measurements(self, lesson_id: int, lesson_time: datetime) -> List[Measurement]:
        """Measurements of every student in a lesson on the day of ``lesson_time``"""
        start, end = day_bounds(lesson_time)
        stmt = (
            select(Measurement)
            .where(
                Measurement.lesson_id == lesson_id,
                Measurement.date_time >= start,
                Measurement.date_time < end
            )
            .order_by(Measurement.date_time, Measurement.id)
        )
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def get_lesson_dates(self, lesson_id: int) -> List[datetime]:
        """Days on which the lesson took place, as midnight datetimes"""
        day = func.date(Measurement.date_time, type_=Date)
        stmt = (
            select(day)
            .where(Measurement.lesson_id == lesson_id)
            .distinct()
            .order_by(day)
        )
        result = await self.db.execute(stmt)
        return [datetime.combine(lesson_day, time.min) for lesson_day in result.scalars().all()]

    async def get_attendance(
        self, lesson_id: int, lesson_time: datetime
    ) -> List[Tuple[Person, Optional[datetime]]]:
        """Pair every student of the lesson with their first measurement that day.

        Enrolled students without measurements get ``None``. Persons measured
        in the lesson without being enrolled are listed as well.
        """
        start, end = day_bounds(lesson_time)
        entrance_stmt = (
            select(Measurement.person_id, func.min(Measurement.date_time))
            .where(
                Measurement.lesson_id == lesson_id,
                Measurement.person_id.is_not(None),
                Measurement.date_time >= start,
                Measurement.date_time < end
            )
            .group_by(Measurement.person_id)
        )
        result = await self.db.execute(entrance_stmt)
        entrances = {person_id: entrance for person_id, entrance in result.all()}

        enrolled_ids = select(StudentLesson.person_id).where(StudentLesson.lesson_id == lesson_id)
        person_stmt = select(Person).where(
            Person.id.in_(enrolled_ids) | Person.id.in_(list(entrances))
        )
        result = await self.db.execute(person_stmt)
        persons = sorted(
            result.scalars().all(),
            key=lambda p: ((p.last_name or "").lower(), (p.first_name or "").lower(), p.id)
        )
        return [(person, entrances.get(person.id)) for person in persons]

    async def delete_measurement(self, measurement_id: int) -> bool:
        return await self.hard_delete(measurement_id)

    async def delete_person_measurements(self, person_id: int, commit: bool = True) -> bool:
        """Remove every measurement of a person; False when there was none"""
        stmt = delete(Measurement).where(Measurement.person_id == person_id)
        result = await self.db.execute(stmt)
        if commit:
            await self.commit()
        return result.rowcount > 0

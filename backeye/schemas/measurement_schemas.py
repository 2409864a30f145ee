# backeye/schemas/measurement_schemas.py
from typing import Optional
from datetime import datetime
from pydantic import field_validator
from .base import BaseDto, naive_utc
from .person_schemas import PersonDto
from ..models.measurement import Measurement

class MeasurementDto(BaseDto):
    id: int = 0
    person_id: Optional[int] = None
    lesson_id: Optional[int] = None
    date_time: Optional[datetime] = None
    face_recognition: bool = False
    face_detector: bool = False
    head_pose: bool = False
    object_detection: bool = False
    on_top: bool = False
    sleep_detector: bool = False
    sound_check: bool = False

    @field_validator("date_time")
    @classmethod
    def strip_offset(cls, value):
        return naive_utc(value)

    def to_model(self) -> Measurement:
        return Measurement(
            id=self.id or None,
            person_id=self.person_id,
            lesson_id=self.lesson_id,
            date_time=self.date_time,
            face_recognition=self.face_recognition,
            face_detector=self.face_detector,
            head_pose=self.head_pose,
            object_detection=self.object_detection,
            on_top=self.on_top,
            sleep_detector=self.sleep_detector,
            sound_check=self.sound_check,
        )

class StudentAttendanceDto(BaseDto):
    person: PersonDto
    entrance_time: Optional[datetime] = None

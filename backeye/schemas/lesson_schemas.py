# backeye/schemas/lesson_schemas.py
from typing import Optional
from datetime import datetime
from pydantic import Field, field_validator
from .base import BaseDto, naive_utc
from ..models.lesson import Lesson

class LessonDto(BaseDto):
    id: int = 0
    person_id: Optional[int] = None
    name: Optional[str] = Field(default=None, max_length=200)
    description: Optional[str] = None
    platform: Optional[str] = Field(default=None, max_length=100)
    link: Optional[str] = Field(default=None, max_length=1024)
    is_active: bool = True
    day_of_week: Optional[str] = Field(default=None, max_length=20)
    start_time: datetime
    end_time: datetime
    break_start: Optional[datetime] = None
    break_end: Optional[datetime] = None
    max_late: int = Field(default=0, ge=0)
    class_code: Optional[str] = Field(default=None, max_length=50)

    @field_validator("start_time", "end_time", "break_start", "break_end")
    @classmethod
    def strip_offset(cls, value):
        return naive_utc(value)

    def to_model(self) -> Lesson:
        return Lesson(
            id=self.id or None,
            person_id=self.person_id,
            name=self.name,
            description=self.description,
            platform=self.platform,
            link=self.link,
            is_active=self.is_active,
            day_of_week=self.day_of_week,
            start_time=self.start_time,
            end_time=self.end_time,
            break_start=self.break_start,
            break_end=self.break_end,
            max_late=self.max_late,
            class_code=self.class_code,
        )

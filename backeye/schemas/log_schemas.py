# backeye/schemas/log_schemas.py
from typing import Optional
from datetime import datetime
from pydantic import field_validator
from .base import BaseDto, naive_utc
from ..models.log import Log

class LogDto(BaseDto):
    id: int = 0
    creation_date: Optional[datetime] = None
    data: Optional[str] = None
    person_id: int = 0

    @field_validator("creation_date")
    @classmethod
    def strip_offset(cls, value):
        return naive_utc(value)

    def to_model(self) -> Log:
        return Log(
            id=self.id or None,
            creation_date=self.creation_date,
            data=self.data,
            person_id=self.person_id,
        )

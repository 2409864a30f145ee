"""Shared configuration for transfer objects."""
from typing import Iterable, List, Optional, Type, TypeVar
from datetime import datetime, timezone
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

D = TypeVar('D', bound='BaseDto')

class BaseDto(BaseModel):
    """camelCase on the wire, snake_case in Python, buildable from ORM rows"""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

def to_dtos(dto_class: Type[D], models: Iterable) -> List[D]:
    return [dto_class.model_validate(model) for model in models]

def naive_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Columns store naive datetimes; offset-aware input is converted to UTC first"""
    if value is not None and value.tzinfo is not None:
        return value.astimezone(timezone.utc).replace(tzinfo=None)
    return value

# backeye/schemas/person_schemas.py
from typing import Optional
from pydantic import Field
from .base import BaseDto
from ..models.person import Person, PersonType

class PersonDto(BaseDto):
    id: int = 0
    first_name: Optional[str] = Field(default=None, max_length=100)
    last_name: Optional[str] = Field(default=None, max_length=100)
    email: Optional[str] = Field(default=None, max_length=255)
    birth_id: Optional[str] = Field(default=None, max_length=50)
    password: Optional[str] = Field(default=None, max_length=255)
    type: PersonType = PersonType.STUDENT
    token: Optional[str] = None

    @classmethod
    def from_person(cls, person: Person) -> "PersonDto":
        """DTO of a stored person; tokens are only handed out at sign-in"""
        return cls.model_validate(person).model_copy(update={"token": None})

    def to_model(self) -> Person:
        return Person(
            id=self.id or None,
            first_name=self.first_name,
            last_name=self.last_name,
            email=self.email,
            birth_id=self.birth_id,
            password=self.password,
            type=self.type,
        )

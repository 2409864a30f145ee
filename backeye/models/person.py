# backeye/models/person.py
from sqlalchemy import Column, String, Integer, Enum
from sqlalchemy.orm import relationship
from .base import Base
import enum


class PersonType(enum.IntEnum):
    STUDENT = 0
    TEACHER = 1


class Person(Base):
    __tablename__ = "persons"

    first_name = Column(String(100))
    last_name = Column(String(100))
    email = Column(String(255), index=True)
    birth_id = Column(String(50))
    password = Column(String(255), index=True)
    type = Column(Enum(PersonType), default=PersonType.STUDENT, nullable=False)
    token = Column(String(1024))

    # Relationships
    logs = relationship("Log", back_populates="person", cascade="all, delete-orphan", passive_deletes=True)

    def __repr__(self) -> str:
        return f"<Person id={self.id} type={self.type} email={self.email}>"

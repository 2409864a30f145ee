# backeye/models/lesson.py
from sqlalchemy import Column, String, Integer, DateTime, Boolean, ForeignKey, Text
from sqlalchemy.orm import relationship
from .base import Base


class Lesson(Base):
    __tablename__ = "lessons"

    # Owning teacher
    person_id = Column(Integer, ForeignKey("persons.id", ondelete="SET NULL"), nullable=True, index=True)

    name = Column(String(200))
    description = Column(Text)
    platform = Column(String(100))  # Zoom, Teams, ...
    link = Column(String(1024))
    is_active = Column(Boolean, default=True, nullable=False)
    day_of_week = Column(String(20))
    class_code = Column(String(50))

    # Schedule window
    start_time = Column(DateTime, nullable=False)
    end_time = Column(DateTime, nullable=False)
    break_start = Column(DateTime, nullable=True)
    break_end = Column(DateTime, nullable=True)
    max_late = Column(Integer, default=0, nullable=False)  # Minutes

    # Relationships
    person = relationship("Person")

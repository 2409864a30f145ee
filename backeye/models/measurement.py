# backeye/models/measurement.py
from sqlalchemy import Column, Integer, DateTime, Boolean, ForeignKey, Index
from sqlalchemy.orm import relationship
from datetime import datetime
from .base import Base


class Measurement(Base):
    __tablename__ = "measurements"

    person_id = Column(Integer, ForeignKey("persons.id"), nullable=True, index=True)
    lesson_id = Column(Integer, ForeignKey("lessons.id"), nullable=True, index=True)
    date_time = Column(DateTime, default=datetime.now, nullable=False)

    # Detector signals
    face_recognition = Column(Boolean, default=False, nullable=False)
    face_detector = Column(Boolean, default=False, nullable=False)
    head_pose = Column(Boolean, default=False, nullable=False)
    object_detection = Column(Boolean, default=False, nullable=False)
    on_top = Column(Boolean, default=False, nullable=False)
    sleep_detector = Column(Boolean, default=False, nullable=False)
    sound_check = Column(Boolean, default=False, nullable=False)

    # Relationships
    person = relationship("Person")
    lesson = relationship("Lesson")

    __table_args__ = (
        Index('idx_measurement_lesson_time', 'lesson_id', 'date_time'),
    )

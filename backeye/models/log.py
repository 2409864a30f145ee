# backeye/models/log.py
from sqlalchemy import Column, Integer, DateTime, ForeignKey, Text
from sqlalchemy.orm import relationship
from datetime import datetime
from .base import Base


class Log(Base):
    __tablename__ = "logs"

    person_id = Column(Integer, ForeignKey("persons.id", ondelete="CASCADE"), nullable=False, index=True)
    creation_date = Column(DateTime, default=datetime.now, nullable=False)
    data = Column(Text)

    # Relationships
    person = relationship("Person", back_populates="logs")

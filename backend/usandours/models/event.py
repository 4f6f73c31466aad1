"""
Calendar event model.
"""
from sqlalchemy import Column, String, Date, ForeignKey, Integer, Enum as SQLEnum
from sqlalchemy.orm import relationship
from usandours.db.base import BaseModel, enum_values
import enum


class EventType(str, enum.Enum):
    """Event category."""
    DATE = "date"
    ANNIVERSARY = "anniversary"
    REMINDER = "reminder"


class Event(BaseModel):
    """All-day event on the couple's shared calendar."""
    __tablename__ = "events"

    couple_id = Column(Integer, ForeignKey("couples.id"), nullable=False, index=True)
    title = Column(String(200), nullable=False)
    date = Column(Date, nullable=False, index=True)
    type = Column(
        SQLEnum(EventType, native_enum=False, values_callable=enum_values),
        default=EventType.DATE,
        nullable=False,
    )

    # Relationships
    couple = relationship("Couple", back_populates="events")

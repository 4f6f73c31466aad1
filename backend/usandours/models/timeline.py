"""
Timeline moment model for relationship milestones.
"""
from sqlalchemy import Column, String, Text, DateTime, ForeignKey, Integer, Enum as SQLEnum
from sqlalchemy.orm import relationship
from usandours.db.base import BaseModel, enum_values
import enum


class IconType(str, enum.Enum):
    """Icon shown on the timeline node."""
    HEART = "heart"
    RING = "ring"
    PLANE = "plane"
    HOME = "home"
    STAR = "star"
    CAMERA = "camera"


class TimelineMoment(BaseModel):
    """Milestone on the couple's timeline."""
    __tablename__ = "timeline_moments"

    couple_id = Column(Integer, ForeignKey("couples.id"), nullable=False, index=True)
    title = Column(String(200), nullable=False)
    description = Column(Text, nullable=True)
    date = Column(DateTime, nullable=False, index=True)
    image = Column(String(1000), nullable=True)
    icon_type = Column(
        SQLEnum(IconType, native_enum=False, values_callable=enum_values),
        default=IconType.HEART,
        nullable=False,
    )

    # Relationships
    couple = relationship("Couple", back_populates="moments")

"""
Post model for shared memories.
"""
from datetime import datetime
from sqlalchemy import Column, Text, DateTime, ForeignKey, Integer, JSON, Enum as SQLEnum
from sqlalchemy.orm import relationship
from usandours.db.base import BaseModel, enum_values
import enum


class Mood(str, enum.Enum):
    """Mood tag attached to a post."""
    HAPPY = "happy"
    SAD = "sad"
    EXCITED = "excited"
    TIRED = "tired"
    ROMANTIC = "romantic"
    ANGRY = "angry"
    CHILL = "chill"


class Post(BaseModel):
    """Memory post written by one partner and shared with the couple."""
    __tablename__ = "posts"

    author_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    couple_id = Column(Integer, ForeignKey("couples.id"), nullable=True, index=True)  # Null for legacy posts
    content = Column(Text, nullable=False)
    mood = Column(
        SQLEnum(Mood, native_enum=False, values_callable=enum_values),
        default=Mood.HAPPY,
        nullable=False,
    )
    images = Column(JSON, nullable=False, default=list)  # Media URLs
    date = Column(DateTime, default=datetime.utcnow, nullable=False, index=True)  # When it happened, user-settable

    # Relationships
    author = relationship("User", back_populates="posts")
    couple = relationship("Couple", back_populates="posts")

"""
Couple model: the pairing room shared by two users.
"""
from sqlalchemy import Column, String, DateTime, ForeignKey, Integer
from sqlalchemy.orm import relationship
from usandours.db.base import BaseModel


class Couple(BaseModel):
    """
    Pairing room with two member slots.

    partner1 is filled at creation; partner2 is filled exactly once, by the
    joining user. The secret code is unique and never changes.
    """
    __tablename__ = "couples"

    partner1_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    partner2_id = Column(Integer, ForeignKey("users.id"), nullable=True, index=True)
    secret_code = Column(String(16), unique=True, nullable=False, index=True)
    next_meeting_date = Column(DateTime, nullable=True)

    # Relationships
    partner1 = relationship("User", foreign_keys=[partner1_id])
    partner2 = relationship("User", foreign_keys=[partner2_id])
    posts = relationship("Post", back_populates="couple")
    events = relationship("Event", back_populates="couple", cascade="all, delete-orphan")
    moments = relationship("TimelineMoment", back_populates="couple", cascade="all, delete-orphan")

    @property
    def is_full(self) -> bool:
        return self.partner1_id is not None and self.partner2_id is not None

    @property
    def member_ids(self):
        return [uid for uid in (self.partner1_id, self.partner2_id) if uid is not None]

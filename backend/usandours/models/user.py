"""
User model for authentication and partner linkage.
"""
from sqlalchemy import Column, String, ForeignKey, Integer, Text
from sqlalchemy.orm import relationship
from usandours.db.base import BaseModel


class User(BaseModel):
    """User model. `couple_id` is set once, when the user creates or joins a room."""
    __tablename__ = "users"

    name = Column(String(20), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    hashed_password = Column(String(255), nullable=False)
    avatar = Column(String(500), nullable=False, default="")
    couple_id = Column(
        Integer,
        ForeignKey("couples.id", use_alter=True, name="fk_users_couple_id"),
        nullable=True,
        index=True,
    )

    # Google account linkage (calendar sync)
    google_id = Column(String(255), unique=True, nullable=True)
    google_access_token = Column(Text, nullable=True)
    google_refresh_token = Column(Text, nullable=True)

    # Relationships
    posts = relationship("Post", back_populates="author")
    list_items = relationship("ListItem", back_populates="added_by")

"""
Watch/listen list model.
"""
from sqlalchemy import Column, String, ForeignKey, Integer, Enum as SQLEnum
from sqlalchemy.orm import relationship
from usandours.db.base import BaseModel, enum_values
import enum


class ItemType(str, enum.Enum):
    MOVIE = "movie"
    SONG = "song"


class ItemStatus(str, enum.Enum):
    """pending = to watch/listen, completed = watched/listened."""
    PENDING = "pending"
    COMPLETED = "completed"


class ListItem(BaseModel):
    """A movie or song on the couple's list."""
    __tablename__ = "list_items"

    title = Column(String(300), nullable=False)
    type = Column(SQLEnum(ItemType, native_enum=False, values_callable=enum_values), nullable=False, index=True)
    status = Column(
        SQLEnum(ItemStatus, native_enum=False, values_callable=enum_values),
        default=ItemStatus.PENDING,
        nullable=False,
    )
    link = Column(String(1000), nullable=False, default="")  # Spotify/IMDb link
    added_by_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    couple_id = Column(Integer, ForeignKey("couples.id"), nullable=True, index=True)

    # Relationships
    added_by = relationship("User", back_populates="list_items")

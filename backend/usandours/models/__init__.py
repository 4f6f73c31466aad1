"""Models package - Import all models for SQLAlchemy registration."""
from usandours.models.user import User
from usandours.models.couple import Couple
from usandours.models.post import Post, Mood
from usandours.models.event import Event, EventType
from usandours.models.list_item import ListItem, ItemType, ItemStatus
from usandours.models.timeline import TimelineMoment, IconType

__all__ = [
    "User",
    "Couple",
    "Post",
    "Mood",
    "Event",
    "EventType",
    "ListItem",
    "ItemType",
    "ItemStatus",
    "TimelineMoment",
    "IconType",
]

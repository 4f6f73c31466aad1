"""
Pydantic schemas for Event entity.
"""
from pydantic import BaseModel, ConfigDict, Field
from typing import List
from datetime import date, datetime
from usandours.models.event import EventType


class EventCreate(BaseModel):
    """Schema for event creation. Date is a calendar day (YYYY-MM-DD)."""
    title: str = Field(min_length=1)
    date: date
    type: EventType = EventType.DATE


class EventResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: int
    couple_id: int = Field(alias="coupleId")
    title: str
    date: date
    type: EventType
    created_at: datetime = Field(alias="createdAt")


class EventListResponse(BaseModel):
    success: bool = True
    events: List[EventResponse]


class EventEnvelope(BaseModel):
    success: bool = True
    event: EventResponse

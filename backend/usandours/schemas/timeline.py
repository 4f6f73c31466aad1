"""
Pydantic schemas for TimelineMoment entity.
"""
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional
from datetime import datetime
from usandours.core.utils import to_naive_utc
from usandours.models.timeline import IconType


class MomentCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    title: str = Field(min_length=1)
    description: Optional[str] = None
    date: datetime
    image: Optional[str] = None
    icon_type: IconType = Field(IconType.HEART, alias="iconType")

    @field_validator("date")
    @classmethod
    def date_to_utc(cls, v):
        return to_naive_utc(v)


class MomentUpdate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    title: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    date: Optional[datetime] = None
    image: Optional[str] = None
    icon_type: Optional[IconType] = Field(None, alias="iconType")

    @field_validator("date")
    @classmethod
    def date_to_utc(cls, v):
        return to_naive_utc(v)


class MomentResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: int
    couple_id: int = Field(alias="coupleId")
    title: str
    description: Optional[str] = None
    date: datetime
    image: Optional[str] = None
    icon_type: IconType = Field(alias="iconType")
    created_at: datetime = Field(alias="createdAt")

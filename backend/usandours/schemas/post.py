"""
Pydantic schemas for Post entity.
"""
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import List, Optional
from datetime import datetime
from usandours.core.utils import to_naive_utc
from usandours.models.post import Mood
from usandours.schemas.user import PartnerResponse


class PostCreate(BaseModel):
    """Schema for post creation. `date` defaults to now and may be backdated."""
    content: str = Field(min_length=1)
    mood: Mood = Mood.HAPPY
    images: List[str] = []
    date: Optional[datetime] = None

    @field_validator("date")
    @classmethod
    def date_to_utc(cls, v):
        return to_naive_utc(v)


class PostUpdate(BaseModel):
    """Schema for partial post update."""
    content: Optional[str] = Field(None, min_length=1)
    mood: Optional[Mood] = None
    images: Optional[List[str]] = None
    date: Optional[datetime] = None

    @field_validator("date")
    @classmethod
    def date_to_utc(cls, v):
        return to_naive_utc(v)


class PostResponse(BaseModel):
    """Schema for post response."""
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: int
    author: PartnerResponse
    couple_id: Optional[int] = Field(None, alias="coupleId")
    content: str
    mood: Mood
    images: List[str] = []
    date: datetime
    created_at: datetime = Field(alias="createdAt")
    updated_at: datetime = Field(alias="updatedAt")


class PostListResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    posts: List[PostResponse]
    current_user: int = Field(alias="currentUser")


class PostEnvelope(BaseModel):
    success: bool = True
    post: PostResponse

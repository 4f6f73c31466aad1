"""
Pydantic schemas for Couple entity.
"""
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional
from datetime import datetime
from usandours.core.utils import to_naive_utc
from usandours.schemas.user import PartnerResponse


class CoupleResponse(BaseModel):
    """Room details. The secret code is shown so partner1 can share it."""
    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    id: int
    secret_code: str = Field(alias="secretCode")
    partner1: PartnerResponse
    partner2: Optional[PartnerResponse] = None
    next_meeting_date: Optional[datetime] = Field(None, alias="nextMeetingDate")
    created_at: datetime = Field(alias="createdAt")


class CoupleUpdate(BaseModel):
    """
    Schema for couple update. A null date clears the next meeting; omitting
    the field leaves it as is. Offset-aware values are stored as naive UTC.
    """
    model_config = ConfigDict(populate_by_name=True)

    next_meeting_date: Optional[datetime] = Field(None, alias="nextMeetingDate")

    @field_validator("next_meeting_date")
    @classmethod
    def date_to_utc(cls, v):
        return to_naive_utc(v)


class CoupleUpdateResponse(BaseModel):
    success: bool = True
    couple: CoupleResponse


class JoinRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    secret_code: str = Field(alias="secretCode")


class PairingResponse(BaseModel):
    """Returned when an existing user creates or joins a room. A fresh token is issued."""
    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    couple_id: int = Field(alias="coupleId")
    secret_code: str = Field(alias="secretCode")
    access_token: str
    token_type: str = "bearer"

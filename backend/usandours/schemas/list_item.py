"""
Pydantic schemas for ListItem entity.
"""
from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional
from datetime import datetime
from usandours.models.list_item import ItemType, ItemStatus


class ItemCreate(BaseModel):
    title: str = Field(min_length=1)
    type: ItemType
    status: ItemStatus = ItemStatus.PENDING
    link: str = ""


class ItemUpdate(BaseModel):
    """Schema for partial item update (usually just the status)."""
    title: Optional[str] = Field(None, min_length=1)
    type: Optional[ItemType] = None
    status: Optional[ItemStatus] = None
    link: Optional[str] = None


class ItemResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: int
    title: str
    type: ItemType
    status: ItemStatus
    link: str = ""
    added_by_id: int = Field(alias="addedBy")
    couple_id: Optional[int] = Field(None, alias="coupleId")
    created_at: datetime = Field(alias="createdAt")


class ItemListResponse(BaseModel):
    success: bool = True
    items: List[ItemResponse]


class ItemEnvelope(BaseModel):
    success: bool = True
    item: ItemResponse

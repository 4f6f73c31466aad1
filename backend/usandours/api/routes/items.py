"""
Watch/listen list routes.
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import Optional
from usandours.db.session import get_db
from usandours.models.list_item import ItemType
from usandours.schemas.list_item import ItemCreate, ItemUpdate, ItemResponse, ItemListResponse, ItemEnvelope
from usandours.schemas.user import SessionUser
from usandours.services import item_service
from usandours.api.dependencies import get_current_user

router = APIRouter(prefix="/items", tags=["items"])


@router.get("", response_model=ItemListResponse)
async def list_items(
    type: Optional[ItemType] = None,
    current_user: SessionUser = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """List items, newest first. Optional ?type=movie|song."""
    items = item_service.list_items(db, current_user, type)
    return ItemListResponse(items=[ItemResponse.model_validate(i) for i in items])


@router.post("", response_model=ItemEnvelope)
async def create_item(
    data: ItemCreate,
    current_user: SessionUser = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    item = item_service.create_item(db, current_user, data)
    return ItemEnvelope(item=ItemResponse.model_validate(item))


@router.put("/{item_id}", response_model=ItemEnvelope)
@router.patch("/{item_id}", response_model=ItemEnvelope)
async def update_item(
    item_id: int,
    data: ItemUpdate,
    current_user: SessionUser = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Update an item, usually to mark it watched/listened."""
    item = item_service.update_item(db, current_user, item_id, data)
    return ItemEnvelope(item=ItemResponse.model_validate(item))


@router.delete("/{item_id}")
async def delete_item(
    item_id: int,
    current_user: SessionUser = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    item_service.delete_item(db, current_user, item_id)
    return {"success": True}

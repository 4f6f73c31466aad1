"""
Watch/listen list service.
"""
from sqlalchemy.orm import Session
from typing import List, Optional
from usandours.core.exceptions import NotFoundError
from usandours.models.list_item import ListItem, ItemType
from usandours.schemas.list_item import ItemCreate, ItemUpdate
from usandours.schemas.user import SessionUser
from usandours.services.access_service import scope_query


def _scoped_items(db: Session, current_user: SessionUser):
    return scope_query(db.query(ListItem), ListItem, current_user, author_column=ListItem.added_by_id)


def list_items(db: Session, current_user: SessionUser, item_type: Optional[ItemType] = None) -> List[ListItem]:
    query = _scoped_items(db, current_user)
    if item_type is not None:
        query = query.filter(ListItem.type == item_type)
    return query.order_by(ListItem.created_at.desc(), ListItem.id.desc()).all()


def get_item(db: Session, current_user: SessionUser, item_id: int) -> ListItem:
    item = _scoped_items(db, current_user).filter(ListItem.id == item_id).first()
    if not item:
        raise NotFoundError("Item not found")
    return item


def create_item(db: Session, current_user: SessionUser, data: ItemCreate) -> ListItem:
    item = ListItem(
        title=data.title,
        type=data.type,
        status=data.status,
        link=data.link,
        added_by_id=current_user.user_id,
        couple_id=current_user.couple_id
    )
    db.add(item)
    db.commit()
    db.refresh(item)
    return item


def update_item(db: Session, current_user: SessionUser, item_id: int, data: ItemUpdate) -> ListItem:
    item = get_item(db, current_user, item_id)

    for field, value in data.model_dump(exclude_unset=True).items():
        if value is None:
            continue
        setattr(item, field, value)

    db.commit()
    db.refresh(item)
    return item


def delete_item(db: Session, current_user: SessionUser, item_id: int) -> None:
    item = get_item(db, current_user, item_id)
    db.delete(item)
    db.commit()

"""
Post service for room-scoped memory posts.
"""
from sqlalchemy.orm import Session, joinedload
from datetime import datetime
from typing import List
from usandours.core.config import settings
from usandours.core.exceptions import NotFoundError
from usandours.models.post import Post
from usandours.schemas.post import PostCreate, PostUpdate
from usandours.schemas.user import SessionUser
from usandours.services.access_service import require_couple, scope_query


def _scoped_posts(db: Session, current_user: SessionUser):
    query = db.query(Post).options(joinedload(Post.author))
    return scope_query(query, Post, current_user, author_column=Post.author_id)


def list_posts(db: Session, current_user: SessionUser) -> List[Post]:
    """Posts of the caller's room, newest first. Unpaired users see their own posts."""
    query = _scoped_posts(db, current_user).order_by(Post.date.desc(), Post.id.desc())
    if current_user.couple_id is not None:
        query = query.limit(settings.POSTS_PAGE_LIMIT)
    return query.all()


def get_post(db: Session, current_user: SessionUser, post_id: int) -> Post:
    post = _scoped_posts(db, current_user).filter(Post.id == post_id).first()
    if not post:
        raise NotFoundError("Post not found")
    return post


def create_post(db: Session, current_user: SessionUser, data: PostCreate) -> Post:
    """Create a post in the caller's room. Unpaired users cannot post."""
    couple_id = require_couple(current_user, "You must be in a couple to post.")

    post = Post(
        author_id=current_user.user_id,
        couple_id=couple_id,
        content=data.content,
        mood=data.mood,
        images=list(data.images),
        date=data.date or datetime.utcnow()
    )
    db.add(post)
    db.commit()

    return get_post(db, current_user, post.id)


def update_post(db: Session, current_user: SessionUser, post_id: int, data: PostUpdate) -> Post:
    """Partial update. Last write wins."""
    post = get_post(db, current_user, post_id)

    update_data = data.model_dump(exclude_unset=True)
    for field, value in update_data.items():
        if value is None:
            continue
        setattr(post, field, value)

    db.commit()
    db.refresh(post)
    return post


def delete_post(db: Session, current_user: SessionUser, post_id: int) -> None:
    post = get_post(db, current_user, post_id)
    db.delete(post)
    db.commit()

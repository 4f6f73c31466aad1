"""
Memory post routes.
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from usandours.db.session import get_db
from usandours.schemas.post import PostCreate, PostUpdate, PostResponse, PostListResponse, PostEnvelope
from usandours.schemas.user import SessionUser
from usandours.services import post_service
from usandours.api.dependencies import get_current_user

router = APIRouter(prefix="/posts", tags=["posts"])


@router.get("", response_model=PostListResponse)
async def list_posts(current_user: SessionUser = Depends(get_current_user), db: Session = Depends(get_db)):
    """List the couple's posts, newest first."""
    posts = post_service.list_posts(db, current_user)
    return PostListResponse(
        posts=[PostResponse.model_validate(p) for p in posts],
        current_user=current_user.user_id
    )


@router.post("", response_model=PostEnvelope)
async def create_post(
    data: PostCreate,
    current_user: SessionUser = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Write a post. Requires being in a couple."""
    post = post_service.create_post(db, current_user, data)
    return PostEnvelope(post=PostResponse.model_validate(post))


@router.put("/{post_id}", response_model=PostEnvelope)
async def update_post(
    post_id: int,
    data: PostUpdate,
    current_user: SessionUser = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Edit a post (partial fields)."""
    post = post_service.update_post(db, current_user, post_id, data)
    return PostEnvelope(post=PostResponse.model_validate(post))


@router.delete("/{post_id}")
async def delete_post(
    post_id: int,
    current_user: SessionUser = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Delete a post."""
    post_service.delete_post(db, current_user, post_id)
    return {"success": True}

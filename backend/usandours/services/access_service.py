"""
Room scoping helpers shared by the content services.

The couple id always comes from the verified session token, never from
request input.
"""
from sqlalchemy import false
from sqlalchemy.orm import Query
from usandours.core.exceptions import ForbiddenError
from usandours.schemas.user import SessionUser


def require_couple(current_user: SessionUser, message: str = "Not in a couple") -> int:
    """Return the caller's couple id, or raise ForbiddenError for unpaired users."""
    if current_user.couple_id is None:
        raise ForbiddenError(message)
    return current_user.couple_id


def scope_query(query: Query, model, current_user: SessionUser, author_column=None) -> Query:
    """
    Restrict a query to the caller's room.

    Unpaired users fall back to rows they authored (when the model has an
    author column) and see nothing otherwise.
    """
    if current_user.couple_id is not None:
        return query.filter(model.couple_id == current_user.couple_id)
    if author_column is not None:
        return query.filter(author_column == current_user.user_id)
    return query.filter(false())

from typing import Any, List

from fastapi import APIRouter, Depends, HTTPException, status, Path
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
import logging

from social_app.db.session import get_db
from social_app.deps import get_current_user
from social_app.modules.user_management.models.user import User
from social_app.modules.posts.services.post import post_exists
from social_app.modules.posts.schemas.post import DeleteResponse
from social_app.modules.posts.comments.schemas.comment import Comment as CommentSchema, CommentCreate
from social_app.modules.posts.comments.services.comment import (
    get_comments_by_post, create_comment, delete_comment
)

# Mounted under /posts/{post_id}/comments
router = APIRouter()
# Mounted under /comments
comment_router = APIRouter()
logger = logging.getLogger("social_app")

def _validate_post(db: Session, post_id: str) -> None:
    """Validate post exists and return None or raise HTTPException"""
    if not post_exists(db, post_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Post not found"
        )

@router.get("", response_model=List[CommentSchema])
def read_comments_by_post_id(
    *,
    db: Session = Depends(get_db),
    post_id: str = Path(..., description="The ID of the post to get comments for"),
    current_user: User = Depends(get_current_user),
) -> Any:
    """Get comments by post ID, newest first"""
    _validate_post(db, post_id)
    return get_comments_by_post(db, post_id=post_id)

@router.post("", response_model=CommentSchema)
def create_new_comment(
    *,
    db: Session = Depends(get_db),
    post_id: str = Path(..., description="The ID of the post to comment on"),
    comment_in: CommentCreate,
    current_user: User = Depends(get_current_user),
) -> Any:
    """Create new comment on a post"""
    _validate_post(db, post_id)
    try:
        return create_comment(db, post_id, current_user.id, comment_in.content)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error creating comment: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create comment"
        )

@comment_router.delete("/{comment_id}", response_model=DeleteResponse)
def delete_comment_by_id(
    *,
    db: Session = Depends(get_db),
    comment_id: str,
    current_user: User = Depends(get_current_user),
) -> Any:
    """Delete a comment written by the current user"""
    if not delete_comment(db, comment_id=comment_id, requester_id=current_user.id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Comment not found or unauthorized"
        )
    return DeleteResponse(message="Comment deleted successfully")

from typing import Any, List, Optional
import logging

from fastapi import APIRouter, Depends, HTTPException, status, Query
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from social_app.db.session import get_db
from social_app.deps import get_current_user
from social_app.modules.user_management.models.user import User
from social_app.modules.posts.schemas.post import (
    DeleteResponse, Post as PostSchema, PostCreate, PostWithComments
)
from social_app.modules.posts.services.post import (
    get_feed, get_post, create_post, delete_post
)

logger = logging.getLogger(__name__)

router = APIRouter()

@router.get("", response_model=List[PostSchema])
def read_posts(
    db: Session = Depends(get_db),
    skip: int = Query(0, ge=0),
    limit: Optional[int] = Query(None, ge=1, le=200),
    current_user: User = Depends(get_current_user),
) -> Any:
    """
    Retrieve the feed, newest first, with like and comment counts.
    """
    return get_feed(db, requester_id=current_user.id, skip=skip, limit=limit)

@router.post("", response_model=PostSchema)
def create_new_post(
    *,
    db: Session = Depends(get_db),
    post_in: PostCreate,
    current_user: User = Depends(get_current_user),
) -> Any:
    """
    Create new post. Media is a URL returned by the upload endpoint.
    """
    try:
        return create_post(db, post_in, current_user.id)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error creating post: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create post"
        )

@router.get("/{post_id}", response_model=PostWithComments)
def read_post_by_id(
    *,
    db: Session = Depends(get_db),
    post_id: str,
    current_user: User = Depends(get_current_user),
) -> Any:
    """
    Get post by ID with its comments.
    """
    post = get_post(db, post_id=post_id, requester_id=current_user.id)
    if not post:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Post not found",
        )
    return post

@router.delete("/{post_id}", response_model=DeleteResponse)
def delete_post_by_id(
    *,
    db: Session = Depends(get_db),
    post_id: str,
    current_user: User = Depends(get_current_user),
) -> Any:
    """
    Delete a post and all associated likes and comments.
    Missing posts and posts of other users are reported the same way.
    """
    if not delete_post(db, post_id=post_id, requester_id=current_user.id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Post not found or unauthorized",
        )

    return DeleteResponse(message="Post deleted successfully")

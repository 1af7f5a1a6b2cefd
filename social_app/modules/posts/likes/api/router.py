from typing import Any

from fastapi import APIRouter, Depends, HTTPException, status, Path
from sqlalchemy.orm import Session

from social_app.db.session import get_db
from social_app.deps import get_current_user
from social_app.modules.user_management.models.user import User
from social_app.modules.posts.services.post import post_exists
from social_app.modules.posts.likes.schemas.like import LikeToggle
from social_app.modules.posts.likes.services.like import toggle_like

router = APIRouter()

def _validate_post(db: Session, post_id: str) -> None:
    """Validate post exists or raise HTTPException"""
    if not post_exists(db, post_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Post not found"
        )

@router.post("", response_model=LikeToggle)
def toggle_post_like(
    *,
    db: Session = Depends(get_db),
    post_id: str = Path(..., description="The ID of the post to like or unlike"),
    current_user: User = Depends(get_current_user),
) -> Any:
    """Like the post, or remove the like if the user already liked it"""
    _validate_post(db, post_id)

    liked = toggle_like(db, post_id, current_user.id)
    if liked is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Post not found"
        )
    return LikeToggle(liked=liked)

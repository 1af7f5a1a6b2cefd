from typing import Any, List

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from social_app.db.session import get_db
from social_app.deps import get_current_user
from social_app.modules.posts.schemas.post import Post as PostSchema
from social_app.modules.posts.services.post import search_posts
from social_app.modules.user_management.models.user import User
from social_app.modules.user_management.schemas.user import UserPublic
from social_app.modules.user_management.services.user import search_users

router = APIRouter()

@router.get("/users", response_model=List[UserPublic])
def search_users_by_name_or_handle(
    *,
    db: Session = Depends(get_db),
    q: str = Query(..., min_length=1, description="Search query for name or handle"),
    current_user: User = Depends(get_current_user),
) -> Any:
    """Search for users by name or handle"""
    return search_users(db, q)

@router.get("/posts", response_model=List[PostSchema])
def search_posts_by_content_or_tag(
    *,
    db: Session = Depends(get_db),
    q: str = Query(..., min_length=1, description="Search query for content or tags"),
    current_user: User = Depends(get_current_user),
) -> Any:
    """Search posts by content or tag, newest first"""
    return search_posts(db, q, requester_id=current_user.id)

from typing import Any, List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from social_app.db.session import get_db
from social_app.deps import get_current_user
from social_app.modules.posts.schemas.post import Post as PostSchema
from social_app.modules.posts.services.post import get_user_posts
from social_app.modules.user_management.models.user import User
from social_app.modules.user_management.schemas.user import (
    AvatarUpdate, ProfileUpdate, ProfileUpdateResponse, UserMe, UserProfile, UserPublic
)
from social_app.modules.user_management.services.user import get_profile, update_avatar, update_profile

router = APIRouter()

@router.get("/users/me", response_model=UserMe)
def read_user_me(
    current_user: User = Depends(get_current_user),
) -> Any:
    """Get current user"""
    return current_user

@router.get("/users/{handle}", response_model=UserProfile)
def read_user_by_handle(
    handle: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> Any:
    """Get a public profile by handle"""
    profile = get_profile(db, handle=handle)
    if not profile:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found"
        )
    return profile

@router.get("/users/{handle}/posts", response_model=List[PostSchema])
def read_user_posts(
    handle: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> Any:
    """Get posts created by a specific user"""
    return get_user_posts(db, handle=handle, requester_id=current_user.id)

@router.put("/profile", response_model=ProfileUpdateResponse)
def update_profile_me(
    *,
    db: Session = Depends(get_db),
    profile_in: ProfileUpdate,
    current_user: User = Depends(get_current_user),
) -> Any:
    """Replace name and bio of the current user"""
    user = update_profile(db, current_user, profile_in)
    return ProfileUpdateResponse(
        message="Profile updated successfully",
        user=UserPublic.model_validate(user),
    )

@router.put("/profile/avatar", response_model=ProfileUpdateResponse)
def update_avatar_me(
    *,
    db: Session = Depends(get_db),
    avatar_in: AvatarUpdate,
    current_user: User = Depends(get_current_user),
) -> Any:
    """Set the avatar URL of the current user"""
    user = update_avatar(db, current_user, avatar_in.avatar)
    return ProfileUpdateResponse(
        message="Avatar updated successfully",
        user=UserPublic.model_validate(user),
    )

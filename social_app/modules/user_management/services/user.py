from typing import List, Optional
import logging
import uuid

from sqlalchemy import func, or_, select
from sqlalchemy.orm import Session

from social_app.core.config import settings
from social_app.core.security import get_password_hash
from social_app.modules.auth.schemas.auth import RegisterRequest
from social_app.modules.posts.likes.models.like import Like
from social_app.modules.posts.models.post import Post
from social_app.modules.user_management.models.user import User
from social_app.modules.user_management.schemas.user import ProfileUpdate, UserProfile, UserPublic

logger = logging.getLogger("social_app")

def get_user(db: Session, user_id: str) -> Optional[User]:
    """Get user by ID"""
    return db.query(User).filter(User.id == user_id).first()

def get_user_by_email(db: Session, email: str) -> Optional[User]:
    """Get user by email"""
    return db.query(User).filter(User.email == email.lower()).first()

def get_user_by_handle(db: Session, handle: str) -> Optional[User]:
    """Get user by handle"""
    return db.query(User).filter(User.handle == handle).first()

def create_user(db: Session, user_in: RegisterRequest) -> User:
    """
    Create a user with a bcrypt hash of the password.
    Raises IntegrityError (after rolling back) when email or handle is taken.
    """
    user = User(
        id=str(uuid.uuid4()),
        name=user_in.name,
        email=user_in.email,
        handle=user_in.handle,
        hashed_password=get_password_hash(user_in.password),
        bio=user_in.bio,
        avatar=user_in.avatar or settings.DEFAULT_AVATAR_URL,
    )
    db.add(user)
    try:
        db.commit()
    except Exception:
        db.rollback()
        raise
    db.refresh(user)
    logger.info(f"Registered user @{user.handle}")
    return user

def get_profile(db: Session, handle: str) -> Optional[UserProfile]:
    """Public profile with post and given-like counts"""
    posts_count = (
        select(func.count(Post.id)).where(Post.user_id == User.id).correlate(User).scalar_subquery()
    )
    likes_given_count = (
        select(func.count(Like.post_id)).where(Like.user_id == User.id).correlate(User).scalar_subquery()
    )
    row = (
        db.query(User, posts_count.label("posts_count"), likes_given_count.label("likes_given_count"))
        .filter(User.handle == handle)
        .first()
    )
    if not row:
        return None

    user, posts, likes_given = row
    return UserProfile(
        **UserPublic.model_validate(user).model_dump(),
        posts_count=posts or 0,
        likes_given_count=likes_given or 0,
    )

def update_profile(db: Session, user: User, profile_in: ProfileUpdate) -> User:
    """Overwrite name and bio"""
    user.name = profile_in.name
    user.bio = profile_in.bio
    db.commit()
    db.refresh(user)
    return user

def update_avatar(db: Session, user: User, avatar: str) -> User:
    """Store the avatar URL as given"""
    user.avatar = avatar
    db.commit()
    db.refresh(user)
    return user

def search_users(db: Session, q: str, limit: int = settings.SEARCH_USERS_LIMIT) -> List[User]:
    """Case-insensitive substring match on name or handle"""
    pattern = f"%{q}%"
    return (
        db.query(User)
        .filter(or_(User.name.ilike(pattern), User.handle.ilike(pattern)))
        .limit(limit)
        .all()
    )

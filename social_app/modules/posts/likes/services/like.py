from typing import Optional
import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from social_app.modules.posts.likes.models.like import Like
from social_app.modules.posts.services.post import post_exists

logger = logging.getLogger("social_app")

def get_like(db: Session, user_id: str, post_id: str) -> Optional[Like]:
    """Get like by user ID and post ID"""
    return (
        db.query(Like)
        .filter(Like.user_id == user_id, Like.post_id == post_id)
        .first()
    )

def toggle_like(db: Session, post_id: str, user_id: str) -> Optional[bool]:
    """
    Remove the like if it exists, add it otherwise.
    Returns whether the post is liked afterwards, or None if the post is gone.
    """
    existing_like = get_like(db, user_id, post_id)
    if existing_like:
        db.delete(existing_like)
        db.commit()
        return False

    db.add(Like(user_id=user_id, post_id=post_id))
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        # Either a concurrent toggle inserted the same row or the post was deleted
        if not post_exists(db, post_id):
            logger.info(f"Post {post_id} was deleted before the like by {user_id} landed")
            return None
        logger.info(f"Like by {user_id} on {post_id} already present")
    return True

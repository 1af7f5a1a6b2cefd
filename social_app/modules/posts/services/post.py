from typing import List, Optional
import logging
import uuid

from sqlalchemy import exists, func, or_, select
from sqlalchemy.orm import Query, Session

from social_app.core.config import settings
from social_app.modules.posts.comments.models.comment import Comment
from social_app.modules.posts.comments.services.comment import get_comments_by_post
from social_app.modules.posts.likes.models.like import Like
from social_app.modules.posts.models.post import Post, PostTag
from social_app.modules.posts.schemas.post import Post as PostSchema, PostCreate, PostWithComments
from social_app.modules.user_management.models.user import User

logger = logging.getLogger("social_app")

def _build_post_query(db: Session, requester_id: str) -> Query:
    """Posts joined with their author, like/comment counts and the requester's like flag"""
    likes_count = (
        select(func.count(Like.user_id)).where(Like.post_id == Post.id).correlate(Post).scalar_subquery()
    )
    comments_count = (
        select(func.count(Comment.id)).where(Comment.post_id == Post.id).correlate(Post).scalar_subquery()
    )
    is_liked = exists().where(Like.post_id == Post.id, Like.user_id == requester_id)

    return (
        db.query(
            Post,
            User.name,
            User.handle,
            User.avatar,
            likes_count.label("likes_count"),
            comments_count.label("comments_count"),
            is_liked.label("is_liked"),
        )
        .join(User, User.id == Post.user_id)
        .order_by(Post.created_at.desc(), Post.id.desc())
    )

def _create_post_schema(row) -> PostSchema:
    """Transform a row of _build_post_query into the client shape"""
    post, name, handle, avatar, likes_count, comments_count, is_liked = row
    return PostSchema(
        id=post.id,
        user_id=post.user_id,
        content=post.content,
        media=post.media,
        tags=post.tag_list,
        created_at=post.created_at,
        name=name,
        handle=handle,
        avatar=avatar,
        likes_count=likes_count or 0,
        comments_count=comments_count or 0,
        is_liked=bool(is_liked),
    )

def post_exists(db: Session, post_id: str) -> bool:
    return db.query(exists().where(Post.id == post_id)).scalar()

def get_feed(db: Session, requester_id: str, skip: int = 0, limit: Optional[int] = None) -> List[PostSchema]:
    """All posts, newest first"""
    query = _build_post_query(db, requester_id).offset(skip)
    if limit is not None:
        query = query.limit(limit)
    return [_create_post_schema(row) for row in query.all()]

def get_user_posts(db: Session, handle: str, requester_id: str) -> List[PostSchema]:
    """Posts written by the user with this handle, newest first"""
    rows = _build_post_query(db, requester_id).filter(User.handle == handle).all()
    return [_create_post_schema(row) for row in rows]

def get_post(db: Session, post_id: str, requester_id: str) -> Optional[PostWithComments]:
    """Single post with its comments attached"""
    row = _build_post_query(db, requester_id).filter(Post.id == post_id).first()
    if not row:
        return None

    post = _create_post_schema(row)
    return PostWithComments(**post.model_dump(), comments=get_comments_by_post(db, post_id))

def create_post(db: Session, post_in: PostCreate, owner_id: str) -> PostSchema:
    """Create new post, tags keep the order they were given in"""
    post = Post(
        id=str(uuid.uuid4()),
        user_id=owner_id,
        content=post_in.content,
        media=post_in.media,
        tags=[PostTag(position=i, tag=tag) for i, tag in enumerate(post_in.tags)],
    )
    db.add(post)
    db.commit()
    logger.info(f"Created post {post.id} for user {owner_id}")

    row = _build_post_query(db, owner_id).filter(Post.id == post.id).one()
    return _create_post_schema(row)

def delete_post(db: Session, post_id: str, requester_id: str) -> bool:
    """
    Delete a post together with its likes and comments.
    Returns False when the post does not exist or belongs to someone else.
    """
    post = db.query(Post).filter(Post.id == post_id, Post.user_id == requester_id).first()
    if not post:
        return False

    db.query(Like).filter(Like.post_id == post.id).delete(synchronize_session=False)
    db.query(Comment).filter(Comment.post_id == post.id).delete(synchronize_session=False)
    db.delete(post)
    db.commit()
    logger.info(f"Deleted post {post_id}")
    return True

def search_posts(db: Session, q: str, requester_id: str, limit: int = settings.SEARCH_POSTS_LIMIT) -> List[PostSchema]:
    """Case-insensitive substring match on content or any tag, newest first"""
    pattern = f"%{q}%"
    rows = (
        _build_post_query(db, requester_id)
        .filter(or_(Post.content.ilike(pattern), Post.tags.any(PostTag.tag.ilike(pattern))))
        .limit(limit)
        .all()
    )
    return [_create_post_schema(row) for row in rows]

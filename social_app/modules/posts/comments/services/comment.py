from typing import List
import uuid

from sqlalchemy.orm import Session

from social_app.modules.posts.comments.models.comment import Comment
from social_app.modules.posts.comments.schemas.comment import Comment as CommentSchema
from social_app.modules.user_management.models.user import User

def _comment_query(db: Session):
    return (
        db.query(Comment, User.name, User.handle, User.avatar)
        .join(User, User.id == Comment.user_id)
        .order_by(Comment.created_at.desc(), Comment.id.desc())
    )

def _get_comment_with_author(row) -> CommentSchema:
    """Helper to convert a (Comment, name, handle, avatar) row to CommentSchema"""
    comment, name, handle, avatar = row
    return CommentSchema(
        id=comment.id,
        post_id=comment.post_id,
        user_id=comment.user_id,
        content=comment.content,
        created_at=comment.created_at,
        name=name,
        handle=handle,
        avatar=avatar,
    )

def get_comments_by_post(db: Session, post_id: str) -> List[CommentSchema]:
    """Comments on a post, newest first"""
    rows = _comment_query(db).filter(Comment.post_id == post_id).all()
    return [_get_comment_with_author(row) for row in rows]

def create_comment(db: Session, post_id: str, author_id: str, content: str) -> CommentSchema:
    """Create a new comment"""
    comment = Comment(
        id=str(uuid.uuid4()),
        post_id=post_id,
        user_id=author_id,
        content=content,
    )
    db.add(comment)
    db.commit()

    return _get_comment_with_author(_comment_query(db).filter(Comment.id == comment.id).one())

def delete_comment(db: Session, comment_id: str, requester_id: str) -> bool:
    """Delete a comment owned by the requester, False if there is no such comment"""
    deleted = (
        db.query(Comment)
        .filter(Comment.id == comment_id, Comment.user_id == requester_id)
        .delete(synchronize_session=False)
    )
    db.commit()
    return deleted > 0

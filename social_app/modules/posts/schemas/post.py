from typing import Optional, List
from datetime import datetime
from pydantic import BaseModel, Field, field_validator, model_validator

from social_app.modules.posts.comments.schemas.comment import Comment

class PostCreate(BaseModel):
    content: str = ""
    media: Optional[str] = Field(None, max_length=255)
    tags: List[str] = []

    @field_validator("tags")
    @classmethod
    def clean_tags(cls, v: List[str]) -> List[str]:
        cleaned = [tag.strip() for tag in v]
        return [tag for tag in cleaned if tag]

    @model_validator(mode="after")
    def require_content_or_media(self) -> "PostCreate":
        if not self.content.strip() and not self.media:
            raise ValueError("Post must have content or media")
        return self

class Post(BaseModel):
    """Post with its author's public fields and per-requester aggregates"""
    id: str
    user_id: str
    content: str
    media: Optional[str] = None
    tags: List[str] = []
    created_at: datetime
    name: str
    handle: str
    avatar: Optional[str] = None
    likes_count: int = 0
    comments_count: int = 0
    is_liked: bool = False

class PostWithComments(Post):
    comments: List[Comment] = []

class DeleteResponse(BaseModel):
    message: str

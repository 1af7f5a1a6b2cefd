from typing import Optional
from datetime import datetime
from pydantic import BaseModel, Field

class CommentCreate(BaseModel):
    content: str = Field(..., min_length=1)

class Comment(BaseModel):
    """Comment model returned to client, flattened with its author"""
    id: str
    post_id: str
    user_id: str
    content: str
    created_at: datetime
    name: str
    handle: str
    avatar: Optional[str] = None

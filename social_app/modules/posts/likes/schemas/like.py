from pydantic import BaseModel

class LikeToggle(BaseModel):
    """State of the requester's like after a toggle"""
    liked: bool

from typing import Optional
from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field, EmailStr

# Letters, digits and underscore only
HANDLE_PATTERN = r"^[A-Za-z0-9_]+$"

class UserBase(BaseModel):
    name: str
    handle: str
    bio: Optional[str] = None
    avatar: Optional[str] = None

class UserPublic(UserBase):
    """User fields anyone may see"""
    id: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)

class UserMe(UserPublic):
    """The caller's own record"""
    email: EmailStr

class UserProfile(UserPublic):
    posts_count: int = 0
    likes_given_count: int = 0

class ProfileUpdate(BaseModel):
    # Both fields are overwritten, clients resend unchanged values
    name: str = Field(..., min_length=2, max_length=255)
    bio: Optional[str] = Field(None, max_length=1000)

class AvatarUpdate(BaseModel):
    avatar: str = Field(..., max_length=255)

class ProfileUpdateResponse(BaseModel):
    message: str
    user: UserPublic

from typing import Optional
from pydantic import BaseModel, EmailStr, Field, field_validator

from social_app.modules.user_management.schemas.user import HANDLE_PATTERN, UserPublic

class _EmailNormalized(BaseModel):
    email: EmailStr

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        """Normalize email to lowercase."""
        return v.lower()

class RegisterRequest(_EmailNormalized):
    name: str = Field(..., min_length=2, max_length=255)
    email: EmailStr = Field(..., max_length=255)
    # bcrypt only looks at the first 72 bytes
    password: str = Field(..., min_length=6, max_length=72)
    handle: str = Field(..., min_length=3, max_length=255, pattern=HANDLE_PATTERN)
    bio: Optional[str] = Field(None, max_length=1000)
    avatar: Optional[str] = Field(None, max_length=255)

class LoginRequest(_EmailNormalized):
    password: str = Field(..., min_length=1)

class AuthResponse(BaseModel):
    token: str
    user: UserPublic

from typing import Optional
import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from social_app.core.security import create_access_token, verify_password
from social_app.modules.auth.schemas.auth import AuthResponse, RegisterRequest
from social_app.modules.user_management.models.user import User
from social_app.modules.user_management.schemas.user import UserPublic
from social_app.modules.user_management.services.user import (
    create_user, get_user_by_email, get_user_by_handle
)

logger = logging.getLogger("social_app")

def register_user(db: Session, user_in: RegisterRequest) -> Optional[User]:
    """Create the user, None when the email or handle is already taken"""
    if get_user_by_email(db, user_in.email) or get_user_by_handle(db, user_in.handle):
        logger.info(f"Registration rejected, email or handle @{user_in.handle} in use")
        return None

    try:
        return create_user(db, user_in)
    except IntegrityError:
        # Lost a race with a concurrent registration
        logger.info(f"Registration rejected by unique constraint for @{user_in.handle}")
        return None

def authenticate(db: Session, email: str, password: str) -> Optional[User]:
    """Unknown email and wrong password both give None"""
    user = get_user_by_email(db, email)
    if not user or not verify_password(password, user.hashed_password):
        return None
    return user

def build_auth_response(user: User) -> AuthResponse:
    return AuthResponse(
        token=create_access_token(user.id),
        user=UserPublic.model_validate(user),
    )

from typing import Optional

from fastapi import Depends, Header, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session

from social_app.core import security
from social_app.core.config import settings
from social_app.db.session import get_db
from social_app.modules.user_management.models.user import User
from social_app.modules.user_management.services.user import get_user

# Clients send the token in x-auth-token, Authorization: Bearer is accepted too
oauth2_scheme = OAuth2PasswordBearer(tokenUrl=f"{settings.API_PREFIX}/login", auto_error=False)

def get_token(
    x_auth_token: Optional[str] = Header(None, alias="x-auth-token"),
    bearer_token: Optional[str] = Depends(oauth2_scheme),
) -> str:
    """
    Dependency returning the raw token from the request headers
    """
    token = x_auth_token or bearer_token
    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="No token provided",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return token

def get_current_user(db: Session = Depends(get_db), token: str = Depends(get_token)) -> User:
    """
    Dependency for getting current authenticated user
    """
    user_id = security.verify_access_token(token)
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token",
            headers={"WWW-Authenticate": "Bearer"},
        )

    user = get_user(db, user_id=user_id)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token",
            headers={"WWW-Authenticate": "Bearer"},
        )

    return user

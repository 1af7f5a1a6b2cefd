"""Authentication router: registration and email/password login"""
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from social_app.db.session import get_db
from social_app.modules.auth.schemas.auth import AuthResponse, LoginRequest, RegisterRequest
from social_app.modules.auth.services.auth import authenticate, build_auth_response, register_user

router = APIRouter()

@router.post("/register", response_model=AuthResponse)
def register(
    *,
    db: Session = Depends(get_db),
    user_in: RegisterRequest,
) -> AuthResponse:
    """Create an account and return a session token"""
    user = register_user(db, user_in)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="User already exists",
        )
    return build_auth_response(user)

@router.post("/login", response_model=AuthResponse)
def login(
    *,
    db: Session = Depends(get_db),
    credentials: LoginRequest,
) -> AuthResponse:
    """Exchange email and password for a session token"""
    user = authenticate(db, credentials.email, credentials.password)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid credentials",
        )
    return build_auth_response(user)

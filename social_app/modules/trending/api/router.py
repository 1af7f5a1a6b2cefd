from typing import Any, List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from social_app.db.session import get_db
from social_app.deps import get_current_user
from social_app.modules.trending.schemas.trending import TrendingTag
from social_app.modules.trending.services.trending import get_trending_tags
from social_app.modules.user_management.models.user import User

router = APIRouter()

@router.get("/tags", response_model=List[TrendingTag])
def read_trending_tags(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> Any:
    """Most used tags of the last week"""
    return get_trending_tags(db)

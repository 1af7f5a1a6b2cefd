from datetime import datetime

from sqlalchemy import Column, String, DateTime, Text

from social_app.core.config import settings
from social_app.db.session import Base

class User(Base):
    __tablename__ = "users"

    id = Column(String, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, index=True, nullable=False)
    handle = Column(String(255), unique=True, index=True, nullable=False)
    hashed_password = Column(String(255), nullable=False)
    bio = Column(Text, nullable=True)
    avatar = Column(String(255), default=settings.DEFAULT_AVATAR_URL)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

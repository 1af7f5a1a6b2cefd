from datetime import datetime

from sqlalchemy import Column, String, DateTime, ForeignKey

from social_app.db.session import Base

class Like(Base):
    __tablename__ = "likes"

    # Composite key: one like per (user, post)
    user_id = Column(String, ForeignKey("users.id", ondelete="CASCADE"), primary_key=True)
    post_id = Column(String, ForeignKey("posts.id", ondelete="CASCADE"), primary_key=True, index=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

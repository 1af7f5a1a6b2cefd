# Import all models here so Alembic and create_all can detect them
from social_app.db.session import Base

from social_app.modules.user_management.models.user import User
from social_app.modules.posts.models.post import Post, PostTag
from social_app.modules.posts.comments.models.comment import Comment
from social_app.modules.posts.likes.models.like import Like

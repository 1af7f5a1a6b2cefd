from datetime import datetime, timedelta
from typing import List, Optional

from sqlalchemy import desc, func
from sqlalchemy.orm import Session

from social_app.core.config import settings
from social_app.modules.posts.models.post import Post, PostTag
from social_app.modules.trending.schemas.trending import TrendingTag

def get_trending_tags(
    db: Session,
    window_days: int = settings.TRENDING_WINDOW_DAYS,
    limit: int = settings.TRENDING_LIMIT,
    tags_per_post: Optional[int] = settings.TRENDING_TAGS_PER_POST,
    now: Optional[datetime] = None,
) -> List[TrendingTag]:
    """
    Most used tags on posts from the last `window_days` days.

    Only the first `tags_per_post` tags of each post are counted, a falsy
    value counts every tag. Ties are ordered alphabetically.
    """
    cutoff = (now or datetime.utcnow()) - timedelta(days=window_days)
    count = func.count().label("count")

    query = (
        db.query(PostTag.tag, count)
        .join(Post, Post.id == PostTag.post_id)
        .filter(Post.created_at >= cutoff, PostTag.tag != "")
    )
    if tags_per_post:
        query = query.filter(PostTag.position < tags_per_post)

    rows = query.group_by(PostTag.tag).order_by(desc(count), PostTag.tag).limit(limit).all()
    return [TrendingTag(tag=tag, count=n) for tag, n in rows]

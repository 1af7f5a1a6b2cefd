from datetime import datetime, timedelta

from social_app.modules.posts.models.post import Post
from social_app.modules.trending.services.trending import get_trending_tags

from .conftest import API


def _age_post(db_session, post_id, days):
    post = db_session.query(Post).filter(Post.id == post_id).one()
    post.created_at = datetime.utcnow() - timedelta(days=days)
    db_session.commit()


def test_trending_counts_recent_tags(client, alice, create_post):
    headers, _ = alice
    create_post(headers, content="a", tags=["python", "fastapi"])
    create_post(headers, content="b", tags=["python"])
    create_post(headers, content="c", tags=["python", "sql", "fastapi"])

    res = client.get(f"{API}/trending/tags", headers=headers)
    assert res.status_code == 200
    assert res.json() == [
        {"tag": "python", "count": 3},
        {"tag": "fastapi", "count": 2},
        {"tag": "sql", "count": 1},
    ]


def test_trending_ignores_tags_past_the_fifth(client, alice, create_post):
    headers, _ = alice
    create_post(headers, content="many tags", tags=["t1", "t2", "t3", "t4", "t5", "sixth", "seventh"])

    tags = {t["tag"] for t in client.get(f"{API}/trending/tags", headers=headers).json()}
    assert tags == {"t1", "t2", "t3", "t4", "t5"}

    # the extra tags are still stored and displayed
    feed = client.get(f"{API}/posts", headers=headers).json()
    assert feed[0]["tags"][-2:] == ["sixth", "seventh"]


def test_trending_without_cap_counts_every_tag(db_session, alice, create_post):
    headers, _ = alice
    create_post(headers, content="many tags", tags=["t1", "t2", "t3", "t4", "t5", "sixth"])

    tags = {t.tag for t in get_trending_tags(db_session, tags_per_post=0)}
    assert "sixth" in tags


def test_trending_excludes_posts_older_than_a_week(client, db_session, alice, create_post):
    headers, _ = alice
    old = create_post(headers, content="old", tags=["stale"])
    create_post(headers, content="new", tags=["fresh"])
    _age_post(db_session, old["id"], days=8)

    tags = [t["tag"] for t in client.get(f"{API}/trending/tags", headers=headers).json()]
    assert tags == ["fresh"]


def test_trending_returns_top_ten(client, alice, create_post):
    headers, _ = alice
    for i in range(12):
        # tag_00 appears most, ties broken alphabetically
        create_post(headers, content=f"post {i}", tags=[f"tag_{i:02d}", "tag_00"] if i else ["tag_00"])

    trending = client.get(f"{API}/trending/tags", headers=headers).json()
    assert len(trending) == 10
    assert trending[0] == {"tag": "tag_00", "count": 12}
    assert [t["tag"] for t in trending[1:3]] == ["tag_01", "tag_02"]

from .conftest import API


def test_create_post_returns_zeroed_post(client, alice, create_post):
    headers, user = alice
    post = create_post(headers, content="hello", tags=["intro"], media="http://cdn.example.com/a.png")

    assert post["user_id"] == user["id"]
    assert post["handle"] == "alice"
    assert post["name"] == "Alice"
    assert post["content"] == "hello"
    assert post["media"] == "http://cdn.example.com/a.png"
    assert post["tags"] == ["intro"]
    assert post["likes_count"] == 0
    assert post["comments_count"] == 0
    assert post["is_liked"] is False


def test_tags_round_trip_in_order(client, alice, create_post):
    headers, _ = alice
    create_post(headers, content="ordered", tags=["a", "b", "c"])

    feed = client.get(f"{API}/posts", headers=headers).json()
    assert feed[0]["tags"] == ["a", "b", "c"]


def test_tags_may_be_empty_and_blank_tags_are_dropped(client, alice, create_post):
    headers, _ = alice
    assert create_post(headers, content="no tags")["tags"] == []
    assert create_post(headers, content="blanks", tags=[" x ", "", "  "])["tags"] == ["x"]


def test_post_needs_content_or_media(client, alice):
    headers, _ = alice
    res = client.post(f"{API}/posts", json={"content": "   ", "tags": []}, headers=headers)
    assert res.status_code == 400

    res = client.post(f"{API}/posts", json={"content": "", "media": "http://x/y.png"}, headers=headers)
    assert res.status_code == 200
    assert res.json()["content"] == ""


def test_feed_is_newest_first_and_includes_all_authors(client, alice, bob, create_post):
    alice_headers, _ = alice
    bob_headers, _ = bob
    first = create_post(alice_headers, content="first")
    second = create_post(bob_headers, content="second")
    third = create_post(alice_headers, content="third")

    feed = client.get(f"{API}/posts", headers=bob_headers).json()
    assert [p["id"] for p in feed] == [third["id"], second["id"], first["id"]]
    assert [p["handle"] for p in feed] == ["alice", "bob", "alice"]


def test_feed_pagination(client, alice, create_post):
    headers, _ = alice
    for i in range(3):
        create_post(headers, content=f"post {i}")

    page = client.get(f"{API}/posts", params={"skip": 1, "limit": 1}, headers=headers).json()
    assert [p["content"] for p in page] == ["post 1"]


def test_get_post_with_comments(client, alice, bob, create_post):
    alice_headers, _ = alice
    bob_headers, _ = bob
    post = create_post(alice_headers, content="discuss")
    client.post(f"{API}/posts/{post['id']}/comments", json={"content": "one"}, headers=bob_headers)
    client.post(f"{API}/posts/{post['id']}/comments", json={"content": "two"}, headers=alice_headers)
    client.post(f"{API}/posts/{post['id']}/like", headers=bob_headers)

    res = client.get(f"{API}/posts/{post['id']}", headers=bob_headers)
    assert res.status_code == 200
    body = res.json()
    assert body["likes_count"] == 1
    assert body["is_liked"] is True
    assert body["comments_count"] == 2
    assert [c["content"] for c in body["comments"]] == ["two", "one"]


def test_get_unknown_post_is_404(client, alice):
    headers, _ = alice
    res = client.get(f"{API}/posts/does-not-exist", headers=headers)
    assert res.status_code == 404
    assert res.json()["detail"] == "Post not found"


def test_delete_post_owner_only(client, alice, bob, create_post):
    alice_headers, _ = alice
    bob_headers, _ = bob
    post = create_post(alice_headers, content="mine")

    res = client.delete(f"{API}/posts/{post['id']}", headers=bob_headers)
    assert res.status_code == 404
    assert res.json()["detail"] == "Post not found or unauthorized"

    res = client.delete(f"{API}/posts/{post['id']}", headers=alice_headers)
    assert res.status_code == 200
    assert res.json()["message"] == "Post deleted successfully"

    feed = client.get(f"{API}/posts", headers=alice_headers).json()
    assert post["id"] not in [p["id"] for p in feed]


def test_delete_missing_post_looks_like_unauthorized(client, alice):
    headers, _ = alice
    res = client.delete(f"{API}/posts/does-not-exist", headers=headers)
    assert res.status_code == 404
    assert res.json()["detail"] == "Post not found or unauthorized"


def test_delete_post_removes_likes_and_comments(client, alice, bob, create_post, db_session):
    from social_app.modules.posts.comments.models.comment import Comment
    from social_app.modules.posts.likes.models.like import Like
    from social_app.modules.posts.models.post import PostTag

    alice_headers, _ = alice
    bob_headers, _ = bob
    post = create_post(alice_headers, content="short lived", tags=["x"])
    client.post(f"{API}/posts/{post['id']}/like", headers=bob_headers)
    client.post(f"{API}/posts/{post['id']}/comments", json={"content": "hi"}, headers=bob_headers)

    client.delete(f"{API}/posts/{post['id']}", headers=alice_headers)

    assert db_session.query(Like).count() == 0
    assert db_session.query(Comment).count() == 0
    assert db_session.query(PostTag).count() == 0


def test_user_posts_by_handle(client, alice, bob, create_post):
    alice_headers, _ = alice
    bob_headers, _ = bob
    create_post(alice_headers, content="from alice")
    create_post(bob_headers, content="from bob")

    res = client.get(f"{API}/users/alice/posts", headers=bob_headers)
    assert res.status_code == 200
    assert [p["content"] for p in res.json()] == ["from alice"]

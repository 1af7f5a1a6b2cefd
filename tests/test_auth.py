from datetime import timedelta

from social_app.core.security import create_access_token, verify_access_token
from social_app.modules.user_management.models.user import User

from .conftest import API, make_user_payload


def test_register_returns_token_for_stored_user(client, db_session):
    res = client.post(f"{API}/register", json=make_user_payload("alice", bio="hi there"))
    assert res.status_code == 200
    body = res.json()

    user = body["user"]
    assert user["handle"] == "alice"
    assert user["bio"] == "hi there"
    assert "password" not in user
    assert "hashed_password" not in user
    assert "email" not in user

    stored = db_session.query(User).filter(User.handle == "alice").one()
    assert verify_access_token(body["token"]) == stored.id == user["id"]
    assert stored.hashed_password != "secret123"


def test_register_uses_default_avatar(client):
    res = client.post(f"{API}/register", json=make_user_payload("alice"))
    assert res.json()["user"]["avatar"] == "/api/placeholder/150/150"


def test_register_duplicate_email_or_handle_conflicts(client):
    assert client.post(f"{API}/register", json=make_user_payload("alice")).status_code == 200

    same_email = make_user_payload("alice2", email="alice@example.com")
    same_handle = make_user_payload("alice", email="other@example.com")
    for payload in (same_email, same_handle, same_email):
        res = client.post(f"{API}/register", json=payload)
        assert res.status_code == 400
        assert res.json()["detail"] == "User already exists"


def test_register_email_is_case_insensitive(client):
    client.post(f"{API}/register", json=make_user_payload("alice"))
    res = client.post(f"{API}/register", json=make_user_payload("alice2", email="ALICE@example.com"))
    assert res.status_code == 400


def test_register_rejects_malformed_input(client):
    bad_payloads = [
        make_user_payload("al"),                      # handle too short
        make_user_payload("bad-handle"),              # handle has a dash
        make_user_payload("alice", password="12345"),
        make_user_payload("alice", email="not-an-email"),
        make_user_payload("alice", name="A"),
        {"email": "alice@example.com", "password": "secret123"},
    ]
    for payload in bad_payloads:
        res = client.post(f"{API}/register", json=payload)
        assert res.status_code == 400, payload


def test_login_success(client, alice):
    _, user = alice
    res = client.post(f"{API}/login", json={"email": "Alice@Example.com", "password": "secret123"})
    assert res.status_code == 200
    body = res.json()
    assert body["user"]["id"] == user["id"]
    assert verify_access_token(body["token"]) == user["id"]


def test_login_does_not_reveal_which_part_failed(client, alice):
    wrong_password = client.post(f"{API}/login", json={"email": "alice@example.com", "password": "nope123"})
    unknown_email = client.post(f"{API}/login", json={"email": "nobody@example.com", "password": "secret123"})
    assert wrong_password.status_code == unknown_email.status_code == 400
    assert wrong_password.json() == unknown_email.json() == {"detail": "Invalid credentials"}


def test_protected_route_requires_token(client):
    res = client.get(f"{API}/posts")
    assert res.status_code == 401
    assert res.json()["detail"] == "No token provided"


def test_protected_route_rejects_bad_tokens(client, alice):
    _, user = alice
    expired = create_access_token(user["id"], expires_delta=timedelta(minutes=-1))
    for token in ("garbage", expired):
        res = client.get(f"{API}/posts", headers={"x-auth-token": token})
        assert res.status_code == 401
        assert res.json()["detail"] == "Invalid token"


def test_bearer_header_is_accepted(client, alice):
    headers, _ = alice
    res = client.get(f"{API}/posts", headers={"Authorization": f"Bearer {headers['x-auth-token']}"})
    assert res.status_code == 200


def test_token_for_unknown_user_is_rejected(client):
    token = create_access_token("no-such-user")
    res = client.get(f"{API}/posts", headers={"x-auth-token": token})
    assert res.status_code == 401

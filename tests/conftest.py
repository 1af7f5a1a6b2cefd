import os
import tempfile

# Settings are read at import time, point them at throwaway locations first
_TMP_DIR = tempfile.mkdtemp(prefix="social_app_tests_")
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_TMP_DIR, 'test.db')}"
os.environ["UPLOAD_DIRECTORY"] = os.path.join(_TMP_DIR, "uploads")
os.environ["BASE_URL"] = "http://testserver"
os.environ["SECRET_KEY"] = "test-secret-key"
for key in ("STORAGE_ENDPOINT", "STORAGE_ACCESS_KEY_ID", "STORAGE_SECRET_ACCESS_KEY"):
    os.environ.pop(key, None)

import pytest
from fastapi.testclient import TestClient

from social_app.db.base import Base
from social_app.db.session import SessionLocal, engine
from social_app.main import app

API = "/api"


@pytest.fixture(autouse=True)
def db_schema():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture()
def db_session():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def client():
    return TestClient(app)


def make_user_payload(handle: str, **overrides) -> dict:
    payload = {
        "name": handle.capitalize(),
        "email": f"{handle}@example.com",
        "password": "secret123",
        "handle": handle,
    }
    payload.update(overrides)
    return payload


@pytest.fixture()
def register(client):
    """Register a user and return (token headers, user json)"""
    def _register(handle: str, **overrides):
        res = client.post(f"{API}/register", json=make_user_payload(handle, **overrides))
        assert res.status_code == 200, res.text
        body = res.json()
        return {"x-auth-token": body["token"]}, body["user"]
    return _register


@pytest.fixture()
def alice(register):
    return register("alice")


@pytest.fixture()
def bob(register):
    return register("bob")


@pytest.fixture()
def create_post(client):
    def _create_post(headers, content="hello", tags=None, media=None):
        body = {"content": content, "tags": tags or []}
        if media is not None:
            body["media"] = media
        res = client.post(f"{API}/posts", json=body, headers=headers)
        assert res.status_code == 200, res.text
        return res.json()
    return _create_post

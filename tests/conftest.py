"""Shared fixtures: settings pointed at a temporary data directory, and an API client using them."""

import pytest
from fastapi.testclient import TestClient

from core.accounts import AccountRegistry
from core.config import Settings, get_settings
from core.posts import PostRegistry
from core.store import JsonStore
from main import app


@pytest.fixture
def settings(tmp_path):
    return Settings(data_dir=tmp_path, secret_key="test-secret")


@pytest.fixture
def user_store(settings):
    return JsonStore(settings.users_path)


@pytest.fixture
def post_store(settings):
    return JsonStore(settings.posts_path)


@pytest.fixture
def accounts(user_store):
    return AccountRegistry(user_store)


@pytest.fixture
def posts(post_store):
    return PostRegistry(post_store)


@pytest.fixture
def client(settings):
    app.dependency_overrides[get_settings] = lambda: settings
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


def login(client, username: str, password: str = "pw") -> dict:
    """Register (if needed) and log in, returning the Authorization header."""
    client.post("/register", json={"username": username, "password": password})
    res = client.post("/login", json={"username": username, "password": password})
    return {"Authorization": f"Bearer {res.json()['token']}"}


@pytest.fixture
def alice(client):
    return login(client, "alice")


@pytest.fixture
def bob(client):
    return login(client, "bob")

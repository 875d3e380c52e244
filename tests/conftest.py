# tests/conftest.py
import os
import sys

import pytest
from fastapi.testclient import TestClient

# ensure project root is importable
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from inventory_app.config import Settings  # noqa: E402
from inventory_app.database import JsonFileDB  # noqa: E402
from inventory_app.main import create_app  # noqa: E402

ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "admin123"


def login(client, username, password):
    """Submit the login form without following the redirect."""
    return client.post("/login", data={"username": username, "password": password}, follow_redirects=False)


def register(client, username, password, role=None):
    data = {"username": username, "password": password}
    if role is not None:
        data["role"] = role
    return client.post("/register", data=data, follow_redirects=False)


@pytest.fixture
def settings(tmp_path):
    """Settings pointing at an isolated temp data dir."""
    return Settings(
        DATA_DIR=tmp_path / "data",
        STATIC_DIR=tmp_path / "static",
        CORS_ORIGINS="http://frontend.test",
        LOCK_TIMEOUT_SECONDS=2,
    )


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    # entering the context runs the lifespan, which seeds the admin user
    with TestClient(app) as c:
        yield c


@pytest.fixture
def make_client(app):
    """
    Build extra clients (separate cookie jars) against the same app.
    Usage: other = make_client()
    """
    opened = []

    def _fn():
        c = TestClient(app)
        c.__enter__()
        opened.append(c)
        return c

    yield _fn
    for c in opened:
        c.__exit__(None, None, None)


@pytest.fixture
def admin_client(client):
    resp = login(client, ADMIN_USERNAME, ADMIN_PASSWORD)
    assert resp.status_code == 303, resp.text
    return client


@pytest.fixture
def member_client(make_client):
    c = make_client()
    assert register(c, "bob", "bobpass1").status_code == 303
    resp = login(c, "bob", "bobpass1")
    assert resp.status_code == 303, resp.text
    return c


@pytest.fixture
def db(tmp_path):
    return JsonFileDB(tmp_path / "database.json", lock_timeout=2)


@pytest.fixture
def sample_item():
    return {"name": "Hex bolt M8", "description": "zinc plated", "quantity": 120, "price": "0.35"}

from datetime import timedelta

from inventory_app.core.sessions import SessionManager
from inventory_app.models.user import Role, User


def _user(role=Role.MEMBER):
    return User(id=3, username="hank", password_hash="x", role=role)


def test_create_and_get():
    sessions = SessionManager()
    token = sessions.create(_user(Role.ADMIN))

    data = sessions.get(token)
    assert data.user_id == 3
    assert data.username == "hank"
    assert data.role is Role.ADMIN
    assert data.is_admin


def test_tokens_are_opaque_and_distinct():
    sessions = SessionManager()
    t1 = sessions.create(_user())
    t2 = sessions.create(_user())
    assert t1 != t2
    assert "hank" not in t1
    assert len(sessions) == 2


def test_destroy():
    sessions = SessionManager()
    token = sessions.create(_user())
    assert sessions.destroy(token) is True
    assert sessions.get(token) is None
    assert sessions.destroy(token) is False


def test_unknown_or_missing_token():
    sessions = SessionManager()
    assert sessions.get(None) is None
    assert sessions.get("") is None
    assert sessions.get("nope") is None


def test_expired_session_is_dropped():
    sessions = SessionManager(max_age=timedelta(0))
    token = sessions.create(_user())
    assert sessions.get(token) is None
    assert len(sessions) == 0

import pytest

from inventory_app.core.errors import DuplicateUsername, InvalidCredentials, StorageFailure
from inventory_app.core.security import hash_password, verify_password
from inventory_app.models.user import Role, User
from inventory_app.services.credentials import CredentialStore


@pytest.fixture
def store(db):
    return CredentialStore(db)


def test_bootstrap_seeds_single_admin(store, db):
    assert not db.exists()
    assert store.bootstrap("admin", "admin123") is True
    assert db.exists()

    users = db.list_records("users")
    assert len(users) == 1
    admin = store.find_by_username("admin")
    assert admin.role is Role.ADMIN
    assert admin.id == 1
    # never stored in plaintext
    assert admin.password_hash != "admin123"
    assert verify_password("admin123", admin.password_hash)


def test_bootstrap_is_idempotent(store, db):
    assert store.bootstrap("admin", "admin123") is True
    assert store.bootstrap("admin", "other-password") is False
    assert len(db.list_records("users")) == 1
    assert store.authenticate("admin", "admin123").username == "admin"


def test_bootstrap_leaves_existing_users_alone(store):
    store.insert("carol", hash_password("pw"), Role.MEMBER)
    assert store.bootstrap("admin", "admin123") is False
    assert store.find_by_username("admin") is None


def test_insert_defaults_to_member(store):
    user = store.insert("dave", hash_password("pw"))
    assert user.role is Role.MEMBER
    assert store.find_by_username("dave").role is Role.MEMBER


def test_duplicate_username_rejected_and_first_hash_kept(store, db):
    first = store.insert("erin", hash_password("first"))
    with pytest.raises(DuplicateUsername):
        store.insert("erin", hash_password("second"), Role.ADMIN)

    stored = store.find_by_username("erin")
    assert stored.password_hash == first.password_hash
    assert stored.role is Role.MEMBER
    assert len(db.list_records("users")) == 1


def test_user_ids_are_unique(store):
    a = store.insert("a", hash_password("pw"))
    b = store.insert("b", hash_password("pw"))
    assert a.id != b.id


def test_authenticate(store):
    store.insert("frank", hash_password("s3cret"))
    assert store.authenticate("frank", "s3cret").username == "frank"

    with pytest.raises(InvalidCredentials):
        store.authenticate("frank", "wrong")
    with pytest.raises(InvalidCredentials):
        store.authenticate("nobody", "s3cret")


def test_authenticate_with_broken_hash(store, db):
    with db.transaction() as doc:
        doc["users"].append({"id": db.next_id(doc, "users"), "username": "gina", "password_hash": "plain", "role": "member"})
    with pytest.raises(InvalidCredentials):
        store.authenticate("gina", "plain")


def test_user_from_legacy_row():
    user = User.from_dict({"id": 1, "username": "admin", "password": "$2b$10$abc", "role": "admin"})
    assert user.password_hash == "$2b$10$abc"
    assert user.is_admin


def test_unknown_role_in_file_is_storage_failure(store, db):
    with db.transaction() as doc:
        doc["users"].append({"id": db.next_id(doc, "users"), "username": "owen", "password_hash": "x", "role": "owner"})
    with pytest.raises(StorageFailure):
        store.find_by_username("owen")
    with pytest.raises(StorageFailure):
        store.authenticate("owen", "x")

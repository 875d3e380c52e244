# inventory_app/services/credentials.py
import logging
from typing import Optional

from inventory_app.core.errors import DuplicateUsername, InvalidCredentials
from inventory_app.core.security import dummy_verify, hash_password, verify_password
from inventory_app.database import JsonFileDB
from inventory_app.models.user import Role, User

logger = logging.getLogger(__name__)


class CredentialStore:
    """User records kept in the "users" table of the JSON document."""

    def __init__(self, db: JsonFileDB):
        self.db = db

    def find_by_username(self, username: str) -> Optional[User]:
        for row in self.db.list_records("users"):
            if row.get("username") == username:
                return self.db.decode("users", row, User.from_dict)
        return None

    def insert(self, username: str, password_hash: str, role: Role = Role.MEMBER) -> User:
        """
        Add a user. The uniqueness check and the append happen under one lock,
        so two concurrent registrations of the same name cannot both succeed.
        """
        with self.db.transaction() as doc:
            if any(row.get("username") == username for row in doc["users"]):
                raise DuplicateUsername(username)
            user = User(
                id=self.db.next_id(doc, "users"),
                username=username,
                password_hash=password_hash,
                role=role,
            )
            doc["users"].append(user.to_dict())
        logger.info("Registered user %s with role %s", username, role.value)
        return user

    def bootstrap(self, admin_username: str, admin_password: str) -> bool:
        """
        Create the data file if it is missing and seed a default admin when
        there are no users yet. Safe to call on every start. Returns True when
        the admin was seeded.
        """
        with self.db.transaction() as doc:
            if doc["users"]:
                return False
            admin = User(
                id=self.db.next_id(doc, "users"),
                username=admin_username,
                password_hash=hash_password(admin_password),
                role=Role.ADMIN,
            )
            doc["users"].append(admin.to_dict())
        return True

    def authenticate(self, username: str, password: str) -> User:
        user = self.find_by_username(username)
        if user is None:
            dummy_verify()
            raise InvalidCredentials(username)
        try:
            ok = verify_password(password, user.password_hash)
        except ValueError:
            # malformed hash in the data file
            logger.warning("Stored password hash for %s is not a valid bcrypt hash", username)
            ok = False
        if not ok:
            raise InvalidCredentials(username)
        return user

from __future__ import annotations
import secrets
import threading
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Dict, Optional, Tuple

from inventory_app.models.user import Role, User


@dataclass(frozen=True)
class SessionData:
    """What the server remembers about a logged-in client."""
    user_id: int
    username: str
    role: Role

    @property
    def is_admin(self) -> bool:
        return self.role is Role.ADMIN


class SessionManager:
    """
    Server-side session storage. The client only ever holds the opaque token;
    user id, name and role stay here. Expired entries are dropped when read.
    """

    def __init__(self, max_age: timedelta = timedelta(hours=24)):
        self.max_age = max_age
        self._sessions: Dict[str, Tuple[SessionData, datetime]] = {}
        self._lock = threading.Lock()

    def create(self, user: User) -> str:
        token = secrets.token_urlsafe(32)
        data = SessionData(user_id=user.id, username=user.username, role=user.role)
        expires_at = datetime.now(timezone.utc) + self.max_age
        with self._lock:
            self._sessions[token] = (data, expires_at)
        return token

    def get(self, token: Optional[str]) -> Optional[SessionData]:
        if not token:
            return None
        with self._lock:
            entry = self._sessions.get(token)
            if entry is None:
                return None
            data, expires_at = entry
            if datetime.now(timezone.utc) >= expires_at:
                del self._sessions[token]
                return None
            return data

    def destroy(self, token: Optional[str]) -> bool:
        if not token:
            return False
        with self._lock:
            return self._sessions.pop(token, None) is not None

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)

# inventory_app/models/user.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict


class Role(str, Enum):
    ADMIN = "admin"
    MEMBER = "member"


@dataclass
class User:
    """
    Domain model for a user row in the JSON document.
    Users are created at registration or bootstrap and never changed afterwards.
    """
    id: int
    username: str
    password_hash: str
    role: Role = Role.MEMBER

    @property
    def is_admin(self) -> bool:
        return self.role is Role.ADMIN

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "User":
        if d is None:
            raise ValueError("Cannot construct User from None")
        # rows from the first file format used "password" for the hash
        password_hash = d.get("password_hash") or d.get("password") or ""
        return cls(
            id=int(d["id"]),
            username=str(d["username"]),
            password_hash=str(password_hash),
            role=Role(d.get("role") or Role.MEMBER.value),
        )

    def to_dict(self) -> Dict[str, Any]:
        """
        Plain dict for the data file. password_hash is included because it
        has to persist; nothing outside the stores sees this dict.
        """
        return {
            "id": self.id,
            "username": self.username,
            "password_hash": self.password_hash,
            "role": self.role.value,
        }

# inventory_app/models/inventory.py
from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, Dict

# fields a client may replace on update
EDITABLE_FIELDS = ("name", "description", "quantity", "price")


def _utcnow_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


@dataclass
class InventoryItem:
    """
    One inventory row. Price is a Decimal in memory and a decimal string in
    the data file so it round-trips exactly.
    """
    id: int
    name: str
    quantity: int
    price: Decimal
    description: str = ""
    created_at: str = field(default_factory=_utcnow_iso)

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "InventoryItem":
        if d is None:
            raise ValueError("Cannot construct InventoryItem from None")
        return cls(
            id=int(d["id"]),
            name=str(d.get("name") or ""),
            description=str(d.get("description") or ""),
            quantity=int(d.get("quantity") or 0),
            # str() first so float prices from older files don't pick up binary noise
            price=Decimal(str(d.get("price") or 0)),
            created_at=str(d.get("created_at") or ""),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "quantity": int(self.quantity),
            "price": str(self.price),
            "created_at": self.created_at,
        }

    def apply(self, updates: Dict[str, Any]) -> None:
        """Overwrite the editable fields present in `updates`; others are ignored."""
        for key in EDITABLE_FIELDS:
            if key in updates:
                value = updates[key]
                if key == "price":
                    value = Decimal(str(value))
                elif key == "quantity":
                    value = int(value)
                elif key == "description":
                    value = value or ""
                setattr(self, key, value)

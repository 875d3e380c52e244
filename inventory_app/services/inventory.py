# inventory_app/services/inventory.py
from decimal import Decimal
from typing import Any, Dict, List, Optional

import pandas as pd

from inventory_app.database import JsonFileDB
from inventory_app.models.inventory import InventoryItem

EXPORT_COLUMNS = ["id", "name", "description", "quantity", "price", "created_at"]


class InventoryStore:
    """
    CRUD over the "inventory" table. update/delete return the number of rows
    they touched (0 or 1) instead of raising, so callers decide what a miss means.
    A row that cannot be decoded surfaces as StorageFailure.
    """

    def __init__(self, db: JsonFileDB):
        self.db = db

    def _decode(self, row: Dict[str, Any]) -> InventoryItem:
        return self.db.decode("inventory", row, InventoryItem.from_dict)

    def list(self) -> List[InventoryItem]:
        items = [self._decode(r) for r in self.db.list_records("inventory")]
        return sorted(items, key=lambda i: i.id)

    def get(self, item_id: int) -> Optional[InventoryItem]:
        for item in self.list():
            if item.id == item_id:
                return item
        return None

    def insert(self, fields: Dict[str, Any]) -> int:
        with self.db.transaction() as doc:
            item = InventoryItem(id=self.db.next_id(doc, "inventory"), name="", quantity=0, price=Decimal(0))
            item.apply(fields)
            doc["inventory"].append(item.to_dict())
        return item.id

    def update(self, item_id: int, fields: Dict[str, Any]) -> int:
        with self.db.transaction() as doc:
            rows = doc["inventory"]
            for idx, row in enumerate(rows):
                item = self._decode(row)
                if item.id == item_id:
                    item.apply(fields)
                    rows[idx] = item.to_dict()
                    return 1
        return 0

    def delete(self, item_id: int) -> int:
        with self.db.transaction() as doc:
            before = len(doc["inventory"])
            doc["inventory"] = [r for r in doc["inventory"] if self._decode(r).id != item_id]
            return before - len(doc["inventory"])

    def to_dataframe(self) -> pd.DataFrame:
        rows = [item.to_dict() for item in self.list()]
        return pd.DataFrame(rows, columns=EXPORT_COLUMNS)

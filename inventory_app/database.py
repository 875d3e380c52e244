# inventory_app/database.py
"""
File-backed DB layer: one JSON document holding every table.

    {"users": [...], "inventory": [...], "sequences": {"users": 1, "inventory": 7}}

All access goes through a FileLock next to the data file, so a
read-modify-write inside `transaction()` is a critical section across threads
and processes. Writes go to a temp file first and are moved into place with
os.replace, so a crash never leaves a half-written document behind.

Usage:
    db = JsonFileDB(Path("data/database.json"))
    with db.transaction() as doc:
        item_id = db.next_id(doc, "inventory")
        doc["inventory"].append({"id": item_id, ...})
    db.read()["inventory"]
"""

import json
import logging
import os
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Callable, Dict, Iterator, List, TypeVar

from filelock import FileLock, Timeout

from inventory_app.core.errors import StorageFailure

logger = logging.getLogger(__name__)

TABLES = ("users", "inventory")

# what a hand-edited or damaged row raises while being turned into a model
ROW_ERRORS = (KeyError, TypeError, ValueError, ArithmeticError)

T = TypeVar("T")


class JsonFileDB:
    def __init__(self, path: Path, lock_timeout: float = 10.0):
        self.path = Path(path)
        self.lock_timeout = lock_timeout
        self._lock = FileLock(str(self.path) + ".lock", timeout=lock_timeout)

    def exists(self) -> bool:
        return self.path.exists()

    @staticmethod
    def _empty_doc() -> Dict[str, Any]:
        return {"users": [], "inventory": [], "sequences": {t: 0 for t in TABLES}}

    @contextmanager
    def _locked(self) -> Iterator[None]:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self._lock.acquire()
        except Timeout as exc:
            logger.error("Timed out after %ss waiting for lock on %s", self.lock_timeout, self.path)
            raise StorageFailure(f"could not lock {self.path}") from exc
        except OSError as exc:
            logger.exception("Cannot prepare data directory for %s", self.path)
            raise StorageFailure(str(exc)) from exc
        try:
            yield
        finally:
            self._lock.release()

    def _read_doc(self) -> Dict[str, Any]:
        """Load the document WITHOUT taking the lock; callers hold it."""
        if not self.path.exists():
            return self._empty_doc()
        try:
            doc = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            logger.exception("Error reading database file %s", self.path)
            raise StorageFailure(f"cannot read {self.path}") from exc
        if not isinstance(doc, dict):
            logger.error("Database file %s does not hold a JSON object", self.path)
            raise StorageFailure(f"{self.path} does not hold a JSON object")

        try:
            for table in TABLES:
                doc.setdefault(table, [])
                if not isinstance(doc[table], list) or not all(isinstance(r, dict) for r in doc[table]):
                    raise TypeError(f"table {table!r} is not a list of objects")
            # files written before sequences existed: continue after the highest id
            sequences = doc.setdefault("sequences", {})
            if not isinstance(sequences, dict):
                raise TypeError("sequences is not an object")
            for table in TABLES:
                if table not in sequences:
                    sequences[table] = max((int(r.get("id") or 0) for r in doc[table]), default=0)
        except ROW_ERRORS as exc:
            logger.error("Malformed database file %s: %s", self.path, exc)
            raise StorageFailure(f"malformed {self.path}") from exc
        return doc

    def decode(self, table: str, row: Dict[str, Any], factory: Callable[[Dict[str, Any]], T]) -> T:
        """Build a model from a stored row; a bad row is a storage failure, not a crash."""
        try:
            return factory(row)
        except ROW_ERRORS as exc:
            logger.error("Malformed %s row (id=%r) in %s: %s", table, row.get("id"), self.path, exc)
            raise StorageFailure(f"malformed {table} row in {self.path}") from exc

    def _write_doc_nolock(self, doc: Dict[str, Any]) -> None:
        tmp = self.path.with_name(self.path.name + ".tmp")
        try:
            tmp.write_text(json.dumps(doc, indent=2), encoding="utf-8")
            os.replace(tmp, self.path)
        except (OSError, TypeError, ValueError) as exc:
            logger.exception("Error writing database file %s", self.path)
            raise StorageFailure(f"cannot write {self.path}") from exc

    # --- public API ---

    def read(self) -> Dict[str, Any]:
        with self._locked():
            return self._read_doc()

    def list_records(self, table: str) -> List[Dict[str, Any]]:
        return self.read()[table]

    @contextmanager
    def transaction(self) -> Iterator[Dict[str, Any]]:
        """
        Hold the lock for a whole read-modify-write. The document is written
        back when the block exits normally; an exception discards the changes.
        """
        with self._locked():
            doc = self._read_doc()
            yield doc
            self._write_doc_nolock(doc)

    @staticmethod
    def next_id(doc: Dict[str, Any], table: str) -> int:
        """Advance and return the table's sequence. Ids are never reused."""
        seq = int(doc["sequences"].get(table, 0)) + 1
        doc["sequences"][table] = seq
        return seq

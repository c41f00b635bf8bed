"""Lift persistence layer - CRUD operations for tracked lifts.

Two backends share the ``LiftStore`` interface:

- ``SqliteLiftStore`` keeps lifts in an on-disk SQLite table.
- ``InMemoryLiftStore`` keeps them in a list, seeded with a few sample
  lifts. Useful for demos and tests.

``get_store`` picks one at startup.
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional

from lift_tracker.config import DB_PATH, SEED_LIFTS, STORAGE_BACKEND
from lift_tracker.db import get_connection, init_db
from lift_tracker.models import Lift, TrackingLift, today_label

logger = logging.getLogger(__name__)


class LiftStore(ABC):
    """Storage interface for tracked lifts. Weights are in pounds."""

    @abstractmethod
    def init(self) -> None:
        ...

    @abstractmethod
    def create(self, name: str, max_weight: float, date: str) -> int:
        """Store a new lift. Returns its ID."""

    @abstractmethod
    def list_all(self) -> list:
        """All lifts as TrackingLift objects, oldest first."""

    @abstractmethod
    def get(self, lift_id: int) -> Optional[TrackingLift]:
        ...

    @abstractmethod
    def update_max_weight(self, lift_id: int, new_max_weight: float) -> bool:
        """Overwrite a lift's max weight. Returns False if no such lift."""

    @abstractmethod
    def delete_by_id(self, lift_id: int) -> bool:
        """Delete a lift. Returns False if no such lift."""


def _row_to_tracking_lift(row) -> TrackingLift:
    """Convert a database row (or record dict) to a TrackingLift."""
    return TrackingLift(
        lift=Lift(name=row["name"], max_weight=row["max_weight"]),
        date=row["date"],
        id=row["id"],
    )


class SqliteLiftStore(LiftStore):
    def __init__(self, db_path: str = DB_PATH):
        self.db_path = db_path

    def init(self) -> None:
        init_db(self.db_path)
        logger.debug("SQLite lift store ready at %s", self.db_path)

    def create(self, name: str, max_weight: float, date: str) -> int:
        with get_connection(self.db_path) as conn:
            cursor = conn.execute(
                "INSERT INTO lifts (name, max_weight, date) VALUES (?, ?, ?)",
                (name, max_weight, date),
            )
            return cursor.lastrowid

    def list_all(self) -> list:
        with get_connection(self.db_path) as conn:
            rows = conn.execute("SELECT * FROM lifts ORDER BY id").fetchall()
            return [_row_to_tracking_lift(row) for row in rows]

    def get(self, lift_id: int) -> Optional[TrackingLift]:
        with get_connection(self.db_path) as conn:
            row = conn.execute("SELECT * FROM lifts WHERE id = ?", (lift_id,)).fetchone()
            if not row:
                return None
            return _row_to_tracking_lift(row)

    def update_max_weight(self, lift_id: int, new_max_weight: float) -> bool:
        with get_connection(self.db_path) as conn:
            cursor = conn.execute(
                "UPDATE lifts SET max_weight = ? WHERE id = ?",
                (new_max_weight, lift_id),
            )
            return cursor.rowcount > 0

    def delete_by_id(self, lift_id: int) -> bool:
        with get_connection(self.db_path) as conn:
            cursor = conn.execute("DELETE FROM lifts WHERE id = ?", (lift_id,))
            return cursor.rowcount > 0


class InMemoryLiftStore(LiftStore):
    def __init__(self, seed: bool = True):
        self.seed = seed
        self._records = []
        self._next_id = 1

    def init(self) -> None:
        if self.seed and not self._records:
            date = today_label()
            for name, max_weight in SEED_LIFTS:
                self.create(name, max_weight, date)
            logger.debug("In-memory lift store seeded with %d lifts", len(self._records))

    def create(self, name: str, max_weight: float, date: str) -> int:
        lift_id = self._next_id
        self._next_id += 1
        self._records.append(
            {"id": lift_id, "name": name, "max_weight": max_weight, "date": date}
        )
        return lift_id

    def list_all(self) -> list:
        # TrackingLift copies, so callers can't modify the records
        return [_row_to_tracking_lift(record) for record in self._records]

    def get(self, lift_id: int) -> Optional[TrackingLift]:
        for record in self._records:
            if record["id"] == lift_id:
                return _row_to_tracking_lift(record)
        return None

    def update_max_weight(self, lift_id: int, new_max_weight: float) -> bool:
        for record in self._records:
            if record["id"] == lift_id:
                record["max_weight"] = new_max_weight
                return True
        return False

    def delete_by_id(self, lift_id: int) -> bool:
        before = len(self._records)
        self._records = [r for r in self._records if r["id"] != lift_id]
        return len(self._records) < before


def get_store(backend: Optional[str] = None, db_path: Optional[str] = None) -> LiftStore:
    """Build the configured storage backend (not yet initialized)."""
    backend = backend or STORAGE_BACKEND
    if backend == "sqlite":
        return SqliteLiftStore(db_path or DB_PATH)
    if backend == "memory":
        return InMemoryLiftStore()
    raise ValueError(f"Unknown storage backend {backend!r}. Choose from: sqlite, memory")

"""
In-memory record storage.

This module provides ``RecordStore`` (an ordered collection of records
of one entity kind keyed by integer id), ``FleetDatabase`` (the
composition root owning one store per entity kind), ``init_db`` for
building a database on application start and ``get_db``, a helper
dependency for FastAPI routes.  Durable storage would replace this
module behind the same interface.

Records are plain JSON-ready dictionaries using the wire field names
(``vesselId``, ``scheduledDate``...).  Stores copy records on the way
in and out so no caller can mutate stored state through a returned
object.
"""

import copy
import threading
from contextlib import contextmanager
from typing import Any, Dict, Iterable, Iterator, List, Optional

from fastapi import Request

from .errors import NotFoundError

Record = Dict[str, Any]

VESSELS = "vessels"
CREW = "crew"
MAINTENANCE = "maintenance"
BOOKINGS = "bookings"
INVENTORY = "inventory"

# Order matters: ``FleetDatabase.snapshot`` acquires store locks in this
# order.
ENTITY_KINDS = (VESSELS, CREW, MAINTENANCE, BOOKINGS, INVENTORY)

LABELS = {
    VESSELS: "Vessel",
    CREW: "Crew member",
    MAINTENANCE: "Maintenance record",
    BOOKINGS: "Booking",
    INVENTORY: "Inventory item",
}


class RecordStore:
    """Ordered collection of records of one entity kind.

    The store owns identifier assignment: a new record gets
    ``max(existing ids, 0) + 1``.  All operations run under a
    re-entrant lock so a host running handlers on worker threads sees
    one writer at a time.
    """

    def __init__(self, label: str, records: Iterable[Record] = ()) -> None:
        self.label = label
        self._records: List[Record] = [copy.deepcopy(r) for r in records]
        self._lock = threading.RLock()

    @property
    def lock(self) -> threading.RLock:
        return self._lock

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def _index(self, record_id: int) -> int:
        for index, record in enumerate(self._records):
            if record.get("id") == record_id:
                return index
        raise NotFoundError(f"{self.label} not found")

    def next_id(self) -> int:
        with self._lock:
            return max((r["id"] for r in self._records), default=0) + 1

    def list(self, **filters: Any) -> List[Record]:
        """Return records whose fields equal every filter value.

        With no filters the full collection is returned.  Insertion
        order is preserved; no match gives an empty list.
        """
        with self._lock:
            return [
                copy.deepcopy(record)
                for record in self._records
                if all(field in record and record[field] == value for field, value in filters.items())
            ]

    def find(self, record_id: int) -> Optional[Record]:
        with self._lock:
            for record in self._records:
                if record.get("id") == record_id:
                    return copy.deepcopy(record)
            return None

    def get(self, record_id: int) -> Record:
        with self._lock:
            return copy.deepcopy(self._records[self._index(record_id)])

    def create(self, record: Record) -> Record:
        with self._lock:
            stored = copy.deepcopy(record)
            stored["id"] = self.next_id()
            self._records.append(stored)
            return copy.deepcopy(stored)

    def update(self, record_id: int, fields: Record) -> Record:
        with self._lock:
            index = self._index(record_id)
            current = self._records[index]
            merged = {**current, **copy.deepcopy(fields), "id": current["id"]}
            self._records[index] = merged
            return copy.deepcopy(merged)

    def delete(self, record_id: int) -> None:
        with self._lock:
            del self._records[self._index(record_id)]


# Demo fleet loaded into a fresh database unless ``SEED_DATA`` is off.
SEED_DATA: Dict[str, List[Record]] = {
    VESSELS: [
        {"id": 1, "name": "Ocean Serenity", "type": "Motor Yacht", "length": 85, "capacity": 12, "status": "available"},
        {"id": 2, "name": "Wind Dancer", "type": "Sailing Yacht", "length": 65, "capacity": 8, "status": "available"},
    ],
    CREW: [
        {"id": 1, "name": "Captain John Smith", "position": "Captain", "vesselId": 1, "certifications": ["Master 500 Ton"]},
        {"id": 2, "name": "Sarah Johnson", "position": "Chef", "vesselId": 1, "certifications": ["Culinary Arts"]},
    ],
    MAINTENANCE: [
        {
            "id": 1,
            "vesselId": 1,
            "type": "Engine Service",
            "scheduledDate": "2025-11-01",
            "status": "pending",
            "notes": "Regular maintenance check",
        },
    ],
    BOOKINGS: [
        {
            "id": 1,
            "vesselId": 1,
            "clientName": "John Doe",
            "startDate": "2025-11-15",
            "endDate": "2025-11-20",
            "status": "confirmed",
        },
    ],
    INVENTORY: [
        {
            "id": 1,
            "vesselId": 1,
            "item": "Life Jackets",
            "quantity": 15,
            "category": "Safety",
            "unit": "units",
            "lastChecked": "2025-10-01",
        },
        {
            "id": 2,
            "vesselId": 1,
            "item": "Fuel",
            "quantity": 850,
            "category": "Consumables",
            "unit": "gallons",
            "lastChecked": "2025-10-01",
        },
    ],
}


class FleetDatabase:
    """One ``RecordStore`` per entity kind.

    A single instance is created per application and stored on
    ``app.state``; tests build a fresh one for isolation.
    """

    def __init__(self, seed: Optional[Dict[str, List[Record]]] = None) -> None:
        seed = seed or {}
        self._stores: Dict[str, RecordStore] = {
            kind: RecordStore(LABELS[kind], seed.get(kind, ())) for kind in ENTITY_KINDS
        }

    def store(self, kind: str) -> RecordStore:
        return self._stores[kind]

    @property
    def vessels(self) -> RecordStore:
        return self._stores[VESSELS]

    @property
    def crew(self) -> RecordStore:
        return self._stores[CREW]

    @property
    def maintenance(self) -> RecordStore:
        return self._stores[MAINTENANCE]

    @property
    def bookings(self) -> RecordStore:
        return self._stores[BOOKINGS]

    @property
    def inventory(self) -> RecordStore:
        return self._stores[INVENTORY]

    @contextmanager
    def snapshot(self) -> Iterator["FleetDatabase"]:
        """Hold every store lock for a consistent multi-store read."""
        acquired = []
        try:
            for kind in ENTITY_KINDS:
                lock = self._stores[kind].lock
                lock.acquire()
                acquired.append(lock)
            yield self
        finally:
            for lock in reversed(acquired):
                lock.release()


def init_db(seed: bool = True) -> FleetDatabase:
    """Create a database, optionally loaded with the demo fleet."""
    return FleetDatabase(SEED_DATA if seed else None)


def get_db(request: Request) -> FleetDatabase:
    """FastAPI dependency returning the application's database."""
    return request.app.state.db

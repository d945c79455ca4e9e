"""
CRUD service shared by all entity kinds.

``RecordService`` composes the validator with one ``RecordStore``.
The five entity kinds only differ in their schemas and their list
filters, so a single implementation serves every endpoint family.
``VesselService`` adds the vessel detail view with its dependents.
"""

import logging
from typing import Any, Dict, List, Mapping, Optional

from ..core.db import VESSELS, FleetDatabase, Record
from .join_service import JoinResolver
from .validation import validate_create, validate_update

logger = logging.getLogger(__name__)

# Filters compared against numeric record fields.  Query strings arrive
# as text, so these are converted to ``int`` before comparison.
NUMERIC_FILTER_FIELDS = {"vesselId"}


class _NoMatch(Exception):
    """A filter value that cannot equal any stored value."""


def _coerce_filter(field: str, value: str) -> Any:
    if field not in NUMERIC_FILTER_FIELDS:
        return value
    try:
        return int(value)
    except (TypeError, ValueError):
        raise _NoMatch(field) from None


class RecordService:
    """Validated CRUD over the store of one entity kind."""

    def __init__(self, db: FleetDatabase, kind: str) -> None:
        self.db = db
        self.kind = kind
        self.store = db.store(kind)

    @property
    def label(self) -> str:
        return self.store.label

    def list_records(self, filters: Optional[Mapping[str, Optional[str]]] = None) -> List[Record]:
        """Return the records matching every non-empty filter.

        A value that cannot be converted for a numeric field matches
        nothing, so the result is empty rather than an error.
        """
        criteria: Dict[str, Any] = {}
        for field, value in (filters or {}).items():
            if value is None or value == "":
                continue
            try:
                criteria[field] = _coerce_filter(field, value)
            except _NoMatch:
                logger.debug("Filter %s=%r cannot match any %s", field, value, self.label)
                return []
        return self.store.list(**criteria)

    def get_record(self, record_id: int) -> Record:
        return self.store.get(record_id)

    def create_record(self, payload: Any) -> Record:
        record = self.store.create(validate_create(self.kind, payload))
        logger.info("Created %s %s", self.label, record["id"])
        return record

    def update_record(self, record_id: int, payload: Any) -> Record:
        """Merge the supplied fields into an existing record.

        Existence is checked first, so an unknown id yields NotFound
        even when the payload is also invalid.
        """
        self.store.get(record_id)
        fields = validate_update(self.kind, payload)
        record = self.store.update(record_id, fields)
        logger.info("Updated %s %s (%s)", self.label, record_id, ", ".join(sorted(fields)) or "no changes")
        return record

    def delete_record(self, record_id: int) -> str:
        self.store.delete(record_id)
        logger.info("Deleted %s %s", self.label, record_id)
        return f"{self.label} deleted successfully"


class VesselService(RecordService):
    """Vessel CRUD plus the detail view with dependents."""

    def __init__(self, db: FleetDatabase) -> None:
        super().__init__(db, VESSELS)

    def get_vessel_detail(self, vessel_id: int) -> Record:
        with self.db.snapshot():
            vessel = self.get_record(vessel_id)
            return JoinResolver.expand_vessel(self.db, vessel)

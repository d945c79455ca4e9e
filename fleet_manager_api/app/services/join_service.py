"""
Join expansion of a vessel with its dependent records.

Relationships are resolved by scanning each dependent store for
records whose ``vesselId`` equals the vessel's id.  Only one level is
expanded.  A linear scan per store is fine at fleet scale; an index
from ``vesselId`` to record ids maintained on write would replace it
if record volumes grow.
"""

from typing import Tuple

from ..core.db import BOOKINGS, CREW, INVENTORY, MAINTENANCE, FleetDatabase, Record


class JoinResolver:
    """Attach dependent records to a primary record."""

    # (entity kind, key on the expanded record)
    VESSEL_DEPENDENTS: Tuple[Tuple[str, str], ...] = (
        (CREW, "crew"),
        (MAINTENANCE, "maintenance"),
        (BOOKINGS, "bookings"),
        (INVENTORY, "inventory"),
    )

    @classmethod
    def expand_vessel(cls, db: FleetDatabase, vessel: Record) -> Record:
        """Return ``vessel`` with one list per dependent kind.

        The vessel is assumed to exist; callers raise NotFound first.
        Every dependent key is present, with an empty list when the
        vessel has no records of that kind.
        """
        detail = dict(vessel)
        for kind, key in cls.VESSEL_DEPENDENTS:
            detail[key] = db.store(kind).list(vesselId=vessel["id"])
        return detail

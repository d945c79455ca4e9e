"""
Service layer for fleet analytics.

This module computes the aggregated views served under
``/analytics``: fleet overview, maintenance insights, booking
insights, crew utilization, inventory status and the dashboard
composite.

The helpers at module level are pure functions over lists of records.
They never mutate their input and tolerate empty collections (counts
are ``0`` and an average over nothing is ``0``).  ``AnalyticsService``
reads the stores under ``FleetDatabase.snapshot`` so every report is
computed from one consistent view within a single request; nothing is
cached between requests.

Windows use UTC and day granularity.  Every report accepts ``now`` so
callers (and tests) can pin the clock.
"""

from __future__ import annotations

import logging
from datetime import date, datetime, time, timedelta, timezone
from typing import Any, Dict, Iterable, List, Optional

from ..core.db import FleetDatabase, Record

logger = logging.getLogger(__name__)

UPCOMING_MAINTENANCE_DAYS = 30
LOW_STOCK_THRESHOLD = 10
UNKNOWN_VESSEL = "Unknown"


def _utc(now: Optional[datetime]) -> datetime:
    if now is None:
        return datetime.now(timezone.utc)
    if now.tzinfo is None:
        return now.replace(tzinfo=timezone.utc)
    return now.astimezone(timezone.utc)


def _parse_date(value: Any) -> Optional[date]:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(str(value)[:10])
    except (TypeError, ValueError):
        return None


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def count_where(records: Iterable[Record], field: str, value: Any) -> int:
    return sum(1 for record in records if record.get(field) == value)


def group_count(records: Iterable[Record], field: str) -> Dict[Any, int]:
    """Map each distinct value of ``field`` to its number of records."""
    counts: Dict[Any, int] = {}
    for record in records:
        key = record.get(field)
        counts[key] = counts.get(key, 0) + 1
    return counts


def group_count_by_vessel(
    records: Iterable[Record],
    vessels: Iterable[Record],
    skip_unassigned: bool = False,
) -> Dict[str, int]:
    """Count records per owning vessel, keyed by the vessel's name.

    A ``vesselId`` that no longer resolves is counted under
    ``"Unknown"``.  With ``skip_unassigned`` records without a vessel
    are left out entirely.
    """
    names = {vessel["id"]: vessel.get("name", UNKNOWN_VESSEL) for vessel in vessels}
    counts: Dict[str, int] = {}
    for record in records:
        vessel_id = record.get("vesselId")
        if vessel_id is None and skip_unassigned:
            continue
        name = names.get(vessel_id, UNKNOWN_VESSEL)
        counts[name] = counts.get(name, 0) + 1
    return counts


def total(records: Iterable[Record], field: str) -> float:
    return sum(record[field] for record in records if _is_number(record.get(field)))


def average(records: Iterable[Record], field: str) -> float:
    """Mean of ``field`` over the records carrying a number; ``0`` if none."""
    values = [record[field] for record in records if _is_number(record.get(field))]
    if not values:
        return 0
    return sum(values) / len(values)


def upcoming_maintenance(records: Iterable[Record], now: Optional[datetime] = None) -> List[Record]:
    """Pending maintenance scheduled between today and today + 30 days, inclusive."""
    today = _utc(now).date()
    horizon = today + timedelta(days=UPCOMING_MAINTENANCE_DAYS)
    result = []
    for record in records:
        if record.get("status") != "pending":
            continue
        scheduled = _parse_date(record.get("scheduledDate"))
        if scheduled is not None and today <= scheduled <= horizon:
            result.append(record)
    return result


def upcoming_bookings(records: Iterable[Record], now: Optional[datetime] = None) -> List[Record]:
    """Confirmed bookings starting strictly after ``now``.

    A booking starts at UTC midnight of its ``startDate``.
    """
    current = _utc(now)
    result = []
    for record in records:
        if record.get("status") != "confirmed":
            continue
        start = _parse_date(record.get("startDate"))
        if start is None:
            continue
        if datetime.combine(start, time.min, tzinfo=timezone.utc) > current:
            result.append(record)
    return result


def low_stock(records: Iterable[Record]) -> List[Record]:
    return [
        record
        for record in records
        if _is_number(record.get("quantity")) and record["quantity"] < LOW_STOCK_THRESHOLD
    ]


class AnalyticsService:
    """Report builders over a ``FleetDatabase``."""

    @classmethod
    def fleet_overview(cls, db: FleetDatabase) -> Dict[str, Any]:
        with db.snapshot():
            vessels = db.vessels.list()
        return {
            "totalVessels": len(vessels),
            "vesselsByStatus": group_count(vessels, "status"),
            "vesselsByType": group_count(vessels, "type"),
            "totalCapacity": total(vessels, "capacity"),
            "averageLength": average(vessels, "length"),
        }

    @classmethod
    def maintenance_insights(cls, db: FleetDatabase, now: Optional[datetime] = None) -> Dict[str, Any]:
        with db.snapshot():
            records = db.maintenance.list()
        return {
            "totalMaintenanceRecords": len(records),
            "maintenanceByStatus": group_count(records, "status"),
            "maintenanceByType": group_count(records, "type"),
            "upcomingMaintenance": len(upcoming_maintenance(records, now)),
        }

    @classmethod
    def booking_insights(cls, db: FleetDatabase, now: Optional[datetime] = None) -> Dict[str, Any]:
        with db.snapshot():
            bookings = db.bookings.list()
            vessels = db.vessels.list()
        return {
            "totalBookings": len(bookings),
            "bookingsByStatus": group_count(bookings, "status"),
            "bookingsByVessel": group_count_by_vessel(bookings, vessels),
            "upcomingBookings": len(upcoming_bookings(bookings, now)),
        }

    @classmethod
    def crew_utilization(cls, db: FleetDatabase) -> Dict[str, Any]:
        with db.snapshot():
            crew = db.crew.list()
            vessels = db.vessels.list()
        assigned = sum(1 for member in crew if member.get("vesselId") is not None)
        return {
            "totalCrew": len(crew),
            "crewByPosition": group_count(crew, "position"),
            "assignedCrew": assigned,
            "unassignedCrew": len(crew) - assigned,
            "crewByVessel": group_count_by_vessel(crew, vessels, skip_unassigned=True),
        }

    @classmethod
    def inventory_status(cls, db: FleetDatabase) -> Dict[str, Any]:
        with db.snapshot():
            items = db.inventory.list()
            vessels = db.vessels.list()
        return {
            "totalItems": len(items),
            "itemsByCategory": group_count(items, "category"),
            "lowStockItems": len(low_stock(items)),
            "itemsByVessel": group_count_by_vessel(items, vessels),
        }

    @classmethod
    def dashboard(cls, db: FleetDatabase, now: Optional[datetime] = None) -> Dict[str, Any]:
        """Return the composite snapshot used by the dashboard.

        All five stores are read under one snapshot so totals and
        derived counts describe the same state.
        """
        with db.snapshot():
            vessels = db.vessels.list()
            crew = db.crew.list()
            bookings = db.bookings.list()
            maintenance = db.maintenance.list()
            items = db.inventory.list()
        assigned = sum(1 for member in crew if member.get("vesselId") is not None)
        logger.debug(
            "Dashboard over %d vessels, %d crew, %d bookings, %d maintenance, %d items",
            len(vessels), len(crew), len(bookings), len(maintenance), len(items),
        )
        return {
            "fleet": {
                "total": len(vessels),
                "available": count_where(vessels, "status", "available"),
                "inService": count_where(vessels, "status", "in-service"),
                "maintenance": count_where(vessels, "status", "maintenance"),
            },
            "crew": {
                "total": len(crew),
                "assigned": assigned,
                "unassigned": len(crew) - assigned,
            },
            "bookings": {
                "total": len(bookings),
                "confirmed": count_where(bookings, "status", "confirmed"),
                "pending": count_where(bookings, "status", "pending"),
                "upcoming": len(upcoming_bookings(bookings, now)),
            },
            "maintenance": {
                "total": len(maintenance),
                "pending": count_where(maintenance, "status", "pending"),
                "completed": count_where(maintenance, "status", "completed"),
                "upcoming": len(upcoming_maintenance(maintenance, now)),
            },
            "inventory": {
                "total": len(items),
                "lowStock": len(low_stock(items)),
            },
        }

"""
Vessel endpoints for API v1.

CRUD over the fleet's vessels.  The detail view of a single vessel
also carries its crew, maintenance records, bookings and inventory.
"""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, Path, Query, status

from fleet_manager_api.app.core.db import FleetDatabase, get_db
from fleet_manager_api.app.core.responses import acknowledgement, envelope, list_envelope
from fleet_manager_api.app.services.record_service import VesselService

router = APIRouter()


@router.get("")
async def list_vessels(
    status: Optional[str] = Query(None, description="Filter by status (available, in-service, maintenance)"),
    type: Optional[str] = Query(None, description="Filter by vessel type, e.g. Motor Yacht"),
    db: FleetDatabase = Depends(get_db),
) -> Dict[str, Any]:
    """List vessels, optionally filtered by ``status`` and ``type``."""
    return list_envelope(VesselService(db).list_records({"status": status, "type": type}))


@router.get("/{vessel_id}")
async def get_vessel(
    vessel_id: int = Path(..., description="ID of the vessel"),
    db: FleetDatabase = Depends(get_db),
) -> Dict[str, Any]:
    """Retrieve a vessel together with its crew, maintenance, bookings and inventory."""
    return envelope(VesselService(db).get_vessel_detail(vessel_id))


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_vessel(
    payload: Any = Body(None),
    db: FleetDatabase = Depends(get_db),
) -> Dict[str, Any]:
    """Create a vessel.  ``name``, ``type``, ``length`` and ``capacity`` are required."""
    return envelope(VesselService(db).create_record(payload))


@router.put("/{vessel_id}")
async def update_vessel(
    vessel_id: int = Path(..., description="ID of the vessel"),
    payload: Any = Body(None),
    db: FleetDatabase = Depends(get_db),
) -> Dict[str, Any]:
    """Update a vessel.  Unspecified fields remain unchanged."""
    return envelope(VesselService(db).update_record(vessel_id, payload))


@router.delete("/{vessel_id}")
async def delete_vessel(
    vessel_id: int = Path(..., description="ID of the vessel"),
    db: FleetDatabase = Depends(get_db),
) -> Dict[str, Any]:
    """Delete a vessel.

    Dependent records are left in place; analytics report them under
    the ``Unknown`` vessel.
    """
    return acknowledgement(VesselService(db).delete_record(vessel_id))

"""
Maintenance endpoints for API v1.

Maintenance records schedule work on a vessel.  New records default
to ``pending``; pending work due within 30 days shows up in the
maintenance insights.
"""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, Path, Query, status

from fleet_manager_api.app.core.db import MAINTENANCE, FleetDatabase, get_db
from fleet_manager_api.app.core.responses import acknowledgement, envelope, list_envelope
from fleet_manager_api.app.services.record_service import RecordService

router = APIRouter()


def _service(db: FleetDatabase) -> RecordService:
    return RecordService(db, MAINTENANCE)


@router.get("")
async def list_maintenance(
    vessel_id: Optional[str] = Query(None, alias="vesselId", description="Filter by vessel"),
    status: Optional[str] = Query(None, description="Filter by status (pending, in-progress, completed, cancelled)"),
    db: FleetDatabase = Depends(get_db),
) -> Dict[str, Any]:
    return list_envelope(_service(db).list_records({"vesselId": vessel_id, "status": status}))


@router.get("/{record_id}")
async def get_maintenance_record(
    record_id: int = Path(..., description="ID of the maintenance record"),
    db: FleetDatabase = Depends(get_db),
) -> Dict[str, Any]:
    return envelope(_service(db).get_record(record_id))


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_maintenance_record(
    payload: Any = Body(None),
    db: FleetDatabase = Depends(get_db),
) -> Dict[str, Any]:
    """Schedule maintenance.  ``vesselId``, ``type`` and ``scheduledDate`` are required."""
    return envelope(_service(db).create_record(payload))


@router.put("/{record_id}")
async def update_maintenance_record(
    record_id: int = Path(..., description="ID of the maintenance record"),
    payload: Any = Body(None),
    db: FleetDatabase = Depends(get_db),
) -> Dict[str, Any]:
    return envelope(_service(db).update_record(record_id, payload))


@router.delete("/{record_id}")
async def delete_maintenance_record(
    record_id: int = Path(..., description="ID of the maintenance record"),
    db: FleetDatabase = Depends(get_db),
) -> Dict[str, Any]:
    return acknowledgement(_service(db).delete_record(record_id))

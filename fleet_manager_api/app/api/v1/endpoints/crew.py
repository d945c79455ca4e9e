"""
Crew endpoints for API v1.
"""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, Path, Query, status

from fleet_manager_api.app.core.db import CREW, FleetDatabase, get_db
from fleet_manager_api.app.core.responses import acknowledgement, envelope, list_envelope
from fleet_manager_api.app.services.record_service import RecordService

router = APIRouter()


def _service(db: FleetDatabase) -> RecordService:
    return RecordService(db, CREW)


@router.get("")
async def list_crew(
    vessel_id: Optional[str] = Query(None, alias="vesselId", description="Filter by assigned vessel"),
    position: Optional[str] = Query(None, description="Filter by position, e.g. Chef"),
    db: FleetDatabase = Depends(get_db),
) -> Dict[str, Any]:
    return list_envelope(_service(db).list_records({"vesselId": vessel_id, "position": position}))


@router.get("/{member_id}")
async def get_crew_member(
    member_id: int = Path(..., description="ID of the crew member"),
    db: FleetDatabase = Depends(get_db),
) -> Dict[str, Any]:
    return envelope(_service(db).get_record(member_id))


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_crew_member(
    payload: Any = Body(None),
    db: FleetDatabase = Depends(get_db),
) -> Dict[str, Any]:
    """Add a crew member.  ``vesselId`` may be omitted for unassigned crew."""
    return envelope(_service(db).create_record(payload))


@router.put("/{member_id}")
async def update_crew_member(
    member_id: int = Path(..., description="ID of the crew member"),
    payload: Any = Body(None),
    db: FleetDatabase = Depends(get_db),
) -> Dict[str, Any]:
    """Update a crew member; send ``"vesselId": null`` to unassign."""
    return envelope(_service(db).update_record(member_id, payload))


@router.delete("/{member_id}")
async def delete_crew_member(
    member_id: int = Path(..., description="ID of the crew member"),
    db: FleetDatabase = Depends(get_db),
) -> Dict[str, Any]:
    return acknowledgement(_service(db).delete_record(member_id))

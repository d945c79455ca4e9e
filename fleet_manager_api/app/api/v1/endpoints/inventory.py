"""
Inventory endpoints for API v1.
"""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, Path, Query, status

from fleet_manager_api.app.core.db import INVENTORY, FleetDatabase, get_db
from fleet_manager_api.app.core.responses import acknowledgement, envelope, list_envelope
from fleet_manager_api.app.services.record_service import RecordService

router = APIRouter()


def _service(db: FleetDatabase) -> RecordService:
    return RecordService(db, INVENTORY)


@router.get("")
async def list_inventory(
    vessel_id: Optional[str] = Query(None, alias="vesselId", description="Filter by vessel"),
    category: Optional[str] = Query(None, description="Filter by category, e.g. Safety"),
    db: FleetDatabase = Depends(get_db),
) -> Dict[str, Any]:
    return list_envelope(_service(db).list_records({"vesselId": vessel_id, "category": category}))


@router.get("/{item_id}")
async def get_inventory_item(
    item_id: int = Path(..., description="ID of the inventory item"),
    db: FleetDatabase = Depends(get_db),
) -> Dict[str, Any]:
    return envelope(_service(db).get_record(item_id))


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_inventory_item(
    payload: Any = Body(None),
    db: FleetDatabase = Depends(get_db),
) -> Dict[str, Any]:
    """Add an inventory item.  ``quantity`` may be ``0``."""
    return envelope(_service(db).create_record(payload))


@router.put("/{item_id}")
async def update_inventory_item(
    item_id: int = Path(..., description="ID of the inventory item"),
    payload: Any = Body(None),
    db: FleetDatabase = Depends(get_db),
) -> Dict[str, Any]:
    return envelope(_service(db).update_record(item_id, payload))


@router.delete("/{item_id}")
async def delete_inventory_item(
    item_id: int = Path(..., description="ID of the inventory item"),
    db: FleetDatabase = Depends(get_db),
) -> Dict[str, Any]:
    return acknowledgement(_service(db).delete_record(item_id))

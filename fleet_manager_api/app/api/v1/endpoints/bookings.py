"""
Booking endpoints for API v1.

These routes handle charter bookings of vessels.  A booking is
created as ``pending`` unless another status is supplied; confirmed
bookings starting in the future are counted as upcoming by the
booking insights.
"""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, Path, Query, status

from fleet_manager_api.app.core.db import BOOKINGS, FleetDatabase, get_db
from fleet_manager_api.app.core.responses import acknowledgement, envelope, list_envelope
from fleet_manager_api.app.services.record_service import RecordService

router = APIRouter()


def _service(db: FleetDatabase) -> RecordService:
    return RecordService(db, BOOKINGS)


@router.get("")
async def list_bookings(
    vessel_id: Optional[str] = Query(None, alias="vesselId", description="Filter by vessel"),
    status: Optional[str] = Query(None, description="Filter by status (pending, confirmed, completed, cancelled)"),
    db: FleetDatabase = Depends(get_db),
) -> Dict[str, Any]:
    return list_envelope(_service(db).list_records({"vesselId": vessel_id, "status": status}))


@router.get("/{booking_id}", summary="Get a single booking")
async def get_booking(
    booking_id: int = Path(..., description="ID of the booking"),
    db: FleetDatabase = Depends(get_db),
) -> Dict[str, Any]:
    return envelope(_service(db).get_record(booking_id))


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_booking(
    payload: Any = Body(None),
    db: FleetDatabase = Depends(get_db),
) -> Dict[str, Any]:
    """Create a booking.

    ``vesselId``, ``clientName``, ``startDate`` and ``endDate`` are
    required, and ``endDate`` may not precede ``startDate``.
    """
    return envelope(_service(db).create_record(payload))


@router.put("/{booking_id}", summary="Update an existing booking")
async def update_booking(
    booking_id: int = Path(..., description="ID of the booking"),
    payload: Any = Body(None),
    db: FleetDatabase = Depends(get_db),
) -> Dict[str, Any]:
    return envelope(_service(db).update_record(booking_id, payload))


@router.delete("/{booking_id}", summary="Delete a booking")
async def delete_booking(
    booking_id: int = Path(..., description="ID of the booking"),
    db: FleetDatabase = Depends(get_db),
) -> Dict[str, Any]:
    return acknowledgement(_service(db).delete_record(booking_id))

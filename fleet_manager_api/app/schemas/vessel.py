"""
Pydantic models for vessels.

A vessel is the primary record of the fleet; crew, maintenance,
bookings and inventory all point at it through ``vesselId``.  Vessel
payloads are strict: unknown fields are dropped on create and update.
"""

from typing import Literal, Optional

from pydantic import Field

from .common import Number, WireModel

VesselStatus = Literal["available", "in-service", "maintenance"]


class VesselCreate(WireModel):
    """Schema for creating a vessel."""

    name: str = Field(..., min_length=1, examples=["Ocean Serenity"])
    type: str = Field(..., min_length=1, examples=["Motor Yacht"])
    length: Number = Field(..., examples=[85])
    capacity: Number = Field(..., examples=[12])
    status: VesselStatus = "available"


class VesselUpdate(WireModel):
    """Schema for updating a vessel.

    All fields are optional; only provided fields will be updated.
    """

    name: Optional[str] = Field(None, min_length=1)
    type: Optional[str] = Field(None, min_length=1)
    length: Optional[Number] = None
    capacity: Optional[Number] = None
    status: Optional[VesselStatus] = None

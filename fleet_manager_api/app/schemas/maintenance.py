"""
Pydantic models for maintenance records.
"""

from datetime import date
from typing import Literal, Optional

from pydantic import Field

from .common import PassThroughModel, VesselId, WireModel

MaintenanceStatus = Literal["pending", "in-progress", "completed", "cancelled"]


class MaintenanceRecordCreate(WireModel):
    """Schema for scheduling maintenance on a vessel."""

    vessel_id: VesselId = Field(..., examples=[1])
    type: str = Field(..., min_length=1, examples=["Engine Service"])
    scheduled_date: date = Field(..., examples=["2025-11-01"])
    status: MaintenanceStatus = "pending"
    notes: str = ""


class MaintenanceRecordUpdate(PassThroughModel):
    """Schema for updating a maintenance record."""

    vessel_id: Optional[VesselId] = None
    type: Optional[str] = Field(None, min_length=1)
    scheduled_date: Optional[date] = None
    status: Optional[MaintenanceStatus] = None
    notes: Optional[str] = None

"""
Pydantic models for vessel bookings.

A booking reserves a vessel for a client between ``startDate`` and
``endDate`` (inclusive calendar days).  New bookings start as
``pending`` and move to ``confirmed`` once the charter is agreed.
"""

from datetime import date
from typing import Literal, Optional

from pydantic import Field, model_validator

from .common import PassThroughModel, VesselId, WireModel

BookingStatus = Literal["pending", "confirmed", "completed", "cancelled"]


class BookingCreate(WireModel):
    """Schema for creating a booking."""

    vessel_id: VesselId = Field(..., examples=[1])
    client_name: str = Field(..., min_length=1, examples=["John Doe"])
    start_date: date = Field(..., examples=["2025-11-15"])
    end_date: date = Field(..., examples=["2025-11-20"])
    status: BookingStatus = "pending"

    @model_validator(mode="after")
    def check_dates(self) -> "BookingCreate":
        if self.end_date < self.start_date:
            raise ValueError("endDate must not be before startDate")
        return self


class BookingUpdate(PassThroughModel):
    """Schema for updating a booking.

    All fields are optional; omitted fields keep their stored values.
    """

    vessel_id: Optional[VesselId] = None
    client_name: Optional[str] = Field(None, min_length=1)
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    status: Optional[BookingStatus] = None

"""
Pydantic models for inventory items.

Items are counted per vessel.  ``quantity`` may legitimately be ``0``
(an exhausted stock is still tracked), and ``lastChecked`` defaults to
the current UTC date.
"""

from datetime import date, datetime, timezone
from typing import Optional

from pydantic import Field

from .common import Number, PassThroughModel, VesselId, WireModel


def _today() -> date:
    return datetime.now(timezone.utc).date()


class InventoryItemCreate(WireModel):
    """Schema for adding an inventory item."""

    vessel_id: VesselId = Field(..., examples=[1])
    item: str = Field(..., min_length=1, examples=["Life Jackets"])
    quantity: Number = Field(..., examples=[15])
    category: str = "General"
    unit: str = "units"
    last_checked: date = Field(default_factory=_today)


class InventoryItemUpdate(PassThroughModel):
    """Schema for updating an inventory item."""

    vessel_id: Optional[VesselId] = None
    item: Optional[str] = Field(None, min_length=1)
    quantity: Optional[Number] = None
    category: Optional[str] = None
    unit: Optional[str] = None
    last_checked: Optional[date] = None

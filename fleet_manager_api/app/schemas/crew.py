"""
Pydantic models for crew members.

A crew member may be unassigned (``vesselId`` is ``null``).  Updates
may set ``vesselId`` to ``null`` explicitly to take someone off a
vessel, and unknown fields supplied on update are kept on the record.
"""

from typing import List, Optional

from pydantic import Field

from .common import PassThroughModel, VesselId, WireModel


class CrewMemberCreate(WireModel):
    """Schema for creating a crew member."""

    name: str = Field(..., min_length=1, examples=["Captain John Smith"])
    position: str = Field(..., min_length=1, examples=["Captain"])
    vessel_id: Optional[VesselId] = None
    certifications: List[str] = Field(default_factory=list, examples=[["Master 500 Ton"]])


class CrewMemberUpdate(PassThroughModel):
    """Schema for updating a crew member."""

    name: Optional[str] = Field(None, min_length=1)
    position: Optional[str] = Field(None, min_length=1)
    vessel_id: Optional[VesselId] = None
    certifications: Optional[List[str]] = None

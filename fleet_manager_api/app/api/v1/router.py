"""
Top‑level router for version 1 of the API.

This router aggregates the per‑entity routers (vessels, crew,
maintenance, bookings, inventory), the analytics reports and the
info/health routes.  When new domains are introduced, update this file
to include their routers.
"""

from fastapi import APIRouter

from .endpoints import (
    vessels,
    crew,
    maintenance,
    bookings,
    inventory,
    analytics,
    info,
)

router = APIRouter()

router.include_router(info.router, tags=["info"])
router.include_router(vessels.router, prefix="/vessels", tags=["vessels"])
router.include_router(crew.router, prefix="/crew", tags=["crew"])
router.include_router(maintenance.router, prefix="/maintenance", tags=["maintenance"])
router.include_router(bookings.router, prefix="/bookings", tags=["bookings"])
router.include_router(inventory.router, prefix="/inventory", tags=["inventory"])
router.include_router(analytics.router, prefix="/analytics", tags=["analytics"])
